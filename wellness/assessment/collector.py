"""Interactive profile collection.

Every field is asked for until a valid answer arrives; bad input is
reported and re-prompted, never raised. The only way out of a prompt
loop without an answer is the input stream closing.
"""

from __future__ import annotations

import logging
import re
from typing import Callable, TypeVar

from wellness.assessment.errors import InputClosedError
from wellness.assessment.models import (
    AGE_BOUNDS,
    HEIGHT_BOUNDS,
    SLEEP_BOUNDS,
    WEIGHT_BOUNDS,
    ActivityLevel,
    Choice,
    DietaryPreference,
    Gender,
    Lifestyle,
    NumericBounds,
    UserProfile,
)

logger = logging.getLogger(__name__)

N = TypeVar("N", int, float)
C = TypeVar("C", bound=Choice)

# Plain ASCII decimal literals only; no digit separators, no nan or inf.
NUMBER_PATTERNS: dict[type, re.Pattern[str]] = {
    int: re.compile(r"[+-]?[0-9]+"),
    float: re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?"),
}

INVALID_CHOICE_MESSAGE = "Invalid input. Please try again."


class Prompter:
    """Console seam: `read` shows a prompt and returns one line, `write` prints one."""

    def __init__(
        self,
        read: Callable[[str], str] | None = None,
        write: Callable[[str], None] | None = None,
    ) -> None:
        self._read = read or input
        self._write = write or print

    def ask(self, prompt: str) -> str:
        try:
            return self._read(prompt)
        except EOFError as exc:
            raise InputClosedError("input ended before the profile was complete") from exc

    def say(self, text: str) -> None:
        self._write(text)


def _format_bound(value: float) -> str:
    return f"{value:g}"


def parse_number(raw: str, kind: type[N]) -> N | None:
    """Parse the first token of `raw` as `kind`; the rest of the line is discarded."""
    tokens = raw.split()
    if not tokens:
        return None
    if not NUMBER_PATTERNS[kind].fullmatch(tokens[0]):
        return None
    return kind(tokens[0])


def ask_number(prompter: Prompter, prompt: str, kind: type[N], bounds: NumericBounds) -> N:
    while True:
        raw = prompter.ask(prompt)
        value = parse_number(raw, kind)
        if value is not None and bounds.contains(value):
            return value
        logger.info("Rejected %r for prompt %r", raw, prompt)
        prompter.say(
            "Invalid input. Please enter a value between "
            f"{_format_bound(bounds.minimum)} and {_format_bound(bounds.maximum)}"
        )


def ask_choice(prompter: Prompter, prompt: str, parse: Callable[[str], C | None]) -> C:
    """Re-prompt until `parse` accepts the answer; returns what `parse` returned."""
    while True:
        raw = prompter.ask(prompt)
        choice = parse(raw)
        if choice is not None:
            return choice
        logger.info("Rejected %r for prompt %r", raw, prompt)
        prompter.say(INVALID_CHOICE_MESSAGE)


def collect_profile(prompter: Prompter | None = None) -> UserProfile:
    """Ask for all eight profile fields in order and return a validated profile."""
    prompter = prompter or Prompter()

    age = ask_number(prompter, "Enter your age: ", int, AGE_BOUNDS)
    gender = ask_choice(
        prompter, f"Enter your gender ({'/'.join(Gender.labels())}): ", Gender.parse
    )
    height = ask_number(prompter, "Enter your height (in meters): ", float, HEIGHT_BOUNDS)
    weight = ask_number(prompter, "Enter your weight (in kg): ", float, WEIGHT_BOUNDS)
    activity_level = ask_choice(
        prompter,
        f"Enter your activity level ({', '.join(ActivityLevel.labels())}): ",
        ActivityLevel.parse,
    )
    sleep_hours = ask_number(prompter, "Enter your hours of sleep per night: ", int, SLEEP_BOUNDS)
    lifestyle = ask_choice(
        prompter,
        f"Enter your lifestyle habits ({', '.join(Lifestyle.labels())}): ",
        Lifestyle.parse,
    )
    dietary_pref = ask_choice(
        prompter,
        f"Enter your dietary preferences ({', '.join(DietaryPreference.labels())}): ",
        DietaryPreference.parse,
    )

    profile = UserProfile(
        age=age,
        gender=gender,
        height=height,
        weight=weight,
        activity_level=activity_level,
        sleep_hours=sleep_hours,
        lifestyle=lifestyle,
        dietary_pref=dietary_pref,
    )
    logger.info("Collected profile for a %d-year-old %s", profile.age, profile.gender.value)
    return profile
