"""Shared fixtures for the test suite."""

from __future__ import annotations

from typing import Any

import pytest

from wellness.assessment.collector import Prompter
from wellness.assessment.models import UserProfile


# ---------------------------------------------------------------------------
# Scripted console (no real stdin/stdout needed)
# ---------------------------------------------------------------------------

class ScriptedConsole:
    """Feeds canned answers to prompts and records everything shown."""

    def __init__(self, answers: list[str] | None = None):
        self._answers = list(answers or [])
        self.prompts: list[str] = []
        self.output: list[str] = []

    def read(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self._answers:
            raise EOFError
        return self._answers.pop(0)

    def write(self, text: str) -> None:
        self.output.append(text)

    @property
    def remaining(self) -> int:
        return len(self._answers)

    @property
    def text(self) -> str:
        return "\n".join(self.output)


def scripted(answers: list[str]) -> tuple[ScriptedConsole, Prompter]:
    console = ScriptedConsole(answers)
    return console, Prompter(read=console.read, write=console.write)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

MALE_ANSWERS = ["30", "male", "1.75", "70", "sedentary", "8", "none", "none"]
FEMALE_ANSWERS = ["25", "female", "1.65", "60", "moderately active", "6", "none", "vegan"]


@pytest.fixture()
def male_answers() -> list[str]:
    return list(MALE_ANSWERS)


@pytest.fixture()
def female_answers() -> list[str]:
    return list(FEMALE_ANSWERS)


def make_profile(**overrides: Any) -> UserProfile:
    """Helper to build a valid, not yet calculated profile."""
    defaults: dict[str, Any] = dict(
        age=30,
        gender="male",
        height=1.75,
        weight=70.0,
        activity_level="sedentary",
        sleep_hours=8,
        lifestyle="none",
        dietary_pref="none",
    )
    defaults.update(overrides)
    return UserProfile(**defaults)


@pytest.fixture()
def profile() -> UserProfile:
    return make_profile()
