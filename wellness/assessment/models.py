"""User profile contract — Pydantic v2 models and closed enumerations."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, Field


class Choice(str, Enum):
    """Closed set of lowercase labels a user may type in any case."""

    @classmethod
    def parse(cls, raw: str) -> Choice | None:
        """Return the member matching `raw` case-insensitively, or None.

        Runs of whitespace collapse to a single space, so "Very   Active"
        still matches "very active".
        """
        normalized = " ".join(raw.split()).lower()
        for member in cls:
            if member.value == normalized:
                return member
        return None

    @classmethod
    def labels(cls) -> list[str]:
        return [member.value for member in cls]


class Gender(Choice):
    male = "male"
    female = "female"


class ActivityLevel(Choice):
    sedentary = "sedentary"
    lightly_active = "lightly active"
    moderately_active = "moderately active"
    very_active = "very active"


class Lifestyle(Choice):
    smoking = "smoking"
    alcohol = "alcohol"
    none = "none"


class DietaryPreference(Choice):
    vegetarian = "vegetarian"
    vegan = "vegan"
    none = "none"


class BmiCategory(str, Enum):
    underweight = "Underweight"
    normal = "Normal weight"
    overweight = "Overweight"
    obese = "Obese"


@dataclass(frozen=True, slots=True)
class NumericBounds:
    minimum: float
    maximum: float

    def contains(self, value: float) -> bool:
        # NaN fails both comparisons, so it is never contained.
        return self.minimum <= value <= self.maximum


AGE_BOUNDS = NumericBounds(1, 120)
HEIGHT_BOUNDS = NumericBounds(0.5, 2.5)  # meters
WEIGHT_BOUNDS = NumericBounds(20.0, 300.0)  # kilograms
SLEEP_BOUNDS = NumericBounds(0, 24)  # hours per night


class UserProfile(BaseModel):
    """Single user's answers plus the metrics derived from them.

    The derived fields stay None until the calculator fills them in.
    """

    age: int = Field(ge=AGE_BOUNDS.minimum, le=AGE_BOUNDS.maximum)
    gender: Gender
    height: float = Field(ge=HEIGHT_BOUNDS.minimum, le=HEIGHT_BOUNDS.maximum)
    weight: float = Field(ge=WEIGHT_BOUNDS.minimum, le=WEIGHT_BOUNDS.maximum)
    activity_level: ActivityLevel
    sleep_hours: int = Field(ge=SLEEP_BOUNDS.minimum, le=SLEEP_BOUNDS.maximum)
    lifestyle: Lifestyle
    dietary_pref: DietaryPreference

    bmi: float | None = None
    bmr: float | None = None
    daily_calories: float | None = None

    model_config = {"validate_assignment": True}


class MacroTargets(BaseModel):
    """Daily macronutrient targets in grams (unrounded)."""

    carbs_g: float
    protein_g: float
    fats_g: float
