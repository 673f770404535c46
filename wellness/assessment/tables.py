"""Static calculation tables — configuration only."""

from __future__ import annotations

from dataclasses import dataclass

from wellness.assessment.models import ActivityLevel


# Table order matters: lookup walks it and the first match wins.
ACTIVITY_MULTIPLIERS: dict[ActivityLevel, float] = {
    ActivityLevel.sedentary: 1.2,
    ActivityLevel.lightly_active: 1.375,
    ActivityLevel.moderately_active: 1.55,
    ActivityLevel.very_active: 1.725,
}


@dataclass(frozen=True, slots=True)
class MacroRatio:
    carbs: float = 0.50
    protein: float = 0.20
    fats: float = 0.30


MACRO_RATIO = MacroRatio()

KCAL_PER_GRAM: dict[str, float] = {
    "carbs": 4.0,
    "protein": 4.0,
    "fats": 9.0,
}


@dataclass(frozen=True, slots=True)
class BmiThresholds:
    """Exclusive upper bounds, checked in ascending order."""

    underweight: float = 18.5
    normal: float = 24.9
    overweight: float = 29.9


BMI_THRESHOLDS = BmiThresholds()
