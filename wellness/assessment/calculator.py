"""Pure metric functions — closed-form arithmetic and table lookups, no I/O."""

from __future__ import annotations

import logging

from wellness.assessment.errors import UnknownActivityLevelError
from wellness.assessment.models import (
    ActivityLevel,
    BmiCategory,
    Gender,
    MacroTargets,
    UserProfile,
)
from wellness.assessment.tables import (
    ACTIVITY_MULTIPLIERS,
    BMI_THRESHOLDS,
    KCAL_PER_GRAM,
    MACRO_RATIO,
)

logger = logging.getLogger(__name__)


def body_mass_index(weight: float, height: float) -> float:
    """BMI from kilograms and meters."""
    return weight / height**2


def basal_metabolic_rate(gender: Gender, weight: float, height: float, age: int) -> float:
    """BMR in kcal/day; height is given in meters and converted to centimeters."""
    height_cm = height * 100
    if gender == Gender.male:
        return 88.362 + (13.397 * weight) + (4.799 * height_cm) - (5.677 * age)
    return 447.593 + (9.247 * weight) + (3.098 * height_cm) - (4.330 * age)


def activity_multiplier(level: ActivityLevel) -> float:
    """First table entry matching `level`. Raises UnknownActivityLevelError otherwise."""
    for label, multiplier in ACTIVITY_MULTIPLIERS.items():
        if label == level:
            return multiplier
    raise UnknownActivityLevelError(level)


def daily_calories(bmr: float, level: ActivityLevel) -> float:
    return bmr * activity_multiplier(level)


def classify_bmi(bmi: float) -> BmiCategory:
    if bmi < BMI_THRESHOLDS.underweight:
        return BmiCategory.underweight
    if bmi < BMI_THRESHOLDS.normal:
        return BmiCategory.normal
    if bmi < BMI_THRESHOLDS.overweight:
        return BmiCategory.overweight
    return BmiCategory.obese


def macro_targets(calories: float) -> MacroTargets:
    """Split `calories` by the fixed macro ratio and convert each share to grams."""
    return MacroTargets(
        carbs_g=calories * MACRO_RATIO.carbs / KCAL_PER_GRAM["carbs"],
        protein_g=calories * MACRO_RATIO.protein / KCAL_PER_GRAM["protein"],
        fats_g=calories * MACRO_RATIO.fats / KCAL_PER_GRAM["fats"],
    )


def macro_calories(targets: MacroTargets) -> float:
    """Calories represented by a set of macro grams."""
    return (
        targets.carbs_g * KCAL_PER_GRAM["carbs"]
        + targets.protein_g * KCAL_PER_GRAM["protein"]
        + targets.fats_g * KCAL_PER_GRAM["fats"]
    )


def calculate_metrics(profile: UserProfile) -> UserProfile:
    """Fill in bmi, bmr and daily_calories on `profile` and return it."""
    profile.bmi = body_mass_index(profile.weight, profile.height)
    profile.bmr = basal_metabolic_rate(
        profile.gender, profile.weight, profile.height, profile.age
    )
    profile.daily_calories = daily_calories(profile.bmr, profile.activity_level)
    logger.debug(
        "Calculated metrics: bmi=%.4f bmr=%.4f daily_calories=%.4f",
        profile.bmi,
        profile.bmr,
        profile.daily_calories,
    )
    return profile
