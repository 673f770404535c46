"""Report presenter — turns a calculated profile into the printed report.

Pure formatting: every function returns text or lines, nothing is printed
here. Recommendation sections each branch on a single profile field.
"""

from __future__ import annotations

from wellness.assessment import calculator
from wellness.assessment.errors import MetricsNotCalculatedError
from wellness.assessment.models import UserProfile
from wellness.assessment.recommendations import (
    EXERCISE_BALANCED,
    EXERCISE_LOW_IMPACT,
    RECOMMENDED_SLEEP_HOURS,
    SLEEP_INCREASE,
    SLEEP_MAINTAIN,
    Recommendation,
    lifestyle_for,
    nutrition_for,
)
from wellness.assessment.tables import BMI_THRESHOLDS

RESULTS_HEADER = "=== Wellness Assessment Results ==="
RECOMMENDATIONS_HEADER = "=== Personalized Recommendations ==="


def _require(profile: UserProfile, field: str) -> float:
    value = getattr(profile, field)
    if value is None:
        raise MetricsNotCalculatedError(field)
    return value


def bmi_section(profile: UserProfile) -> list[str]:
    bmi = _require(profile, "bmi")
    category = calculator.classify_bmi(bmi)
    return [f"BMI: {bmi:.2f} - Category: {category.value}"]


def energy_section(profile: UserProfile) -> list[str]:
    bmr = _require(profile, "bmr")
    calories = _require(profile, "daily_calories")
    return [
        f"BMR: {bmr:.2f} calories/day",
        f"Daily Caloric Needs: {calories:.2f} calories",
    ]


def macro_section(profile: UserProfile) -> list[str]:
    macros = calculator.macro_targets(_require(profile, "daily_calories"))
    return [
        "Recommended Macronutrient Distribution:",
        f"  - Carbohydrates: {macros.carbs_g:.2f} grams",
        f"  - Protein: {macros.protein_g:.2f} grams",
        f"  - Fats: {macros.fats_g:.2f} grams",
    ]


def exercise_recommendation(bmi: float) -> Recommendation:
    # Compared against the raw "normal" threshold, not the BMI category.
    if bmi >= BMI_THRESHOLDS.normal:
        return EXERCISE_LOW_IMPACT
    return EXERCISE_BALANCED


def sleep_recommendation(sleep_hours: int) -> Recommendation:
    if sleep_hours < RECOMMENDED_SLEEP_HOURS:
        return SLEEP_INCREASE
    return SLEEP_MAINTAIN


def recommendations_for(profile: UserProfile) -> list[Recommendation]:
    """Exercise, sleep and nutrition always; lifestyle only for a declared habit."""
    sections = [
        exercise_recommendation(_require(profile, "bmi")),
        sleep_recommendation(profile.sleep_hours),
        nutrition_for(profile.dietary_pref),
    ]
    habit = lifestyle_for(profile.lifestyle)
    if habit is not None:
        sections.append(habit)
    return sections


def render_recommendation(recommendation: Recommendation) -> list[str]:
    return [f"{recommendation.title}:"] + [f"- {line}" for line in recommendation.lines]


def build_report_lines(profile: UserProfile) -> list[str]:
    lines = ["", RESULTS_HEADER, ""]
    lines += bmi_section(profile)
    lines.append("")
    lines += energy_section(profile)
    lines.append("")
    lines += macro_section(profile)
    lines += ["", RECOMMENDATIONS_HEADER]
    for recommendation in recommendations_for(profile):
        lines.append("")
        lines += render_recommendation(recommendation)
    return lines


def render_report(profile: UserProfile) -> str:
    """Full report text for a profile that has been through the calculator."""
    return "\n".join(build_report_lines(profile))
