"""Recommendation text, keyed by the value each section branches on."""

from __future__ import annotations

from dataclasses import dataclass

from wellness.assessment.models import DietaryPreference, Lifestyle


@dataclass(frozen=True, slots=True)
class Recommendation:
    title: str
    lines: tuple[str, ...]


EXERCISE_TITLE = "Exercise Recommendations"
SLEEP_TITLE = "Sleep Recommendations"
NUTRITION_TITLE = "Nutritional Recommendations"
LIFESTYLE_TITLE = "Lifestyle Recommendations"

# Anything under this many hours gets the "increase sleep" advice.
RECOMMENDED_SLEEP_HOURS = 7

EXERCISE_LOW_IMPACT = Recommendation(
    title=EXERCISE_TITLE,
    lines=(
        "Start with low-impact activities like walking or swimming",
        "Aim for 150 minutes of moderate activity per week",
        "Include strength training 2-3 times per week",
    ),
)

EXERCISE_BALANCED = Recommendation(
    title=EXERCISE_TITLE,
    lines=(
        "Maintain a balanced exercise routine",
        "Mix cardio with strength training",
        "Consider adding flexibility exercises",
    ),
)

SLEEP_INCREASE = Recommendation(
    title=SLEEP_TITLE,
    lines=(
        "Aim to increase sleep to 7-8 hours per night",
        "Establish a regular sleep schedule",
        "Create a relaxing bedtime routine",
    ),
)

SLEEP_MAINTAIN = Recommendation(
    title=SLEEP_TITLE,
    lines=(
        "Maintain your good sleep habits",
        "Consider sleep quality improvements",
    ),
)

NUTRITION_BY_DIET: dict[DietaryPreference, Recommendation] = {
    DietaryPreference.vegetarian: Recommendation(
        title=NUTRITION_TITLE,
        lines=(
            "Focus on complete protein sources (eggs, dairy, legumes)",
            "Monitor B12 and iron intake",
        ),
    ),
    DietaryPreference.vegan: Recommendation(
        title=NUTRITION_TITLE,
        lines=(
            "Ensure adequate B12 supplementation",
            "Combine protein sources for complete amino acids",
            "Monitor iron, calcium, and vitamin D intake",
        ),
    ),
}

NUTRITION_GENERAL = Recommendation(
    title=NUTRITION_TITLE,
    lines=(
        "Choose lean protein sources",
        "Include a variety of colorful vegetables",
        "Limit processed foods",
    ),
)

# Lifestyle.none has no entry: that section is skipped entirely.
LIFESTYLE_BY_HABIT: dict[Lifestyle, Recommendation] = {
    Lifestyle.smoking: Recommendation(
        title=LIFESTYLE_TITLE,
        lines=(
            "Consider smoking cessation programs",
            "Consult healthcare provider about cessation aids",
        ),
    ),
    Lifestyle.alcohol: Recommendation(
        title=LIFESTYLE_TITLE,
        lines=(
            "Limit alcohol consumption",
            "Consider alcohol-free days",
            "Stay hydrated",
        ),
    ),
}


def nutrition_for(diet: DietaryPreference) -> Recommendation:
    return NUTRITION_BY_DIET.get(diet, NUTRITION_GENERAL)


def lifestyle_for(habit: Lifestyle) -> Recommendation | None:
    return LIFESTYLE_BY_HABIT.get(habit)
