"""Daily calorie and macronutrient targets.

Calories come from the Mifflin-St Jeor basal metabolic rate multiplied by
an activity factor:

    men:   BMR = 10 * weight(kg) + 6.25 * height(cm) - 5 * age + 5
    women: BMR = 10 * weight(kg) + 6.25 * height(cm) - 5 * age - 161

Macronutrients are fixed shares of the calorie target (protein 20%,
carbohydrate 50%, fat 30%) converted to grams with 4/4/9 kcal per gram.
"""

from diet_tracker.domain.errors import ValidationError
from diet_tracker.domain.models import Activity, DailyTargets, Sex, UserProfile
from diet_tracker.services.diabetes import (
    KCAL_PER_GRAM_CARBOHYDRATE,
    KCAL_PER_GRAM_FAT,
    KCAL_PER_GRAM_PROTEIN,
)

ACTIVITY_MULTIPLIERS = {
    Activity.SEDENTARY: 1.2,
    Activity.LIGHT: 1.375,
    Activity.MODERATE: 1.55,
    Activity.ACTIVE: 1.725,
    Activity.VERY_ACTIVE: 1.9,
}

PROTEIN_SHARE = 0.20
CARBOHYDRATE_SHARE = 0.50
FAT_SHARE = 0.30


def basal_metabolic_rate(sex: Sex, age: int, height: int, weight: int) -> float:
    """Return BMR in kcal/day."""
    base = 10 * weight + 6.25 * height - 5 * age
    if sex == Sex.MALE:
        return base + 5
    return base - 161


def calculate_calories_per_day(profile: UserProfile) -> int:
    """Return the daily calorie target, or 0 for an incomplete profile."""
    _validate(profile)
    if not _is_complete(profile):
        return 0
    bmr = basal_metabolic_rate(
        profile.sex, profile.age, profile.height, profile.weight
    )
    return max(round(bmr * ACTIVITY_MULTIPLIERS[profile.activity]), 0)


def calculate_daily_protein(calories_per_day: int) -> int:
    return round(calories_per_day * PROTEIN_SHARE / KCAL_PER_GRAM_PROTEIN)


def calculate_daily_carbohydrate(calories_per_day: int) -> int:
    return round(
        calories_per_day * CARBOHYDRATE_SHARE / KCAL_PER_GRAM_CARBOHYDRATE
    )


def calculate_daily_fat(calories_per_day: int) -> int:
    return round(calories_per_day * FAT_SHARE / KCAL_PER_GRAM_FAT)


def compute_daily_targets(profile: UserProfile) -> DailyTargets:
    """Return calorie and macronutrient targets for a biometric profile."""
    calories = calculate_calories_per_day(profile)
    return DailyTargets(
        calories_per_day=calories,
        protein_per_day=calculate_daily_protein(calories),
        carbohydrate_per_day=calculate_daily_carbohydrate(calories),
        fat_per_day=calculate_daily_fat(calories),
    )


def _is_complete(profile: UserProfile) -> bool:
    return (
        profile.sex is not None
        and profile.activity is not None
        and profile.age > 0
        and profile.height > 0
        and profile.weight > 0
    )


def _validate(profile: UserProfile) -> None:
    for name in ("age", "height", "weight"):
        value = getattr(profile, name)
        if value < 0:
            raise ValidationError(f"{name} must not be negative, got {value}")
