"""Diabetes metrics derived from macronutrient grams."""

from dataclasses import replace

from diet_tracker.domain.errors import ValidationError
from diet_tracker.domain.nutrients import Nutrients, round_value

KCAL_PER_GRAM_PROTEIN = 4
KCAL_PER_GRAM_CARBOHYDRATE = 4
KCAL_PER_GRAM_FAT = 9

GRAMS_PER_CARBOHYDRATE_EXCHANGE = 10
KCAL_PER_PROTEIN_AND_FAT_EQUIVALENT = 100


def carbohydrate_exchange(carbohydrate: float, fibre: float) -> float:
    """Return carbohydrate exchanges, one per 10 g of digestible carbohydrate.

    Fibre is not absorbed, so it is subtracted first. When fibre exceeds
    carbohydrate the result is clamped to zero.
    """
    _ensure_non_negative(carbohydrate=carbohydrate, fibre=fibre)
    digestible = max(carbohydrate - fibre, 0.0)
    return round_value(digestible / GRAMS_PER_CARBOHYDRATE_EXCHANGE)


def protein_and_fat_equivalent(protein: float, fat: float) -> float:
    """Return protein-and-fat equivalents, one per 100 kcal."""
    _ensure_non_negative(protein=protein, fat=fat)
    kcal = protein * KCAL_PER_GRAM_PROTEIN + fat * KCAL_PER_GRAM_FAT
    return round_value(kcal / KCAL_PER_PROTEIN_AND_FAT_EQUIVALENT)


def compute_derived_nutrients(
    carbohydrate: float, fibre: float, protein: float, fat: float
) -> tuple[float, float]:
    """Return (carbohydrate exchange, protein-and-fat equivalent)."""
    return (
        carbohydrate_exchange(carbohydrate, fibre),
        protein_and_fat_equivalent(protein, fat),
    )


def with_derived(nutrients: Nutrients) -> Nutrients:
    """Return nutrients with both diabetes metrics recomputed."""
    exchange, equivalent = compute_derived_nutrients(
        nutrients.carbohydrate, nutrients.fibre, nutrients.protein, nutrients.fat
    )
    return replace(
        nutrients,
        carbohydrate_exchange=exchange,
        protein_and_fat_equivalent=equivalent,
    )


def _ensure_non_negative(**values: float) -> None:
    for name, value in values.items():
        if value < 0:
            raise ValidationError(f"{name} must not be negative, got {value}")
