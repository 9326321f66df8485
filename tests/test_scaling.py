"""Tests for proportional rescaling."""

from uuid import uuid4

import pytest

from diet_tracker.domain.errors import ValidationError
from diet_tracker.domain.meals import Meal, MealTotals
from diet_tracker.domain.nutrients import Nutrients
from diet_tracker.services.aggregation import aggregate_meal, rebuild_meal
from diet_tracker.services.scaling import scale_to_amount
from tests.conftest import make_product


def test_banana_scaled_to_150_grams() -> None:
    banana = make_product()

    scaled = scale_to_amount(banana, 150)

    assert scaled.amount == 150.0
    assert scaled.nutrients.protein == 1.65
    assert scaled.nutrients.carbohydrate == 34.5
    assert scaled.nutrients.kcal == 144.0
    assert scaled.nutrients.carbohydrate_exchange == 3.06
    assert scaled.nutrients.protein_and_fat_equivalent == 0.11
    assert scaled.id == banana.id
    assert banana.amount == 100.0
    assert banana.nutrients.carbohydrate == 23.0


def test_scaling_there_and_back_restores_nutrients() -> None:
    banana = make_product()

    restored = scale_to_amount(scale_to_amount(banana, 150), 100)

    assert restored.amount == 100.0
    # Rounding at 150 g shrinks by 2/3 on the way back to 100 g.
    for name, value in banana.nutrients.as_dict().items():
        assert getattr(restored.nutrients, name) == pytest.approx(value, abs=0.01)


def test_scaling_through_a_tiny_amount_loses_precision() -> None:
    banana = make_product()

    tiny = scale_to_amount(banana, 1)
    restored = scale_to_amount(tiny, 100)

    assert tiny.nutrients.protein == 0.01
    assert tiny.nutrients.fat == 0.0
    assert restored.nutrients.protein == 1.0
    assert restored.nutrients.fat == 0.0
    # Rounding at 1 g is amplified a hundredfold on the way back to 100 g.
    for name, value in banana.nutrients.as_dict().items():
        assert getattr(restored.nutrients, name) == pytest.approx(value, abs=0.5)


@pytest.mark.parametrize("amount", [0, -10])
def test_non_positive_target_amount_is_rejected(amount: float) -> None:
    with pytest.raises(ValidationError):
        scale_to_amount(make_product(), amount)


def test_source_without_amount_cannot_be_scaled() -> None:
    with pytest.raises(ValidationError):
        scale_to_amount(make_product(amount=0), 100)


def test_meal_scaling_scales_every_line() -> None:
    rice = make_product("Rice", amount=30, protein=2.1, carbohydrate=23.4, kcal=105)
    chicken = make_product(
        "Chicken", amount=70, protein=21.7, carbohydrate=0, fat=2.5, fibre=0, kcal=115.5
    )
    meal = rebuild_meal(_empty_meal(), [rice, chicken])

    doubled = scale_to_amount(meal, 200)

    assert doubled.amount == 200.0
    assert [line.amount for line in doubled.products] == [60.0, 140.0]
    assert doubled.nutrients.protein == 47.6
    assert doubled.nutrients.kcal == 441.0
    assert meal.amount == 100.0


def test_scaled_meal_amount_is_sum_of_rounded_lines() -> None:
    lines = [make_product(name, amount=100) for name in ("Rice", "Beans", "Corn")]
    meal = rebuild_meal(_empty_meal(), lines)

    scaled = scale_to_amount(meal, 100)

    assert [line.amount for line in scaled.products] == [33.33, 33.33, 33.33]
    assert scaled.amount == 99.99
    assert aggregate_meal(scaled.products) == MealTotals(
        amount=scaled.amount, nutrients=scaled.nutrients
    )


def test_meal_without_lines_scales_its_own_totals() -> None:
    meal = _empty_meal(amount=100, nutrients=Nutrients(kcal=200, protein=10))

    half = scale_to_amount(meal, 50)

    assert half.amount == 50.0
    assert half.nutrients.kcal == 100.0
    assert half.nutrients.protein == 5.0


def test_empty_meal_takes_requested_amount() -> None:
    meal = _empty_meal()

    scaled = scale_to_amount(meal, 100)

    assert scaled.amount == 100.0
    assert scaled.products == ()
    assert scaled.nutrients == Nutrients.zero()
    assert meal.amount == 0.0


def _empty_meal(amount: float = 0.0, nutrients: Nutrients | None = None) -> Meal:
    return Meal(
        id=uuid4(),
        user_id=uuid4(),
        name="Lunch",
        description="",
        recipe="",
        image_url=None,
        amount=amount,
        nutrients=nutrients or Nutrients.zero(),
    )
