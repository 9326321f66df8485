"""Tests for meal service."""

from dataclasses import replace
from uuid import UUID, uuid4

import pytest

from diet_tracker.domain.errors import NotFoundError, OwnershipViolation
from diet_tracker.domain.meals import Meal, ProductLine
from diet_tracker.domain.products import Product
from diet_tracker.services.meals import MealDraft, MealService
from tests.conftest import BANANA, OATS


def _porridge(
    meal_service: MealService, owner: UUID
) -> tuple[Meal, Product, Product]:
    products = meal_service.product_service
    banana = products.create_product(owner, BANANA)
    oats = products.create_product(owner, OATS)
    draft = MealDraft(
        name="Porridge",
        description="Oats with banana",
        recipe="Cook the oats, slice the banana on top.",
        lines=[ProductLine(banana.id, 150), ProductLine(oats.id, 40)],
    )
    return meal_service.create_meal(owner, draft), banana, oats


def test_create_meal_aggregates_lines(meal_service: MealService) -> None:
    meal, banana, oats = _porridge(meal_service, uuid4())

    assert meal.amount == 190.0
    assert [line.id for line in meal.products] == [banana.id, oats.id]
    assert meal.products[1].nutrients.carbohydrate == 24.0
    assert meal.nutrients.carbohydrate == 58.5
    assert meal.nutrients.kcal == 296.0
    assert meal_service.find_by_id(meal.id) == meal


def test_create_meal_with_unknown_product(meal_service: MealService) -> None:
    draft = MealDraft(
        name="Mystery", description="", recipe="", lines=[ProductLine(uuid4(), 10)]
    )

    with pytest.raises(NotFoundError):
        meal_service.create_meal(uuid4(), draft)

    assert meal_service.repository.list_meals() == []


def test_add_product_merges_existing_line(meal_service: MealService) -> None:
    owner = uuid4()
    meal, banana, _ = _porridge(meal_service, owner)

    updated = meal_service.add_product(owner, meal.id, banana.id, 50)

    assert [line.name for line in updated.products] == ["Rolled oats", "Banana"]
    assert updated.products[1].amount == 200.0
    assert updated.products[1].nutrients.carbohydrate == 46.0
    assert updated.amount == 240.0


def test_meal_lines_are_snapshots(meal_service: MealService) -> None:
    owner = uuid4()
    meal, banana, _ = _porridge(meal_service, owner)

    meal_service.product_service.update_product(
        owner, banana.id, replace(BANANA, carbohydrate=10.0)
    )

    stored = meal_service.find_by_id(meal.id)
    assert stored.products[0].nutrients.carbohydrate == 34.5


def test_update_meal_replaces_lines(meal_service: MealService) -> None:
    owner = uuid4()
    meal, banana, _ = _porridge(meal_service, owner)
    draft = MealDraft(
        name="Banana snack",
        description="",
        recipe="Peel.",
        lines=[ProductLine(banana.id, 100)],
    )

    updated = meal_service.update_meal(owner, meal.id, draft)

    assert updated.id == meal.id
    assert updated.name == "Banana snack"
    assert updated.amount == 100.0
    assert updated.nutrients.kcal == 96.0


def test_other_users_cannot_change_meal(meal_service: MealService) -> None:
    meal, banana, _ = _porridge(meal_service, uuid4())
    intruder = uuid4()

    with pytest.raises(OwnershipViolation):
        meal_service.add_product(intruder, meal.id, banana.id, 10)
    with pytest.raises(OwnershipViolation):
        meal_service.delete_meal(intruder, meal.id)

    assert meal_service.find_by_id(meal.id).amount == 190.0


def test_delete_meal(meal_service: MealService) -> None:
    owner = uuid4()
    meal, _, _ = _porridge(meal_service, owner)

    meal_service.delete_meal(owner, meal.id)

    with pytest.raises(NotFoundError, match="Not found meal"):
        meal_service.find_by_id(meal.id)
