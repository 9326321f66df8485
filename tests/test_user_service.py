"""Tests for user service."""

from uuid import uuid4

import pytest

from diet_tracker.domain.errors import (
    NotFoundError,
    OwnershipViolation,
    ValidationError,
)
from diet_tracker.domain.meals import Meal, ProductLine
from diet_tracker.domain.models import Activity, DailyTargets, Sex, UserRecord
from diet_tracker.services.meals import MealDraft
from diet_tracker.services.users import UserDraft, UserService, UserUpdate
from tests.conftest import BANANA


def _update(**changes: object) -> UserUpdate:
    fields: dict[str, object] = {
        "username": "jane",
        "first_name": "Jane",
        "last_name": "Doe",
    }
    fields.update(changes)
    return UserUpdate(**fields)  # type: ignore[arg-type]


def _meal(user_service: UserService, owner: UserRecord, name: str = "Snack") -> Meal:
    meals = user_service.meal_service
    banana = meals.product_service.create_product(owner.id, BANANA)
    return meals.create_meal(
        owner.id,
        MealDraft(
            name=name, description="", recipe="", lines=[ProductLine(banana.id, 100)]
        ),
    )


def test_new_user_has_zero_targets(user: UserRecord) -> None:
    assert user.targets == DailyTargets()
    assert user.favourite_meals == ()
    assert user.created_at is not None


def test_email_must_be_unique(user_service: UserService, user: UserRecord) -> None:
    with pytest.raises(ValidationError):
        user_service.create_user(
            UserDraft(
                email=user.email, username="copy", first_name="", last_name=""
            )
        )


def test_update_recomputes_targets(user_service: UserService, user: UserRecord) -> None:
    updated = user_service.update_user(
        user.id,
        user.id,
        _update(
            sex=Sex.FEMALE,
            activity=Activity.SEDENTARY,
            age=30,
            height=165,
            weight=60,
        ),
    )

    assert updated.targets == DailyTargets(
        calories_per_day=1584,
        protein_per_day=79,
        carbohydrate_per_day=198,
        fat_per_day=53,
    )
    assert user_service.find_by_id(user.id).profile.weight == 60


def test_incomplete_profile_resets_targets(
    user_service: UserService, user: UserRecord
) -> None:
    user_service.update_user(
        user.id,
        user.id,
        _update(sex=Sex.MALE, activity=Activity.ACTIVE, age=40, height=180, weight=90),
    )

    updated = user_service.update_user(user.id, user.id, _update(sex=Sex.MALE))

    assert updated.targets == DailyTargets()


def test_update_by_someone_else_is_rejected(
    user_service: UserService, user: UserRecord
) -> None:
    with pytest.raises(OwnershipViolation):
        user_service.update_user(uuid4(), user.id, _update(username="hacker"))

    assert user_service.find_by_id(user.id).username == "jane"


def test_find_missing_user(user_service: UserService) -> None:
    with pytest.raises(NotFoundError, match="Not found user"):
        user_service.find_by_id(uuid4())


def test_favourites_lifecycle(user_service: UserService, user: UserRecord) -> None:
    meal = _meal(user_service, user)

    user_service.add_favourite(user.id, user.id, meal.id)
    user_service.add_favourite(user.id, user.id, meal.id)

    assert user_service.is_favourite(user.id, meal.id)
    page = user_service.find_favourites(user.id, 0, 10)
    assert page.total_elements == 1
    assert page.content == [meal]

    user_service.remove_favourite(user.id, user.id, meal.id)
    user_service.remove_favourite(user.id, user.id, meal.id)

    assert not user_service.is_favourite(user.id, meal.id)


def test_favourites_are_snapshots(user_service: UserService, user: UserRecord) -> None:
    meal = _meal(user_service, user)
    user_service.add_favourite(user.id, user.id, meal.id)

    user_service.meal_service.delete_meal(user.id, meal.id)

    favourites = user_service.find_favourites(user.id, 0, 10).content
    assert favourites[0].name == "Snack"
    assert favourites[0].nutrients.kcal == 96.0


def test_favourites_are_paginated(user_service: UserService, user: UserRecord) -> None:
    for name in ("Breakfast", "Lunch", "Dinner"):
        meal = _meal(user_service, user, name)
        user_service.add_favourite(user.id, user.id, meal.id)

    page = user_service.find_favourites(user.id, 1, 2)

    assert [meal.name for meal in page.content] == ["Dinner"]
    assert page.is_last
    assert page.total_pages == 2


def test_only_owner_changes_favourites(
    user_service: UserService, user: UserRecord
) -> None:
    meal = _meal(user_service, user)

    with pytest.raises(OwnershipViolation):
        user_service.add_favourite(uuid4(), user.id, meal.id)
