"""User-related business logic: profiles, daily targets and favourites."""

import logging
from dataclasses import dataclass, replace
from datetime import UTC, datetime
from typing import Protocol
from uuid import UUID, uuid4

from diet_tracker.domain.errors import NotFoundError, ValidationError
from diet_tracker.domain.meals import Meal
from diet_tracker.domain.models import Activity, Sex, UserProfile, UserRecord
from diet_tracker.domain.pages import Page, paginate
from diet_tracker.services.meals import MealService
from diet_tracker.services.ownership import ensure_owner
from diet_tracker.services.targets import compute_daily_targets

_logger = logging.getLogger(__name__)


class UserRepository(Protocol):
    """Persistence interface for user data."""

    def get_user(self, user_id: UUID) -> UserRecord | None:
        """Return the user by id, if present."""

    def get_by_email(self, email: str) -> UserRecord | None:
        """Return the user registered with an email, if present."""

    def save_user(self, user: UserRecord) -> UserRecord:
        """Insert or update a user record."""

    def delete_all_users(self) -> None:
        """Delete every user."""


@dataclass(frozen=True)
class UserDraft:
    """Fields supplied when registering a user."""

    email: str
    username: str
    first_name: str
    last_name: str
    picture_url: str | None = None


@dataclass(frozen=True)
class UserUpdate:
    """Profile fields a user may change; targets are derived from them."""

    username: str
    first_name: str
    last_name: str
    sex: Sex | None = None
    activity: Activity | None = None
    age: int = 0
    height: int = 0
    weight: int = 0
    picture_url: str | None = None


@dataclass
class UserService:
    """Application service for user lifecycle actions."""

    repository: UserRepository
    meal_service: MealService

    def create_user(self, draft: UserDraft) -> UserRecord:
        """Register a user with an empty profile and zero targets."""
        if self.repository.get_by_email(draft.email) is not None:
            raise ValidationError(f"User with email {draft.email} already exists")
        user = UserRecord(
            id=uuid4(),
            email=draft.email,
            username=draft.username,
            first_name=draft.first_name,
            last_name=draft.last_name,
            picture_url=draft.picture_url,
            created_at=datetime.now(tz=UTC),
        )
        saved = self.repository.save_user(user)
        _logger.info("Created user %s", saved.id)
        return saved

    def find_by_id(self, user_id: UUID) -> UserRecord:
        user = self.repository.get_user(user_id)
        if user is None:
            raise NotFoundError(f"Not found user [id = {user_id}]")
        return user

    def update_user(
        self, caller_id: UUID, user_id: UUID, update: UserUpdate
    ) -> UserRecord:
        """Update an owned profile and recompute the daily targets."""
        ensure_owner(caller_id, user_id, f"user {user_id}")
        current = self.find_by_id(user_id)
        profile = UserProfile(
            sex=update.sex,
            activity=update.activity,
            age=update.age,
            height=update.height,
            weight=update.weight,
        )
        targets = compute_daily_targets(profile)
        updated = replace(
            current,
            username=update.username,
            first_name=update.first_name,
            last_name=update.last_name,
            picture_url=update.picture_url or current.picture_url,
            profile=profile,
            targets=targets,
        )
        saved = self.repository.save_user(updated)
        _logger.info(
            "Updated user %s, daily calories now %s", user_id, targets.calories_per_day
        )
        return saved

    def add_favourite(self, caller_id: UUID, user_id: UUID, meal_id: UUID) -> None:
        """Store a snapshot of a meal in the user's favourites."""
        ensure_owner(caller_id, user_id, f"user {user_id}")
        user = self.find_by_id(user_id)
        meal = self.meal_service.find_by_id(meal_id)
        if meal in user.favourite_meals:
            return
        self.repository.save_user(
            replace(user, favourite_meals=(*user.favourite_meals, meal))
        )
        _logger.info("User %s added favourite meal %s", user_id, meal_id)

    def remove_favourite(self, caller_id: UUID, user_id: UUID, meal_id: UUID) -> None:
        """Drop a meal from the user's favourites; absent meals are ignored."""
        ensure_owner(caller_id, user_id, f"user {user_id}")
        user = self.find_by_id(user_id)
        favourites = tuple(meal for meal in user.favourite_meals if meal.id != meal_id)
        if len(favourites) == len(user.favourite_meals):
            return
        self.repository.save_user(replace(user, favourite_meals=favourites))
        _logger.info("User %s removed favourite meal %s", user_id, meal_id)

    def is_favourite(self, user_id: UUID, meal_id: UUID) -> bool:
        user = self.find_by_id(user_id)
        return any(meal.id == meal_id for meal in user.favourite_meals)

    def find_favourites(self, user_id: UUID, page: int, size: int) -> Page[Meal]:
        user = self.find_by_id(user_id)
        return paginate(user.favourite_meals, page, size)

    def delete_all(self) -> None:
        self.repository.delete_all_users()
