"""Meal service: builds meals from product lines and keeps totals current."""

import logging
from dataclasses import dataclass, field, replace
from typing import Protocol
from uuid import UUID, uuid4

from diet_tracker.domain.errors import NotFoundError
from diet_tracker.domain.meals import Meal, ProductLine
from diet_tracker.domain.nutrients import Nutrients
from diet_tracker.domain.pages import Page, paginate
from diet_tracker.domain.products import Product
from diet_tracker.services.aggregation import add_product_line, rebuild_meal
from diet_tracker.services.ownership import ensure_owner
from diet_tracker.services.products import ProductService
from diet_tracker.services.scaling import scale_to_amount

_logger = logging.getLogger(__name__)


class MealRepository(Protocol):
    """Persistence interface for meals."""

    def get_meal(self, meal_id: UUID) -> Meal | None:
        """Return a meal by id, if present."""

    def save_meal(self, meal: Meal) -> Meal:
        """Insert or update a meal and return the stored form."""

    def delete_meal(self, meal_id: UUID) -> None:
        """Delete a meal by id."""

    def list_meals(self) -> list[Meal]:
        """Return all meals."""

    def list_meals_by_user(self, user_id: UUID) -> list[Meal]:
        """Return meals owned by a user."""

    def search_meals(self, query: str) -> list[Meal]:
        """Return meals whose name contains query, case-insensitive."""

    def delete_all_meals(self) -> None:
        """Delete every meal."""


@dataclass(frozen=True)
class MealDraft:
    """User-supplied fields for creating or updating a meal."""

    name: str
    description: str
    recipe: str
    lines: list[ProductLine] = field(default_factory=list)
    image_url: str | None = None


@dataclass
class MealService:
    """Service that composes meals from canonical products."""

    repository: MealRepository
    product_service: ProductService

    def find_by_id(self, meal_id: UUID) -> Meal:
        """Return a meal or raise NotFoundError."""
        meal = self.repository.get_meal(meal_id)
        if meal is None:
            raise NotFoundError(f"Not found meal [id = {meal_id}]")
        return meal

    def find_all(self, page: int, size: int) -> Page[Meal]:
        return paginate(self.repository.list_meals(), page, size)

    def find_all_by_user(self, user_id: UUID, page: int, size: int) -> Page[Meal]:
        return paginate(self.repository.list_meals_by_user(user_id), page, size)

    def search_by_name(self, query: str, page: int, size: int) -> Page[Meal]:
        return paginate(self.repository.search_meals(query), page, size)

    def create_meal(self, user_id: UUID, draft: MealDraft) -> Meal:
        """Create a meal for `user_id` with totals aggregated from its lines."""
        lines = self._resolve_lines(draft.lines)
        meal = Meal(
            id=uuid4(),
            user_id=user_id,
            name=draft.name,
            description=draft.description,
            recipe=draft.recipe,
            image_url=draft.image_url,
            amount=0.0,
            nutrients=Nutrients.zero(),
        )
        saved = self.repository.save_meal(rebuild_meal(meal, lines))
        _logger.info(
            "Created meal %s for user %s with %s products",
            saved.id,
            user_id,
            len(lines),
        )
        return saved

    def update_meal(self, caller_id: UUID, meal_id: UUID, draft: MealDraft) -> Meal:
        """Replace an owned meal's fields and product lines."""
        current = self.find_by_id(meal_id)
        ensure_owner(caller_id, current.user_id, f"meal {meal_id}")
        lines = self._resolve_lines(draft.lines)
        updated = replace(
            current,
            name=draft.name,
            description=draft.description,
            recipe=draft.recipe,
            image_url=draft.image_url or current.image_url,
        )
        saved = self.repository.save_meal(rebuild_meal(updated, lines))
        _logger.info("Updated meal %s", meal_id)
        return saved

    def add_product(
        self, caller_id: UUID, meal_id: UUID, product_id: UUID, amount: float
    ) -> Meal:
        """Add a product line to an owned meal, merging duplicates."""
        current = self.find_by_id(meal_id)
        ensure_owner(caller_id, current.user_id, f"meal {meal_id}")
        product = self.product_service.find_by_id(product_id)
        saved = self.repository.save_meal(add_product_line(current, product, amount))
        _logger.info("Added product %s to meal %s", product_id, meal_id)
        return saved

    def delete_meal(self, caller_id: UUID, meal_id: UUID) -> None:
        """Delete an owned meal."""
        current = self.find_by_id(meal_id)
        ensure_owner(caller_id, current.user_id, f"meal {meal_id}")
        self.repository.delete_meal(meal_id)
        _logger.info("Deleted meal %s", meal_id)

    def delete_all(self) -> None:
        self.repository.delete_all_meals()

    def _resolve_lines(self, lines: list[ProductLine]) -> list[Product]:
        """Fetch canonical products and scale each to its line amount."""
        resolved = []
        for line in lines:
            product = self.product_service.find_by_id(line.product_id)
            resolved.append(scale_to_amount(product, line.amount))
        return resolved
