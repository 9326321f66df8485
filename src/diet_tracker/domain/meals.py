"""Domain models for meals composed of products."""

from dataclasses import dataclass, field
from uuid import UUID

from diet_tracker.domain.nutrients import Nutrients
from diet_tracker.domain.products import Product


@dataclass(frozen=True, eq=False)
class Meal:
    """A meal with product lines and nutrient totals.

    Each product line is a snapshot scaled to the line amount. The meal
    amount and nutrients are the sums over its lines. Two meals are equal
    when their ids are equal.
    """

    id: UUID
    user_id: UUID | None
    name: str
    description: str
    recipe: str
    image_url: str | None
    amount: float
    nutrients: Nutrients
    products: tuple[Product, ...] = field(default=())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Meal):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)


@dataclass(frozen=True)
class MealTotals:
    """Aggregate amount and nutrients computed from product lines."""

    amount: float
    nutrients: Nutrients


@dataclass(frozen=True)
class ProductLine:
    """Request for a product at a given amount inside a meal."""

    product_id: UUID
    amount: float
