"""Domain models for products (foods)."""

from dataclasses import dataclass
from uuid import UUID

from diet_tracker.domain.nutrients import Nutrients

DEFAULT_PRODUCT_AMOUNT = 100.0


@dataclass(frozen=True)
class Product:
    """A food owned by a user, with nutrients given for `amount` grams."""

    id: UUID
    user_id: UUID | None
    name: str
    description: str
    image_url: str | None
    amount: float
    nutrients: Nutrients
