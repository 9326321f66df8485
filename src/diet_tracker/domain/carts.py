"""Domain models for daily carts."""

from dataclasses import dataclass, field
from datetime import date
from uuid import UUID

from diet_tracker.domain.meals import Meal
from diet_tracker.domain.nutrients import Nutrients
from diet_tracker.domain.products import Product


@dataclass(frozen=True)
class Cart:
    """Meals and products a user consumed on one calendar day."""

    id: UUID
    user_id: UUID
    day: date
    meals: tuple[Meal, ...] = field(default=())
    products: tuple[Product, ...] = field(default=())


@dataclass(frozen=True)
class CartSummary:
    """Totals derived from a cart's current entries."""

    item_counter: int
    nutrients: Nutrients
    all_products: tuple[Product, ...]


@dataclass(frozen=True)
class MacroProgress:
    """Consumption of one macronutrient against its daily target."""

    consumed: float
    target: float
    remaining: float


@dataclass(frozen=True)
class TargetProgress:
    """Daily consumption compared with the user's targets."""

    calories: MacroProgress
    protein: MacroProgress
    carbohydrate: MacroProgress
    fat: MacroProgress


@dataclass(frozen=True)
class CartReport:
    """A cart together with its derived summary and target progress."""

    cart: Cart
    summary: CartSummary
    progress: TargetProgress
