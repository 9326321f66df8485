"""Meal and cart aggregation.

Aggregates are rebuilt from the full list of constituents on every change.
A meal's totals and a cart's summary depend only on their current entries.
"""

from collections.abc import Iterable
from dataclasses import replace
from typing import TypeVar
from uuid import UUID

from diet_tracker.domain.carts import Cart, CartSummary, MacroProgress, TargetProgress
from diet_tracker.domain.errors import ValidationError
from diet_tracker.domain.meals import Meal, MealTotals
from diet_tracker.domain.models import DailyTargets
from diet_tracker.domain.nutrients import Nutrients, round_value, sum_nutrients
from diet_tracker.domain.products import Product
from diet_tracker.services.scaling import scale_to_amount

Entry = TypeVar("Entry", Product, Meal)


def aggregate_meal(products: Iterable[Product]) -> MealTotals:
    """Sum amounts and nutrients over a meal's product lines."""
    lines = list(products)
    return MealTotals(
        amount=round_value(sum(line.amount for line in lines)),
        nutrients=sum_nutrients(line.nutrients for line in lines),
    )


def rebuild_meal(meal: Meal, products: Iterable[Product]) -> Meal:
    """Return the meal with new product lines and recomputed totals."""
    lines = tuple(products)
    totals = aggregate_meal(lines)
    return replace(
        meal, products=lines, amount=totals.amount, nutrients=totals.nutrients
    )


def add_product_line(meal: Meal, product: Product, amount: float) -> Meal:
    """Add a canonical product to a meal at `amount`, merging duplicates.

    A product already present in the meal is removed and re-added at the
    combined amount, scaled from the canonical product.
    """
    combined, lines = _merge_amount(meal.products, product.id, amount)
    line = scale_to_amount(product, combined)
    return rebuild_meal(meal, (*lines, line))


def add_to_cart(cart: Cart, item: Meal | Product, requested_amount: float) -> Cart:
    """Add a canonical meal or product to a cart, merging duplicates.

    The stored entry is a snapshot of `item` scaled to the requested amount,
    or to the existing amount plus the requested amount when the same id is
    already in the cart. Merged entries move to the end of their list.
    """
    if isinstance(item, Meal):
        combined, meals = _merge_amount(cart.meals, item.id, requested_amount)
        return replace(cart, meals=(*meals, scale_to_amount(item, combined)))
    combined, products = _merge_amount(cart.products, item.id, requested_amount)
    return replace(cart, products=(*products, scale_to_amount(item, combined)))


def remove_from_cart(cart: Cart, item_id: UUID) -> Cart:
    """Remove the meal or product with `item_id`; absent ids are a no-op."""
    meals = tuple(meal for meal in cart.meals if meal.id != item_id)
    products = tuple(product for product in cart.products if product.id != item_id)
    if len(meals) == len(cart.meals) and len(products) == len(cart.products):
        return cart
    return replace(cart, meals=meals, products=products)


def summarize_cart(cart: Cart) -> CartSummary:
    """Compute the item counter, nutrient totals and flattened products."""
    entries: list[Nutrients] = [meal.nutrients for meal in cart.meals]
    entries.extend(product.nutrients for product in cart.products)
    all_products = tuple(
        product for meal in cart.meals for product in meal.products
    ) + tuple(cart.products)
    return CartSummary(
        item_counter=len(cart.meals) + len(cart.products),
        nutrients=sum_nutrients(entries),
        all_products=all_products,
    )


def compare_with_targets(
    nutrients: Nutrients, targets: DailyTargets
) -> TargetProgress:
    """Compare consumed nutrients with daily targets."""
    return TargetProgress(
        calories=_progress(nutrients.kcal, targets.calories_per_day),
        protein=_progress(nutrients.protein, targets.protein_per_day),
        carbohydrate=_progress(nutrients.carbohydrate, targets.carbohydrate_per_day),
        fat=_progress(nutrients.fat, targets.fat_per_day),
    )


def _merge_amount(
    entries: tuple[Entry, ...], item_id: UUID, requested_amount: float
) -> tuple[float, tuple[Entry, ...]]:
    if requested_amount <= 0:
        raise ValidationError(f"Amount must be positive, got {requested_amount}")
    combined = requested_amount
    kept: list[Entry] = []
    for entry in entries:
        if entry.id == item_id:
            combined += entry.amount
        else:
            kept.append(entry)
    return combined, tuple(kept)


def _progress(consumed: float, target: float) -> MacroProgress:
    return MacroProgress(
        consumed=round_value(consumed),
        target=float(target),
        remaining=round_value(target - consumed),
    )
