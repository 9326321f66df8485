"""Proportional rescaling of nutrient-bearing entities."""

from dataclasses import replace
from typing import TypeVar

from diet_tracker.domain.errors import ValidationError
from diet_tracker.domain.meals import Meal
from diet_tracker.domain.nutrients import Nutrients, round_value, sum_nutrients
from diet_tracker.domain.products import Product

Scalable = TypeVar("Scalable", Product, Meal)


def scale_to_amount(entity: Scalable, new_amount: float) -> Scalable:
    """Return a copy of a product or meal expressed for `new_amount`.

    Every nutrient field is multiplied by ``new_amount / entity.amount`` and
    rounded to two decimals. Scaling down to `new_amount` and back again
    restores each field only to within about ``0.01 * entity.amount / new_amount``.

    A meal has each of its product lines scaled by the same factor and its
    amount and totals rebuilt from the scaled lines. A meal with no lines
    and no amount takes `new_amount` with zero nutrients.
    """
    if new_amount <= 0:
        raise ValidationError(f"Amount must be positive, got {new_amount}")
    if isinstance(entity, Meal) and not entity.products and entity.amount <= 0:
        return replace(
            entity, amount=round_value(new_amount), nutrients=Nutrients.zero()
        )
    if entity.amount <= 0:
        raise ValidationError(
            f"Cannot scale {entity.name!r} from a non-positive amount"
        )
    factor = new_amount / entity.amount
    if isinstance(entity, Meal):
        return _scale_meal(entity, factor, new_amount)
    return _scale_product(entity, factor)


def _scale_product(product: Product, factor: float) -> Product:
    return replace(
        product,
        amount=round_value(product.amount * factor),
        nutrients=product.nutrients.scaled(factor),
    )


def _scale_meal(meal: Meal, factor: float, new_amount: float) -> Meal:
    if not meal.products:
        return replace(
            meal,
            amount=round_value(new_amount),
            nutrients=meal.nutrients.scaled(factor),
        )
    lines = tuple(_scale_product(product, factor) for product in meal.products)
    # Lines are rounded one by one, so the meal amount is their sum.
    return replace(
        meal,
        products=lines,
        amount=round_value(sum(line.amount for line in lines)),
        nutrients=sum_nutrients(line.nutrients for line in lines),
    )
