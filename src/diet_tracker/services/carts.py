"""Cart service: daily carts of meals and products."""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Protocol
from uuid import UUID, uuid4

from diet_tracker.domain.carts import Cart, CartReport
from diet_tracker.domain.errors import NotFoundError
from diet_tracker.domain.meals import Meal
from diet_tracker.domain.products import Product
from diet_tracker.services.aggregation import (
    add_to_cart,
    compare_with_targets,
    remove_from_cart,
    summarize_cart,
)
from diet_tracker.services.meals import MealService
from diet_tracker.services.ownership import ensure_owner
from diet_tracker.services.products import ProductService
from diet_tracker.services.users import UserService

_logger = logging.getLogger(__name__)


class CartRepository(Protocol):
    """Persistence interface for daily carts."""

    def get_cart(self, user_id: UUID, day: date) -> Cart | None:
        """Return the user's cart for a date, if present."""

    def save_cart(self, cart: Cart) -> Cart:
        """Insert or update a cart keyed by user and date."""

    def delete_all_carts(self) -> None:
        """Delete every cart."""


@dataclass
class CartService:
    """Application service for daily cart operations."""

    repository: CartRepository
    meal_service: MealService
    product_service: ProductService
    user_service: UserService

    def find_cart(self, user_id: UUID, day: date) -> Cart:
        """Return the user's cart for `day` or raise NotFoundError."""
        cart = self.repository.get_cart(user_id, day)
        if cart is None:
            raise NotFoundError(
                f"Not found cart for user [id = {user_id} and date: {day.isoformat()}]"
            )
        return cart

    def daily_report(self, caller_id: UUID, user_id: UUID, day: date) -> CartReport:
        """Return the cart for `day` with totals compared to the user's targets."""
        ensure_owner(caller_id, user_id, f"cart of user {user_id}")
        return self.build_report(self.find_cart(user_id, day))

    def build_report(self, cart: Cart) -> CartReport:
        """Summarize a cart against its owner's daily targets."""
        user = self.user_service.find_by_id(cart.user_id)
        summary = summarize_cart(cart)
        return CartReport(
            cart=cart,
            summary=summary,
            progress=compare_with_targets(summary.nutrients, user.targets),
        )

    def add_meal(  # noqa: PLR0913
        self, caller_id: UUID, user_id: UUID, meal_id: UUID, day: date, amount: float
    ) -> Cart:
        """Add a snapshot of a meal scaled to `amount` to the day's cart."""
        meal = self.meal_service.find_by_id(meal_id)
        return self._add(caller_id, user_id, meal, day, amount)

    def add_product(  # noqa: PLR0913
        self,
        caller_id: UUID,
        user_id: UUID,
        product_id: UUID,
        day: date,
        amount: float,
    ) -> Cart:
        """Add a snapshot of a product scaled to `amount` to the day's cart."""
        product = self.product_service.find_by_id(product_id)
        return self._add(caller_id, user_id, product, day, amount)

    def remove_meal(
        self, caller_id: UUID, user_id: UUID, meal_id: UUID, day: date
    ) -> Cart:
        return self._remove(caller_id, user_id, meal_id, day)

    def remove_product(
        self, caller_id: UUID, user_id: UUID, product_id: UUID, day: date
    ) -> Cart:
        return self._remove(caller_id, user_id, product_id, day)

    def delete_all(self) -> None:
        self.repository.delete_all_carts()

    def _add(  # noqa: PLR0913
        self,
        caller_id: UUID,
        user_id: UUID,
        item: Meal | Product,
        day: date,
        amount: float,
    ) -> Cart:
        ensure_owner(caller_id, user_id, f"cart of user {user_id}")
        cart = self.repository.get_cart(user_id, day)
        if cart is None:
            cart = Cart(id=uuid4(), user_id=user_id, day=day)
            _logger.info("Opening cart %s for user %s on %s", cart.id, user_id, day)
        saved = self.repository.save_cart(add_to_cart(cart, item, amount))
        _logger.info(
            "Added %s %s (%s g) to cart %s",
            type(item).__name__,
            item.id,
            amount,
            saved.id,
        )
        return saved

    def _remove(
        self, caller_id: UUID, user_id: UUID, item_id: UUID, day: date
    ) -> Cart:
        ensure_owner(caller_id, user_id, f"cart of user {user_id}")
        cart = self.find_cart(user_id, day)
        updated = remove_from_cart(cart, item_id)
        if updated is cart:
            return cart
        saved = self.repository.save_cart(updated)
        _logger.info("Removed %s from cart %s", item_id, saved.id)
        return saved
