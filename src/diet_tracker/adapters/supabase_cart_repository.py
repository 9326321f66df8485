"""Supabase implementation for daily carts."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from supabase import Client

from diet_tracker.adapters.supabase_meal_repository import meal_to_row, parse_meal
from diet_tracker.adapters.supabase_product_repository import (
    NIL_ID,
    parse_product,
    product_to_row,
)
from diet_tracker.domain.carts import Cart
from diet_tracker.services.carts import CartRepository


@dataclass
class SupabaseCartRepository(CartRepository):
    """Supabase-backed repository for carts, one row per user and date."""

    client: Client

    def get_cart(self, user_id: UUID, day: date) -> Cart | None:
        """Return the user's cart for a date, if present."""
        response = (
            self.client.table("carts")
            .select("*")
            .eq("user_id", str(user_id))
            .eq("date", day.isoformat())
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_cart(response.data[0])

    def save_cart(self, cart: Cart) -> Cart:
        """Upsert a cart on its user and date."""
        response = (
            self.client.table("carts")
            .upsert(_cart_to_row(cart), on_conflict="user_id,date")
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to save cart")
        return _parse_cart(response.data[0])

    def delete_all_carts(self) -> None:
        """Delete every cart row."""
        self.client.table("carts").delete().neq("id", NIL_ID).execute()


def _cart_to_row(cart: Cart) -> dict[str, object]:
    return {
        "id": str(cart.id),
        "user_id": str(cart.user_id),
        "date": cart.day.isoformat(),
        "meals": [meal_to_row(meal) for meal in cart.meals],
        "products": [product_to_row(product) for product in cart.products],
    }


def _parse_cart(row: dict[str, object]) -> Cart:
    """Parse a cart row into a domain model."""
    return Cart(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        day=date.fromisoformat(str(row["date"])),
        meals=tuple(parse_meal(item) for item in row.get("meals") or []),
        products=tuple(parse_product(item) for item in row.get("products") or []),
    )
