"""Supabase implementation for meals."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from diet_tracker.adapters.supabase_product_repository import (
    NIL_ID,
    parse_product,
    product_to_row,
)
from diet_tracker.domain.meals import Meal
from diet_tracker.domain.nutrients import Nutrients
from diet_tracker.services.meals import MealRepository


@dataclass
class SupabaseMealRepository(MealRepository):
    """Supabase-backed repository for meals.

    Product lines are stored as a JSON array of product snapshots in the
    `products` column.
    """

    client: Client

    def get_meal(self, meal_id: UUID) -> Meal | None:
        """Return a meal by id, if present."""
        response = (
            self.client.table("meals")
            .select("*")
            .eq("id", str(meal_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return parse_meal(response.data[0])

    def save_meal(self, meal: Meal) -> Meal:
        """Insert or update a meal and return it."""
        response = self.client.table("meals").upsert(meal_to_row(meal)).execute()
        if not response.data:
            raise RuntimeError("Failed to save meal")
        return parse_meal(response.data[0])

    def delete_meal(self, meal_id: UUID) -> None:
        """Delete a meal by id."""
        self.client.table("meals").delete().eq("id", str(meal_id)).execute()

    def list_meals(self) -> list[Meal]:
        """Return all meals ordered by name."""
        response = self.client.table("meals").select("*").order("name").execute()
        return [parse_meal(row) for row in response.data or []]

    def list_meals_by_user(self, user_id: UUID) -> list[Meal]:
        """Return a user's meals ordered by name."""
        response = (
            self.client.table("meals")
            .select("*")
            .eq("user_id", str(user_id))
            .order("name")
            .execute()
        )
        return [parse_meal(row) for row in response.data or []]

    def search_meals(self, query: str) -> list[Meal]:
        """Return meals whose name contains query."""
        response = (
            self.client.table("meals")
            .select("*")
            .ilike("name", f"%{query}%")
            .order("name")
            .execute()
        )
        return [parse_meal(row) for row in response.data or []]

    def delete_all_meals(self) -> None:
        """Delete every meal row."""
        self.client.table("meals").delete().neq("id", NIL_ID).execute()


def meal_to_row(meal: Meal) -> dict[str, object]:
    """Serialize a meal and its product lines into a row."""
    return {
        "id": str(meal.id),
        "user_id": str(meal.user_id) if meal.user_id else None,
        "name": meal.name,
        "description": meal.description,
        "recipe": meal.recipe,
        "image_url": meal.image_url,
        "amount": meal.amount,
        **meal.nutrients.as_dict(),
        "products": [product_to_row(product) for product in meal.products],
    }


def parse_meal(row: dict[str, object]) -> Meal:
    """Parse a meal row or snapshot into a domain model."""
    user_id = row.get("user_id")
    return Meal(
        id=UUID(str(row["id"])),
        user_id=UUID(str(user_id)) if user_id else None,
        name=str(row.get("name", "")),
        description=str(row.get("description") or ""),
        recipe=str(row.get("recipe") or ""),
        image_url=row.get("image_url"),
        amount=float(row.get("amount") or 0.0),
        nutrients=Nutrients.from_dict(row),
        products=tuple(parse_product(item) for item in row.get("products") or []),
    )
