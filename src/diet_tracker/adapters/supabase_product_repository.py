"""Supabase implementation for products."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from diet_tracker.domain.nutrients import Nutrients
from diet_tracker.domain.products import Product
from diet_tracker.services.products import ProductRepository

NIL_ID = str(UUID(int=0))


@dataclass
class SupabaseProductRepository(ProductRepository):
    """Supabase-backed repository for products."""

    client: Client

    def get_product(self, product_id: UUID) -> Product | None:
        """Return a product by id, if present."""
        response = (
            self.client.table("products")
            .select("*")
            .eq("id", str(product_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return parse_product(response.data[0])

    def save_product(self, product: Product) -> Product:
        """Insert or update a product and return it."""
        response = (
            self.client.table("products").upsert(product_to_row(product)).execute()
        )
        if not response.data:
            raise RuntimeError("Failed to save product")
        return parse_product(response.data[0])

    def delete_product(self, product_id: UUID) -> None:
        """Delete a product by id."""
        self.client.table("products").delete().eq("id", str(product_id)).execute()

    def list_products(self) -> list[Product]:
        """Return all products ordered by name."""
        response = self.client.table("products").select("*").order("name").execute()
        return [parse_product(row) for row in response.data or []]

    def list_products_by_user(self, user_id: UUID) -> list[Product]:
        """Return a user's products ordered by name."""
        response = (
            self.client.table("products")
            .select("*")
            .eq("user_id", str(user_id))
            .order("name")
            .execute()
        )
        return [parse_product(row) for row in response.data or []]

    def search_products(self, query: str) -> list[Product]:
        """Return products whose name contains query."""
        response = (
            self.client.table("products")
            .select("*")
            .ilike("name", f"%{query}%")
            .order("name")
            .execute()
        )
        return [parse_product(row) for row in response.data or []]

    def delete_all_products(self) -> None:
        """Delete every product row."""
        self.client.table("products").delete().neq("id", NIL_ID).execute()


def product_to_row(product: Product) -> dict[str, object]:
    """Serialize a product into a row, also used for JSON snapshots."""
    return {
        "id": str(product.id),
        "user_id": str(product.user_id) if product.user_id else None,
        "name": product.name,
        "description": product.description,
        "image_url": product.image_url,
        "amount": product.amount,
        **product.nutrients.as_dict(),
    }


def parse_product(row: dict[str, object]) -> Product:
    """Parse a product row or snapshot into a domain model."""
    user_id = row.get("user_id")
    return Product(
        id=UUID(str(row["id"])),
        user_id=UUID(str(user_id)) if user_id else None,
        name=str(row.get("name", "")),
        description=str(row.get("description") or ""),
        image_url=row.get("image_url"),
        amount=float(row.get("amount") or 0.0),
        nutrients=Nutrients.from_dict(row),
    )
