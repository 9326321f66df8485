"""Services for managing products."""

import logging
from dataclasses import dataclass, replace
from typing import Protocol
from uuid import UUID, uuid4

from diet_tracker.domain.errors import NotFoundError, ValidationError
from diet_tracker.domain.nutrients import Nutrients
from diet_tracker.domain.pages import Page, paginate
from diet_tracker.domain.products import DEFAULT_PRODUCT_AMOUNT, Product
from diet_tracker.services.diabetes import with_derived
from diet_tracker.services.ownership import ensure_owner
from diet_tracker.services.scaling import scale_to_amount

MAX_MACRO_GRAMS = 100
MAX_KCAL = 1000

_logger = logging.getLogger(__name__)


class ProductRepository(Protocol):
    """Persistence interface for products."""

    def get_product(self, product_id: UUID) -> Product | None:
        """Return a product by id, if present."""

    def save_product(self, product: Product) -> Product:
        """Insert or update a product and return the stored form."""

    def delete_product(self, product_id: UUID) -> None:
        """Delete a product by id."""

    def list_products(self) -> list[Product]:
        """Return all products."""

    def list_products_by_user(self, user_id: UUID) -> list[Product]:
        """Return products owned by a user."""

    def search_products(self, query: str) -> list[Product]:
        """Return products whose name contains query, case-insensitive."""

    def delete_all_products(self) -> None:
        """Delete every product."""


@dataclass(frozen=True)
class ProductDraft:
    """User-supplied fields for creating or updating a product."""

    name: str
    description: str
    protein: float
    carbohydrate: float
    fat: float
    fibre: float
    kcal: float
    image_url: str | None = None


@dataclass
class ProductService:
    """Application service for product operations."""

    repository: ProductRepository

    def find_by_id(self, product_id: UUID) -> Product:
        """Return a product or raise NotFoundError."""
        product = self.repository.get_product(product_id)
        if product is None:
            raise NotFoundError(f"Not found product [id = {product_id}]")
        return product

    def calculate_by_amount(self, product_id: UUID, amount: float) -> Product:
        """Return the product with nutrients expressed for `amount` grams."""
        return scale_to_amount(self.find_by_id(product_id), amount)

    def find_all(self, page: int, size: int) -> Page[Product]:
        return paginate(self.repository.list_products(), page, size)

    def find_all_by_user(self, user_id: UUID, page: int, size: int) -> Page[Product]:
        return paginate(self.repository.list_products_by_user(user_id), page, size)

    def search_by_name(self, query: str, page: int, size: int) -> Page[Product]:
        return paginate(self.repository.search_products(query), page, size)

    def create_product(self, user_id: UUID, draft: ProductDraft) -> Product:
        """Create a product for `user_id` at the default 100 g amount."""
        product = Product(
            id=uuid4(),
            user_id=user_id,
            name=draft.name,
            description=draft.description,
            image_url=draft.image_url,
            amount=DEFAULT_PRODUCT_AMOUNT,
            nutrients=_nutrients_from_draft(draft),
        )
        saved = self.repository.save_product(product)
        _logger.info("Created product %s for user %s", saved.id, user_id)
        return saved

    def update_product(
        self, caller_id: UUID, product_id: UUID, draft: ProductDraft
    ) -> Product:
        """Update an owned product and recompute its diabetes metrics."""
        current = self.find_by_id(product_id)
        ensure_owner(caller_id, current.user_id, f"product {product_id}")
        updated = replace(
            current,
            name=draft.name,
            description=draft.description,
            image_url=draft.image_url or current.image_url,
            nutrients=_nutrients_from_draft(draft),
        )
        saved = self.repository.save_product(updated)
        _logger.info("Updated product %s", product_id)
        return saved

    def delete_product(self, caller_id: UUID, product_id: UUID) -> None:
        """Delete an owned product."""
        current = self.find_by_id(product_id)
        ensure_owner(caller_id, current.user_id, f"product {product_id}")
        self.repository.delete_product(product_id)
        _logger.info("Deleted product %s", product_id)

    def delete_all(self) -> None:
        self.repository.delete_all_products()


def _nutrients_from_draft(draft: ProductDraft) -> Nutrients:
    for name in ("protein", "carbohydrate", "fat", "fibre"):
        _check_range(name, getattr(draft, name), MAX_MACRO_GRAMS)
    _check_range("kcal", draft.kcal, MAX_KCAL)
    return with_derived(
        Nutrients(
            protein=draft.protein,
            carbohydrate=draft.carbohydrate,
            fat=draft.fat,
            fibre=draft.fibre,
            kcal=draft.kcal,
        )
    )


def _check_range(name: str, value: float, maximum: float) -> None:
    if value < 0 or value > maximum:
        raise ValidationError(f"{name} must be between 0 and {maximum}, got {value}")
