"""Product endpoints."""

from uuid import UUID

from fastapi import APIRouter, Query, status

from diet_tracker.api.dependencies import CallerId, Container, Paging
from diet_tracker.api.schemas import PageOut, ProductIn, ProductOut

router = APIRouter(prefix="/products", tags=["products"])


@router.get("")
def list_products(container: Container, paging: Paging) -> PageOut[ProductOut]:
    """Return all products, one page at a time."""
    page = container.product_service.find_all(paging.page, paging.size)
    return PageOut[ProductOut].model_validate(page)


@router.get("/search")
def search_products(
    container: Container, paging: Paging, query: str = Query(min_length=1)
) -> PageOut[ProductOut]:
    """Return products whose name contains the query."""
    page = container.product_service.search_by_name(query, paging.page, paging.size)
    return PageOut[ProductOut].model_validate(page)


@router.get("/{product_id}")
def get_product(
    product_id: UUID, container: Container, amount: float | None = Query(None, gt=0)
) -> ProductOut:
    """Return a product, scaled to `amount` grams when given."""
    if amount is None:
        product = container.product_service.find_by_id(product_id)
    else:
        product = container.product_service.calculate_by_amount(product_id, amount)
    return ProductOut.model_validate(product)


@router.put("/{product_id}")
def update_product(
    product_id: UUID, payload: ProductIn, container: Container, caller_id: CallerId
) -> ProductOut:
    product = container.product_service.update_product(
        caller_id, product_id, payload.to_draft()
    )
    return ProductOut.model_validate(product)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_product(product_id: UUID, container: Container, caller_id: CallerId) -> None:
    container.product_service.delete_product(caller_id, product_id)
