"""Meal endpoints."""

from uuid import UUID

from fastapi import APIRouter, Query, status

from diet_tracker.api.dependencies import CallerId, Container, Paging
from diet_tracker.api.schemas import MealIn, MealOut, PageOut, ProductLineIn

router = APIRouter(prefix="/meals", tags=["meals"])


@router.get("")
def list_meals(container: Container, paging: Paging) -> PageOut[MealOut]:
    page = container.meal_service.find_all(paging.page, paging.size)
    return PageOut[MealOut].model_validate(page)


@router.get("/search")
def search_meals(
    container: Container, paging: Paging, query: str = Query(min_length=1)
) -> PageOut[MealOut]:
    page = container.meal_service.search_by_name(query, paging.page, paging.size)
    return PageOut[MealOut].model_validate(page)


@router.get("/{meal_id}")
def get_meal(meal_id: UUID, container: Container) -> MealOut:
    return MealOut.model_validate(container.meal_service.find_by_id(meal_id))


@router.put("/{meal_id}")
def update_meal(
    meal_id: UUID, payload: MealIn, container: Container, caller_id: CallerId
) -> MealOut:
    """Replace an owned meal's fields and product lines."""
    meal = container.meal_service.update_meal(caller_id, meal_id, payload.to_draft())
    return MealOut.model_validate(meal)


@router.post("/{meal_id}/products")
def add_product_to_meal(
    meal_id: UUID, payload: ProductLineIn, container: Container, caller_id: CallerId
) -> MealOut:
    """Add a product line, merging with an existing line for the same product."""
    meal = container.meal_service.add_product(
        caller_id, meal_id, payload.product_id, payload.amount
    )
    return MealOut.model_validate(meal)


@router.delete("/{meal_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_meal(meal_id: UUID, container: Container, caller_id: CallerId) -> None:
    container.meal_service.delete_meal(caller_id, meal_id)
