"""User endpoints: profile, owned products and meals, favourites and carts."""

from datetime import date
from uuid import UUID

from fastapi import APIRouter, Query, status

from diet_tracker.api.dependencies import CallerId, Container, Paging
from diet_tracker.api.schemas import (
    CartOut,
    FavouriteOut,
    MealIn,
    MealOut,
    PageOut,
    ProductIn,
    ProductOut,
    UserIn,
    UserOut,
    UserUpdateIn,
)
from diet_tracker.services.ownership import ensure_owner

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", status_code=status.HTTP_201_CREATED)
def create_user(payload: UserIn, container: Container) -> UserOut:
    user = container.user_service.create_user(payload.to_draft())
    return UserOut.model_validate(user)


@router.get("/{user_id}")
def get_user(user_id: UUID, container: Container) -> UserOut:
    return UserOut.model_validate(container.user_service.find_by_id(user_id))


@router.put("/{user_id}")
def update_user(
    user_id: UUID, payload: UserUpdateIn, container: Container, caller_id: CallerId
) -> UserOut:
    """Update the caller's profile; daily targets are recomputed."""
    user = container.user_service.update_user(caller_id, user_id, payload.to_update())
    return UserOut.model_validate(user)


@router.get("/{user_id}/products")
def list_user_products(
    user_id: UUID, container: Container, paging: Paging
) -> PageOut[ProductOut]:
    page = container.product_service.find_all_by_user(user_id, paging.page, paging.size)
    return PageOut[ProductOut].model_validate(page)


@router.post("/{user_id}/products", status_code=status.HTTP_201_CREATED)
def create_product(
    user_id: UUID, payload: ProductIn, container: Container, caller_id: CallerId
) -> ProductOut:
    ensure_owner(caller_id, user_id, f"user {user_id}")
    product = container.product_service.create_product(user_id, payload.to_draft())
    return ProductOut.model_validate(product)


@router.get("/{user_id}/meals")
def list_user_meals(
    user_id: UUID, container: Container, paging: Paging
) -> PageOut[MealOut]:
    page = container.meal_service.find_all_by_user(user_id, paging.page, paging.size)
    return PageOut[MealOut].model_validate(page)


@router.post("/{user_id}/meals", status_code=status.HTTP_201_CREATED)
def create_meal(
    user_id: UUID, payload: MealIn, container: Container, caller_id: CallerId
) -> MealOut:
    ensure_owner(caller_id, user_id, f"user {user_id}")
    meal = container.meal_service.create_meal(user_id, payload.to_draft())
    return MealOut.model_validate(meal)


@router.get("/{user_id}/meals/favourites")
def list_favourites(
    user_id: UUID, container: Container, paging: Paging
) -> PageOut[MealOut]:
    """Return the user's favourite meal snapshots."""
    page = container.user_service.find_favourites(user_id, paging.page, paging.size)
    return PageOut[MealOut].model_validate(page)


@router.get("/{user_id}/meals/{meal_id}/favourites")
def check_favourite(user_id: UUID, meal_id: UUID, container: Container) -> FavouriteOut:
    is_favourite = container.user_service.is_favourite(user_id, meal_id)
    return FavouriteOut(meal_id=meal_id, is_favourite=is_favourite)


@router.post(
    "/{user_id}/meals/{meal_id}/favourites", status_code=status.HTTP_201_CREATED
)
def add_favourite(
    user_id: UUID, meal_id: UUID, container: Container, caller_id: CallerId
) -> FavouriteOut:
    container.user_service.add_favourite(caller_id, user_id, meal_id)
    return FavouriteOut(meal_id=meal_id, is_favourite=True)


@router.delete(
    "/{user_id}/meals/{meal_id}/favourites", status_code=status.HTTP_204_NO_CONTENT
)
def remove_favourite(
    user_id: UUID, meal_id: UUID, container: Container, caller_id: CallerId
) -> None:
    container.user_service.remove_favourite(caller_id, user_id, meal_id)


@router.get("/{user_id}/carts")
def get_cart(
    user_id: UUID,
    container: Container,
    caller_id: CallerId,
    day: date = Query(alias="date"),
) -> CartOut:
    """Return the day's cart with totals compared to the user's targets."""
    report = container.cart_service.daily_report(caller_id, user_id, day)
    return CartOut.from_report(report)


@router.post("/{user_id}/carts/meals/{meal_id}")
def add_meal_to_cart(  # noqa: PLR0913
    user_id: UUID,
    meal_id: UUID,
    container: Container,
    caller_id: CallerId,
    amount: float,
    day: date = Query(alias="date"),
) -> CartOut:
    """Add a meal snapshot scaled to `amount` grams to the day's cart."""
    service = container.cart_service
    cart = service.add_meal(caller_id, user_id, meal_id, day, amount)
    return CartOut.from_report(service.build_report(cart))


@router.post("/{user_id}/carts/products/{product_id}")
def add_product_to_cart(  # noqa: PLR0913
    user_id: UUID,
    product_id: UUID,
    container: Container,
    caller_id: CallerId,
    amount: float,
    day: date = Query(alias="date"),
) -> CartOut:
    """Add a product snapshot scaled to `amount` grams to the day's cart."""
    service = container.cart_service
    cart = service.add_product(caller_id, user_id, product_id, day, amount)
    return CartOut.from_report(service.build_report(cart))


@router.delete("/{user_id}/carts/meals/{meal_id}")
def remove_meal_from_cart(
    user_id: UUID,
    meal_id: UUID,
    container: Container,
    caller_id: CallerId,
    day: date = Query(alias="date"),
) -> CartOut:
    service = container.cart_service
    cart = service.remove_meal(caller_id, user_id, meal_id, day)
    return CartOut.from_report(service.build_report(cart))


@router.delete("/{user_id}/carts/products/{product_id}")
def remove_product_from_cart(
    user_id: UUID,
    product_id: UUID,
    container: Container,
    caller_id: CallerId,
    day: date = Query(alias="date"),
) -> CartOut:
    service = container.cart_service
    cart = service.remove_product(caller_id, user_id, product_id, day)
    return CartOut.from_report(service.build_report(cart))
