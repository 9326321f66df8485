"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from diet_tracker.adapters.supabase_cart_repository import SupabaseCartRepository
from diet_tracker.adapters.supabase_meal_repository import SupabaseMealRepository
from diet_tracker.adapters.supabase_product_repository import (
    SupabaseProductRepository,
)
from diet_tracker.adapters.supabase_user_repository import SupabaseUserRepository
from diet_tracker.config import Settings
from diet_tracker.services.carts import CartService
from diet_tracker.services.meals import MealService
from diet_tracker.services.products import ProductService
from diet_tracker.services.users import UserService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    product_service: ProductService
    meal_service: MealService
    user_service: UserService
    cart_service: CartService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    product_service = ProductService(SupabaseProductRepository(supabase_client))
    meal_service = MealService(
        repository=SupabaseMealRepository(supabase_client),
        product_service=product_service,
    )
    user_service = UserService(
        repository=SupabaseUserRepository(supabase_client),
        meal_service=meal_service,
    )
    cart_service = CartService(
        repository=SupabaseCartRepository(supabase_client),
        meal_service=meal_service,
        product_service=product_service,
        user_service=user_service,
    )
    return AppContainer(
        settings=resolved_settings,
        product_service=product_service,
        meal_service=meal_service,
        user_service=user_service,
        cart_service=cart_service,
    )
