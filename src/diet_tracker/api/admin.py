"""Admin API endpoints with simple token auth."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Header, HTTPException, Request, status

if TYPE_CHECKING:
    from diet_tracker.containers import AppContainer

router = APIRouter(prefix="/admin", tags=["admin"])

_logger = logging.getLogger(__name__)


def _get_admin_token(request: Request) -> str:
    container: AppContainer = request.app.state.container
    return container.settings.admin_token


async def require_admin(
    x_admin_token: str | None = Header(default=None),
    admin_token: str = Depends(_get_admin_token),
) -> None:
    """Ensure requests include a valid admin token."""
    if not x_admin_token or x_admin_token != admin_token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)


@router.get("/health", dependencies=[Depends(require_admin)])
async def admin_health() -> dict[str, str]:
    """Admin health check endpoint."""
    return {"status": "ok"}


@router.delete(
    "/products",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_admin)],
)
def delete_all_products(request: Request) -> None:
    """Delete every product."""
    container: AppContainer = request.app.state.container
    container.product_service.delete_all()
    _logger.warning("Deleted all products")


@router.delete(
    "/meals",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_admin)],
)
def delete_all_meals(request: Request) -> None:
    """Delete every meal."""
    container: AppContainer = request.app.state.container
    container.meal_service.delete_all()
    _logger.warning("Deleted all meals")


@router.delete(
    "/carts",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_admin)],
)
def delete_all_carts(request: Request) -> None:
    """Delete every cart."""
    container: AppContainer = request.app.state.container
    container.cart_service.delete_all()
    _logger.warning("Deleted all carts")


@router.delete(
    "/users",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_admin)],
)
def delete_all_users(request: Request) -> None:
    """Delete every user."""
    container: AppContainer = request.app.state.container
    container.user_service.delete_all()
    _logger.warning("Deleted all users")
