"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from diet_tracker.api.admin import router as admin_router
from diet_tracker.api.meals import router as meals_router
from diet_tracker.api.products import router as products_router
from diet_tracker.api.users import router as users_router
from diet_tracker.app_logging import configure_logging
from diet_tracker.containers import AppContainer
from diet_tracker.domain.errors import (
    DietTrackerError,
    NotFoundError,
    OwnershipViolation,
    ValidationError,
)

_ERROR_STATUS = {
    NotFoundError: status.HTTP_404_NOT_FOUND,
    ValidationError: status.HTTP_400_BAD_REQUEST,
    OwnershipViolation: status.HTTP_403_FORBIDDEN,
}


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(
            "Diet tracker API started [environment = %s]",
            app.state.container.settings.environment,
        )
        yield
        logger.info("Diet tracker API stopped")

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(products_router)
    app.include_router(meals_router)
    app.include_router(users_router)
    app.include_router(admin_router)

    @app.exception_handler(DietTrackerError)
    async def domain_error_handler(
        request: Request, exc: DietTrackerError
    ) -> JSONResponse:
        """Translate domain errors into JSON error responses."""
        status_code = _ERROR_STATUS.get(
            type(exc), status.HTTP_500_INTERNAL_SERVER_ERROR
        )
        if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
            logger.error("Unhandled domain error on %s: %s", request.url.path, exc)
        return JSONResponse(status_code=status_code, content={"detail": str(exc)})

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
