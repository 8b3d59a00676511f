"""Retro jersey storefront main application module.

This module initializes the FastAPI application and configures
core middleware, routers, and startup/shutdown events.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, RedirectResponse

from jerseyretro.api.categories import router as categories_router
from jerseyretro.api.health import router as health_router
from jerseyretro.api.middleware import setup_middleware
from jerseyretro.api.products import router as products_router
from jerseyretro.infrastructure.config import settings
from jerseyretro.infrastructure.database import engine
from jerseyretro.infrastructure.logging import setup_logging

setup_logging()
logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Handle application startup and shutdown events.

    Args:
        app: The FastAPI application instance.

    Yields:
        None after startup, cleanup happens after yield.
    """
    logger.info(
        "Starting storefront",
        version=settings.api_version,
        debug=settings.debug,
    )

    yield

    await engine.dispose()
    logger.info("Storefront shutdown complete")


app = FastAPI(
    title="Retro Jersey Storefront",
    description="Server-rendered storefront for retro football jerseys",
    version=settings.api_version,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

setup_middleware(app)

app.include_router(health_router, tags=["Health"])
app.include_router(categories_router)
app.include_router(products_router)


@app.get("/", include_in_schema=False)
async def index() -> RedirectResponse:
    """Send visitors to the product listing."""
    return RedirectResponse(url="/products")


# ============================================================================
# Custom Exception Handlers
# ============================================================================


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle uncaught exceptions with consistent format."""
    request_id = getattr(request.state, "request_id", None)

    logger.exception(
        "Unhandled exception in handler",
        path=request.url.path,
        method=request.method,
        error=str(exc),
    )

    return JSONResponse(
        status_code=500,
        content={
            "error_code": "INTERNAL_ERROR",
            "message": "An internal error occurred",
            "request_id": request_id,
        },
    )
