"""API layer module.

Contains FastAPI routers, the HTML listing view and response schemas.
"""

from jerseyretro.api.categories import router as categories_router
from jerseyretro.api.health import router as health_router
from jerseyretro.api.products import router as products_router

__all__ = [
    "categories_router",
    "health_router",
    "products_router",
]
