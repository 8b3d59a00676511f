"""Product listing page.

Server-rendered HTML view of available jerseys with a category filter.
"""

from pathlib import Path
from typing import Annotated

from fastapi import APIRouter, Query, Request, status
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from jerseyretro.api.deps import CatalogServiceDep
from jerseyretro.catalog.presentation import StockTier, build_product_card
from jerseyretro.infrastructure.config import settings

router = APIRouter(tags=["Storefront"])

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))
templates.env.globals["StockTier"] = StockTier


@router.get(
    "/products",
    response_class=HTMLResponse,
    summary="Product listing",
    description="Render available products, optionally filtered by category slug.",
)
async def product_listing(
    request: Request,
    service: CatalogServiceDep,
    category: Annotated[str | None, Query(description="Category slug")] = None,
) -> HTMLResponse:
    """Render the product listing page.

    Args:
        request: Incoming request.
        service: Catalog service.
        category: Optional category slug filter.

    Returns:
        Rendered listing, or an error page with status 500.
    """
    result = await service.list_products(category_slug=category)

    if not result.success or result.value is None:
        return templates.TemplateResponse(
            request,
            "error.html",
            {
                "store_name": settings.store_name,
                "message": "We could not load the catalog right now. Please try again later.",
                "request_id": getattr(request.state, "request_id", None),
            },
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    listing = result.value
    cards = [
        build_product_card(product, settings.low_stock_threshold)
        for product in listing.products
    ]

    return templates.TemplateResponse(
        request,
        "products.html",
        {
            "store_name": settings.store_name,
            "seed_endpoint": settings.seed_endpoint,
            "categories": listing.categories,
            "active_category": listing.active_category,
            "is_filtered": listing.is_filtered,
            "cards": cards,
        },
    )
