"""Category API endpoints.

Provides the category lookup consumed by external integrations.
"""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from jerseyretro.api.deps import CatalogServiceDep
from jerseyretro.api.schemas import CategoryListResponse, CategorySchema, ErrorResponse

router = APIRouter(prefix="/api/categories", tags=["Categories"])


@router.get(
    "",
    response_model=CategoryListResponse,
    responses={500: {"model": ErrorResponse}},
    summary="List categories",
    description="Get every catalog category ordered by name.",
)
async def list_categories(service: CatalogServiceDep) -> CategoryListResponse | JSONResponse:
    """List all categories.

    Args:
        service: Catalog service.

    Returns:
        Categories ordered by name, or an error body with status 500.
    """
    result = await service.list_categories()

    if not result.success:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ErrorResponse(error=result.error or "Store query failed").model_dump(),
        )

    return CategoryListResponse(
        categories=[CategorySchema.model_validate(c) for c in result.value or []],
    )
