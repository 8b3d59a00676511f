"""API schemas for the storefront.

Pydantic models for JSON responses.
"""

from pydantic import BaseModel, ConfigDict, Field


# ============================================================================
# Common Schemas
# ============================================================================


class ErrorResponse(BaseModel):
    """Error body returned by catalog endpoints when the store fails."""

    error: str = Field(..., description="Underlying failure message")


# ============================================================================
# Category Schemas
# ============================================================================


class CategorySchema(BaseModel):
    """Catalog category."""

    model_config = ConfigDict(from_attributes=True)

    id: str = Field(..., description="Category ID")
    name: str = Field(..., description="Display name")
    slug: str = Field(..., description="URL-safe unique key")


class CategoryListResponse(BaseModel):
    """All categories, ordered by name."""

    categories: list[CategorySchema] = Field(default_factory=list)
