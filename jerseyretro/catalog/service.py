"""Catalog service for storefront reads.

Wraps the repositories and turns store failures into QueryResult
failures, so the JSON API and the HTML listing share one error story
and each decides how to present it.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, TypeVar

import structlog
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from jerseyretro.catalog.models import Category, Product
from jerseyretro.catalog.repository import CategoryRepository, ProductRepository

T = TypeVar("T")

logger = structlog.get_logger()


# ============================================================================
# Service Result Types
# ============================================================================


class QueryFailureKind(str, Enum):
    """Why a catalog query did not produce a value."""

    STORE_ERROR = "store_error"


@dataclass
class QueryResult(Generic[T]):
    """Result of a catalog query.

    Attributes:
        success: Whether the query produced a value.
        value: Query value on success.
        error_kind: Failure classification on failure.
        error: Underlying failure message on failure.
    """

    success: bool
    value: T | None = None
    error_kind: QueryFailureKind | None = None
    error: str | None = None

    @classmethod
    def ok(cls, value: T) -> "QueryResult[T]":
        """Build a successful result."""
        return cls(success=True, value=value)

    @classmethod
    def fail(cls, kind: QueryFailureKind, message: str) -> "QueryResult[T]":
        """Build a failed result."""
        return cls(success=False, error_kind=kind, error=message)


@dataclass
class ProductListing:
    """Data behind the product listing page.

    Attributes:
        products: Available products, newest first.
        categories: All categories for the filter bar.
        active_category: Slug filter applied, if any.
    """

    products: list[Product] = field(default_factory=list)
    categories: list[Category] = field(default_factory=list)
    active_category: str | None = None

    @property
    def is_filtered(self) -> bool:
        """Whether a category filter was applied."""
        return bool(self.active_category)


# ============================================================================
# Service
# ============================================================================


class CatalogService:
    """Service for catalog reads.

    Example usage:
        async with async_session_factory() as session:
            service = CatalogService(session)
            result = await service.list_products(category_slug="retro")
            if result.success:
                listing = result.value
    """

    def __init__(
        self,
        session: AsyncSession | None = None,
        categories: CategoryRepository | None = None,
        products: ProductRepository | None = None,
    ) -> None:
        """Initialize service.

        Repositories default to ones bound to ``session``; pass them
        explicitly to substitute doubles.

        Args:
            session: Async SQLAlchemy session.
            categories: Category repository.
            products: Product repository.
        """
        if session is None and (categories is None or products is None):
            raise ValueError("CatalogService needs a session or both repositories")
        self.categories = categories or CategoryRepository(session)
        self.products = products or ProductRepository(session)

    async def list_categories(self) -> QueryResult[list[Category]]:
        """Get all categories ordered by name.

        Returns:
            Result holding the categories, or a store failure.
        """
        try:
            categories = await self.categories.find_all_ordered()
        except SQLAlchemyError as e:
            logger.error("Category lookup failed", error=str(e))
            return QueryResult.fail(QueryFailureKind.STORE_ERROR, str(e))

        return QueryResult.ok(list(categories))

    async def list_products(
        self,
        category_slug: str | None = None,
    ) -> QueryResult[ProductListing]:
        """Get available products plus filter-bar categories.

        Zero matching products is a successful, empty listing.

        Args:
            category_slug: Optional category slug filter.

        Returns:
            Result holding the listing, or a store failure.
        """
        category_slug = category_slug or None

        try:
            products = await self.products.find_available(category_slug)
            categories = await self.categories.find_all_ordered()
        except SQLAlchemyError as e:
            logger.error(
                "Product listing query failed",
                category=category_slug,
                error=str(e),
            )
            return QueryResult.fail(QueryFailureKind.STORE_ERROR, str(e))

        logger.debug(
            "Product listing loaded",
            category=category_slug,
            product_count=len(products),
        )

        return QueryResult.ok(
            ProductListing(
                products=list(products),
                categories=list(categories),
                active_category=category_slug,
            )
        )
