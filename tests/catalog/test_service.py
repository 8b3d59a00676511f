"""Tests for CatalogService result handling."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import OperationalError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from jerseyretro.catalog.repository import CategoryRepository, ProductRepository
from jerseyretro.catalog.service import CatalogService, QueryFailureKind, QueryResult


@pytest.fixture
def category_repo() -> MagicMock:
    """Mock category repository."""
    repo = MagicMock(spec=CategoryRepository)
    repo.find_all_ordered = AsyncMock(return_value=[])
    return repo


@pytest.fixture
def product_repo() -> MagicMock:
    """Mock product repository."""
    repo = MagicMock(spec=ProductRepository)
    repo.find_available = AsyncMock(return_value=[])
    return repo


class TestQueryResult:
    """Tests for QueryResult constructors."""

    def test_ok(self) -> None:
        """Successful result carries the value."""
        result = QueryResult.ok([1, 2])
        assert result.success
        assert result.value == [1, 2]
        assert result.error is None

    def test_fail(self) -> None:
        """Failed result carries kind and message."""
        result = QueryResult.fail(QueryFailureKind.STORE_ERROR, "boom")
        assert not result.success
        assert result.value is None
        assert result.error_kind == QueryFailureKind.STORE_ERROR
        assert result.error == "boom"


class TestCatalogService:
    """Tests for CatalogService."""

    def test_requires_session_or_repositories(self) -> None:
        """Service cannot be built without a data source."""
        with pytest.raises(ValueError):
            CatalogService()

    @pytest.mark.asyncio
    async def test_list_categories_store_failure(
        self, category_repo: MagicMock, product_repo: MagicMock
    ) -> None:
        """Store errors become failure results with the underlying message."""
        category_repo.find_all_ordered.side_effect = SQLAlchemyError("database unavailable")
        service = CatalogService(categories=category_repo, products=product_repo)

        result = await service.list_categories()

        assert not result.success
        assert result.error_kind == QueryFailureKind.STORE_ERROR
        assert result.error == "database unavailable"

    @pytest.mark.asyncio
    async def test_list_products_store_failure(
        self, category_repo: MagicMock, product_repo: MagicMock
    ) -> None:
        """Listing failures are reported the same way as category failures."""
        product_repo.find_available.side_effect = OperationalError(
            "SELECT", {}, Exception("connection refused")
        )
        service = CatalogService(categories=category_repo, products=product_repo)

        result = await service.list_products("retro")

        assert not result.success
        assert result.error_kind == QueryFailureKind.STORE_ERROR
        assert "connection refused" in (result.error or "")

    @pytest.mark.asyncio
    async def test_non_store_errors_propagate(
        self, category_repo: MagicMock, product_repo: MagicMock
    ) -> None:
        """Programming errors are not swallowed into results."""
        product_repo.find_available.side_effect = RuntimeError("bug")
        service = CatalogService(categories=category_repo, products=product_repo)

        with pytest.raises(RuntimeError):
            await service.list_products()

    @pytest.mark.asyncio
    async def test_empty_slug_means_no_filter(
        self, category_repo: MagicMock, product_repo: MagicMock
    ) -> None:
        """An empty category string is the unfiltered listing."""
        service = CatalogService(categories=category_repo, products=product_repo)

        result = await service.list_products("")

        product_repo.find_available.assert_awaited_once_with(None)
        assert result.success
        assert result.value is not None
        assert result.value.active_category is None
        assert not result.value.is_filtered

    @pytest.mark.asyncio
    async def test_list_products_from_database(self, catalog, session: AsyncSession) -> None:
        """Listing bundles products with every category for the filter bar."""
        retro = await catalog.category("Retro", "retro")
        await catalog.category("Euro Classics", "euro")
        await catalog.product(retro, "Classic Home Kit", sizes=[("S", 0), ("M", 5)])

        result = await CatalogService(session).list_products("retro")

        assert result.success
        listing = result.value
        assert listing is not None
        assert [p.name for p in listing.products] == ["Classic Home Kit"]
        assert [c.slug for c in listing.categories] == ["euro", "retro"]
        assert listing.active_category == "retro"
        assert listing.is_filtered
