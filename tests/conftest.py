"""Shared fixtures.

Catalog tests run against an in-memory SQLite database so repository
queries and rendered pages see real rows.
"""

from collections.abc import AsyncGenerator
from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from jerseyretro.catalog.models import Category, Product, ProductImage, ProductSize
from jerseyretro.infrastructure.database import Base, get_session
from jerseyretro.main import app

BASE_TIME = datetime(2024, 1, 1, tzinfo=timezone.utc)


# ============================================================================
# Database Fixtures
# ============================================================================


@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create an in-memory database with the catalog schema."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory bound to the test database."""
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession, None]:
    """Session for direct repository/service tests."""
    async with session_factory() as session:
        yield session


# ============================================================================
# Catalog Builder
# ============================================================================


class CatalogBuilder:
    """Inserts catalog rows for a test."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self.session_factory = session_factory
        self._counter = 0

    async def category(self, name: str, slug: str) -> Category:
        """Insert a category."""
        category = Category(name=name, slug=slug)
        async with self.session_factory() as session:
            session.add(category)
            await session.commit()
        return category

    async def product(
        self,
        category: Category,
        name: str,
        sizes: list[tuple[str, int]] | None = None,
        images: list[tuple[str, bool]] | None = None,
        is_available: bool = True,
        price: Decimal = Decimal("450000"),
        club: str = "AC Milan",
        season: str = "1989/90",
        created_at: datetime | None = None,
    ) -> Product:
        """Insert a product with its sizes and images.

        Products created later get later timestamps unless given.
        """
        self._counter += 1
        product = Product(
            slug=f"{name.lower().replace(' ', '-')}-{self._counter}",
            name=name,
            club=club,
            season=season,
            price=price,
            is_available=is_available,
            created_at=created_at or BASE_TIME + timedelta(minutes=self._counter),
            category_id=category.id,
            sizes=[ProductSize(size=size, stock=stock) for size, stock in sizes or []],
            images=[
                ProductImage(url=url, alt=None, is_primary=primary)
                for url, primary in images or []
            ],
        )
        async with self.session_factory() as session:
            session.add(product)
            await session.commit()
        return product


@pytest.fixture
def catalog(session_factory: async_sessionmaker[AsyncSession]) -> CatalogBuilder:
    """Builder for inserting catalog rows."""
    return CatalogBuilder(session_factory)


# ============================================================================
# Client Fixtures
# ============================================================================


@pytest_asyncio.fixture
async def client(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client whose requests use the test database."""

    async def override_get_session() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_session] = override_get_session
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
