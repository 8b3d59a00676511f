"""Catalog repositories for database reads.

The storefront never writes; these expose only the two queries the
listing page and the category API need.
"""

from collections.abc import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from jerseyretro.catalog.models import Category, Product


class CategoryRepository:
    """Repository for Category database operations.

    Example usage:
        async with async_session_factory() as session:
            repo = CategoryRepository(session)
            categories = await repo.find_all_ordered()
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async SQLAlchemy session.
        """
        self.session = session

    async def find_all_ordered(self) -> Sequence[Category]:
        """Get every category ordered by name ascending.

        Ordering follows the database collation.

        Returns:
            Sequence of categories.
        """
        result = await self.session.execute(select(Category).order_by(Category.name.asc()))
        return result.scalars().all()


class ProductRepository:
    """Repository for Product database operations.

    Example usage:
        async with async_session_factory() as session:
            repo = ProductRepository(session)
            products = await repo.find_available(category_slug="retro")
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async SQLAlchemy session.
        """
        self.session = session

    async def find_available(self, category_slug: str | None = None) -> Sequence[Product]:
        """Find available products, newest first.

        Each product comes with its category, primary-flagged images and
        all size rows loaded. An unknown slug yields an empty result.

        Args:
            category_slug: Only return products in the category with this slug.

        Returns:
            Sequence of matching products.
        """
        query = select(Product).where(Product.is_available.is_(True))

        if category_slug:
            query = query.join(Product.category).where(Category.slug == category_slug)

        query = query.options(
            selectinload(Product.category),
            selectinload(Product.primary_images),
            selectinload(Product.sizes),
        ).order_by(Product.created_at.desc())

        result = await self.session.execute(query)
        return result.scalars().all()
