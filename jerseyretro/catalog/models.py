"""SQLAlchemy models for the jersey catalog.

Defines Category, Product, ProductImage and ProductSize tables. The
storefront only reads these; rows are created by seeding/admin tooling.
"""

from datetime import datetime, timezone
from decimal import Decimal
from uuid import uuid4

from sqlalchemy import Boolean, CheckConstraint, DateTime, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from jerseyretro.infrastructure.database import Base


def _new_id() -> str:
    return str(uuid4())


class Category(Base):
    """Catalog category (e.g. "Retro", "Euro Classics").

    Attributes:
        id: Unique category identifier.
        name: Display name, used for ordering.
        slug: URL-safe unique key, used by the listing filter.
    """

    __tablename__ = "categories"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    slug: Mapped[str] = mapped_column(String(200), nullable=False, unique=True, index=True)

    products: Mapped[list["Product"]] = relationship("Product", back_populates="category")

    def __repr__(self) -> str:
        """String representation."""
        return f"<Category(id={self.id}, slug={self.slug})>"


class Product(Base):
    """Jersey offered in the storefront.

    Attributes:
        id: Unique product identifier.
        slug: URL-safe unique key for the detail page.
        name: Product name (e.g. "Classic Home Kit").
        club: Club the jersey belongs to.
        season: Season label (e.g. "1998/99").
        price: Display price in whole currency units.
        is_available: Unavailable products are never listed.
        created_at: Creation timestamp, listing is newest first.
        category_id: Owning category.
    """

    __tablename__ = "products"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    slug: Mapped[str] = mapped_column(String(300), nullable=False, unique=True, index=True)
    name: Mapped[str] = mapped_column(String(300), nullable=False)
    club: Mapped[str] = mapped_column(String(200), nullable=False)
    season: Mapped[str] = mapped_column(String(50), nullable=False)
    price: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    is_available: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True, index=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        index=True,
    )
    category_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("categories.id"),
        nullable=False,
        index=True,
    )

    # Relationships
    category: Mapped["Category"] = relationship("Category", back_populates="products")
    images: Mapped[list["ProductImage"]] = relationship(
        "ProductImage",
        back_populates="product",
        cascade="all, delete-orphan",
    )
    primary_images: Mapped[list["ProductImage"]] = relationship(
        "ProductImage",
        primaryjoin="and_(Product.id == ProductImage.product_id, ProductImage.is_primary.is_(True))",
        viewonly=True,
    )
    sizes: Mapped[list["ProductSize"]] = relationship(
        "ProductSize",
        back_populates="product",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        """String representation."""
        return f"<Product(id={self.id}, slug={self.slug})>"

    @property
    def primary_image(self) -> "ProductImage | None":
        """First image flagged primary, if any.

        Requires ``primary_images`` to be loaded.
        """
        return self.primary_images[0] if self.primary_images else None


class ProductImage(Base):
    """Image attached to a product."""

    __tablename__ = "product_images"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    product_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("products.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    url: Mapped[str] = mapped_column(String(1000), nullable=False)
    alt: Mapped[str | None] = mapped_column(String(300), nullable=True)
    is_primary: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    product: Mapped["Product"] = relationship("Product", back_populates="images")

    def __repr__(self) -> str:
        """String representation."""
        return f"<ProductImage(id={self.id}, primary={self.is_primary})>"


class ProductSize(Base):
    """Stock record for one size of a product.

    Attributes:
        size: Size label, usually one of S, M, L, XL, XXL.
        stock: Units on hand, never negative.
    """

    __tablename__ = "product_sizes"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    product_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("products.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    size: Mapped[str] = mapped_column(String(20), nullable=False)
    stock: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    product: Mapped["Product"] = relationship("Product", back_populates="sizes")

    __table_args__ = (
        CheckConstraint("stock >= 0", name="ck_product_sizes_stock_non_negative"),
    )

    def __repr__(self) -> str:
        """String representation."""
        return f"<ProductSize(size={self.size}, stock={self.stock})>"
