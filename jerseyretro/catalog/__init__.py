"""Jersey Catalog.

Models, read-only repositories, display helpers and the catalog service
behind the storefront listing and category API.
"""

from jerseyretro.catalog.models import Category, Product, ProductImage, ProductSize
from jerseyretro.catalog.presentation import (
    ProductCard,
    SizeBadge,
    StockTier,
    build_product_card,
    format_price,
    sort_sizes,
    stock_tier,
    total_stock,
)
from jerseyretro.catalog.repository import CategoryRepository, ProductRepository
from jerseyretro.catalog.service import (
    CatalogService,
    ProductListing,
    QueryFailureKind,
    QueryResult,
)

__all__ = [
    # Models
    "Category",
    "Product",
    "ProductImage",
    "ProductSize",
    # Repository
    "CategoryRepository",
    "ProductRepository",
    # Presentation
    "ProductCard",
    "SizeBadge",
    "StockTier",
    "build_product_card",
    "format_price",
    "sort_sizes",
    "stock_tier",
    "total_stock",
    # Service
    "CatalogService",
    "ProductListing",
    "QueryFailureKind",
    "QueryResult",
]
