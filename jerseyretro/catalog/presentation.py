"""Display facts derived from fetched catalog rows.

Everything here is a pure function of an already-loaded Product
aggregate; nothing is persisted.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum

from jerseyretro.catalog.models import Product, ProductSize


# ============================================================================
# Constants
# ============================================================================

SIZE_ORDER = ["S", "M", "L", "XL", "XXL"]

LOW_STOCK_THRESHOLD = 10

CURRENCY_PREFIX = "Rp"


# ============================================================================
# Stock
# ============================================================================


class StockTier(str, Enum):
    """Stock badge shown on a product card."""

    OUT_OF_STOCK = "out_of_stock"
    LIMITED = "limited"
    IN_STOCK = "in_stock"


def total_stock(sizes: Iterable[ProductSize]) -> int:
    """Sum stock across a product's size rows."""
    return sum(size.stock for size in sizes)


def stock_tier(total: int, threshold: int = LOW_STOCK_THRESHOLD) -> StockTier:
    """Classify a total stock figure.

    Args:
        total: Total units across all sizes.
        threshold: Totals below this (and above zero) are limited.

    Returns:
        OUT_OF_STOCK for zero, LIMITED below the threshold, IN_STOCK otherwise.
    """
    if total <= 0:
        return StockTier.OUT_OF_STOCK
    if total < threshold:
        return StockTier.LIMITED
    return StockTier.IN_STOCK


def size_rank(size: str) -> int:
    """Position of a size label in SIZE_ORDER; unknown labels rank last."""
    try:
        return SIZE_ORDER.index(size)
    except ValueError:
        return len(SIZE_ORDER)


def sort_sizes(sizes: Iterable[ProductSize]) -> list[ProductSize]:
    """Order size rows S, M, L, XL, XXL, then unknown labels as given."""
    return sorted(sizes, key=lambda s: size_rank(s.size))


# ============================================================================
# Price
# ============================================================================


def format_price(price: Decimal | int | float) -> str:
    """Format a price as a whole-unit Rupiah string, e.g. ``Rp 450.000``."""
    amount = Decimal(str(price)).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    grouped = f"{int(amount):,}".replace(",", ".")
    return f"{CURRENCY_PREFIX} {grouped}"


# ============================================================================
# View Models
# ============================================================================


@dataclass(frozen=True)
class SizeBadge:
    """One size chip on a product card."""

    label: str
    stock: int

    @property
    def in_stock(self) -> bool:
        """Whether the size can be ordered."""
        return self.stock > 0


@dataclass(frozen=True)
class ProductCard:
    """Everything the listing template needs for one product."""

    slug: str
    name: str
    club: str
    season: str
    category_name: str
    price_display: str
    total_stock: int
    stock_tier: StockTier
    image_url: str | None = None
    image_alt: str | None = None
    sizes: list[SizeBadge] = field(default_factory=list)

    @property
    def url(self) -> str:
        """Detail page path."""
        return f"/products/{self.slug}"


def build_product_card(product: Product, low_stock_threshold: int = LOW_STOCK_THRESHOLD) -> ProductCard:
    """Derive a ProductCard from a product with category, images and sizes loaded.

    Args:
        product: Product aggregate as returned by ProductRepository.find_available.
        low_stock_threshold: Threshold for the limited stock tier.

    Returns:
        Card view model.
    """
    total = total_stock(product.sizes)
    image = product.primary_image

    return ProductCard(
        slug=product.slug,
        name=product.name,
        club=product.club,
        season=product.season,
        category_name=product.category.name,
        price_display=format_price(product.price),
        total_stock=total,
        stock_tier=stock_tier(total, low_stock_threshold),
        image_url=image.url if image else None,
        image_alt=(image.alt or product.name) if image else None,
        sizes=[SizeBadge(label=s.size, stock=s.stock) for s in sort_sizes(product.sizes)],
    )
