"""Deterministic mock product generation.

Produces the two catalog segments: the local segment shown before any
network access and the API segment served by the mock endpoint. Output
depends only on the requested count.
"""

from dataclasses import dataclass, field
from typing import Iterator

from showcase.schemas import Category, Product


# ============================================================================
# Constants
# ============================================================================

CATEGORY_ORDER: tuple[Category, ...] = (
    Category.ELECTRONICS,
    Category.BOOKS,
    Category.CLOTHING,
    Category.HOME,
)

LOCAL_ADJECTIVES = (
    "Premium",
    "Compact",
    "Eco",
    "Classic",
    "Smart",
    "Urban",
    "Pro",
    "Lite",
)

LOCAL_NOUNS: dict[Category, tuple[str, ...]] = {
    Category.ELECTRONICS: ("Headphones", "Speaker", "Mouse", "Keyboard", "Charger"),
    Category.BOOKS: ("Guide", "Handbook", "Stories", "Cookbook", "Workbook"),
    Category.CLOTHING: ("Jacket", "T-Shirt", "Hoodie", "Sneakers", "Jeans"),
    Category.HOME: ("Lamp", "Mug", "Towel", "Curtains", "Organizer"),
}

API_ADJECTIVES = ("Nova", "Aero", "Fusion", "Prime", "Flex", "Aura")

API_NOUNS: dict[Category, tuple[str, ...]] = {
    Category.ELECTRONICS: ("Tablet", "Camera", "Router", "Monitor", "SSD"),
    Category.BOOKS: ("Novel", "Poems", "Essays", "Atlas", "Manual"),
    Category.CLOTHING: ("Coat", "Shirt", "Cap", "Boots", "Shorts"),
    Category.HOME: ("Vase", "Frame", "Chair", "Shelf", "Mirror"),
}


# ============================================================================
# Segment Profiles
# ============================================================================


@dataclass(frozen=True)
class SegmentProfile:
    """Generation rules for one catalog segment.

    For product number i (1-based):
        category = CATEGORY_ORDER[(i - category_offset) % 4]
        price = base_prices[category] + (i * price_step) % price_span
                + (i % 5) * variety_step
        in_stock = i % stock_cycle != 0

    Attributes:
        name: Segment name for logging.
        id_prefix: Prefix prepended to the product number to form the id.
        title_tag: Word inserted before the number in titles.
        category_offset: Shift applied before cycling through categories.
        base_prices: Starting price per category.
        price_step: Multiplier of the cyclic price component.
        price_span: Modulus of the cyclic price component.
        variety_step: Multiplier of the (i % 5) price component.
        stock_cycle: Every stock_cycle-th product is out of stock.
        adjectives: Title adjectives, indexed by i.
        nouns: Title nouns per category, indexed by i.
    """

    name: str
    id_prefix: str
    title_tag: str
    category_offset: int
    base_prices: dict[Category, int]
    price_step: int
    price_span: int
    variety_step: int
    stock_cycle: int
    adjectives: tuple[str, ...]
    nouns: dict[Category, tuple[str, ...]] = field(default_factory=dict)


LOCAL_SEGMENT = SegmentProfile(
    name="local",
    id_prefix="",
    title_tag="",
    category_offset=1,
    base_prices={
        Category.ELECTRONICS: 80,
        Category.BOOKS: 20,
        Category.CLOTHING: 40,
        Category.HOME: 30,
    },
    price_step=7,
    price_span=120,
    variety_step=3,
    stock_cycle=3,
    adjectives=LOCAL_ADJECTIVES,
    nouns=LOCAL_NOUNS,
)

API_SEGMENT = SegmentProfile(
    name="api",
    id_prefix="api-",
    title_tag="API",
    category_offset=0,
    base_prices={
        Category.ELECTRONICS: 120,
        Category.BOOKS: 35,
        Category.CLOTHING: 60,
        Category.HOME: 45,
    },
    price_step=9,
    price_span=140,
    variety_step=0,
    stock_cycle=4,
    adjectives=API_ADJECTIVES,
    nouns=API_NOUNS,
)


# ============================================================================
# Product Generator
# ============================================================================


class ProductGenerator:
    """Generates one catalog segment.

    Example usage:
        generator = ProductGenerator(LOCAL_SEGMENT, count=100)
        for product in generator.generate():
            print(product.title)
    """

    def __init__(self, profile: SegmentProfile, count: int) -> None:
        """Initialize generator.

        Args:
            profile: Segment generation rules.
            count: Number of products to generate.
        """
        self.profile = profile
        self.count = max(count, 0)

    def _category(self, index: int) -> Category:
        offset = index - self.profile.category_offset
        return CATEGORY_ORDER[offset % len(CATEGORY_ORDER)]

    def _price(self, category: Category, index: int) -> int:
        profile = self.profile
        return (
            profile.base_prices[category]
            + (index * profile.price_step) % profile.price_span
            + (index % 5) * profile.variety_step
        )

    def _title(self, category: Category, index: int) -> str:
        profile = self.profile
        adjective = profile.adjectives[index % len(profile.adjectives)]
        nouns = profile.nouns[category]
        noun = nouns[index % len(nouns)]
        parts = [adjective, noun, profile.title_tag, str(index)]
        return " ".join(part for part in parts if part)

    def _generate_product(self, index: int) -> Product:
        category = self._category(index)
        return Product(
            id=f"{self.profile.id_prefix}{index}",
            title=self._title(category, index),
            category=category,
            price=self._price(category, index),
            in_stock=index % self.profile.stock_cycle != 0,
        )

    def generate(self) -> Iterator[Product]:
        """Generate all products.

        Yields:
            Products numbered 1..count.
        """
        for index in range(1, self.count + 1):
            yield self._generate_product(index)

    def generate_list(self) -> list[Product]:
        """Generate all products as a list."""
        return list(self.generate())


def generate_products(count: int) -> list[Product]:
    """Generate the local catalog segment."""
    return ProductGenerator(LOCAL_SEGMENT, count).generate_list()


def generate_api_products(count: int = 24) -> list[Product]:
    """Generate the segment served by the mock endpoint."""
    return ProductGenerator(API_SEGMENT, count).generate_list()
