"""Catalog filter engine.

Pure, order-preserving filtering of a product collection against a
FilterRequest. Malformed price bounds degrade to "unbounded" instead of
raising.
"""

import math
from dataclasses import dataclass
from typing import Iterable

from showcase.schemas import ANY_CATEGORY, Category, Product

RADIX_PREFIXES = ("0x", "0o", "0b")

EMPTY_RESULTS_MESSAGE = "No results. Try changing the filter criteria."


def parse_price_bound(value: str | int | float | None) -> int | float | None:
    """Coerce a raw price bound to a number.

    Text follows browser number parsing: decimal and exponent forms plus
    unsigned 0x/0o/0b prefixes; digit separators are not numbers.

    Args:
        value: Bound as typed by the user, or already numeric.

    Returns:
        The numeric bound, or None when the value is empty, non-numeric
        or not finite.
    """
    if value is None or isinstance(value, bool):
        return None

    # ints compare exactly against prices at any magnitude
    if isinstance(value, int):
        return value

    if isinstance(value, str):
        value = value.strip()
        if not value or "_" in value:
            return None
        try:
            if value[:2].lower() in RADIX_PREFIXES:
                return int(value, 0)
            number = float(value)
        except (ValueError, OverflowError):
            return None
    else:
        number = float(value)

    if not math.isfinite(number):
        return None
    return number


@dataclass(frozen=True)
class FilterRequest:
    """User-chosen constraints applied to a catalog.

    Attributes:
        text: Case-insensitive title substring; empty means no constraint.
        category: Category name or ANY_CATEGORY.
        min_price: Inclusive lower price bound.
        max_price: Inclusive upper price bound.
        only_in_stock: Restrict to available products.
    """

    text: str = ""
    category: Category | str = ANY_CATEGORY
    min_price: int | float | None = None
    max_price: int | float | None = None
    only_in_stock: bool = False

    @classmethod
    def from_raw(
        cls,
        text: str | None = None,
        category: str | None = None,
        min_price: str | int | float | None = None,
        max_price: str | int | float | None = None,
        only_in_stock: bool = False,
    ) -> "FilterRequest":
        """Build a request from raw form or query input.

        Args:
            text: Search box contents.
            category: Selected category, empty or None for any.
            min_price: Lower bound as entered.
            max_price: Upper bound as entered.
            only_in_stock: In-stock checkbox state.

        Returns:
            FilterRequest with bounds coerced to numbers.
        """
        return cls(
            text=text or "",
            category=category or ANY_CATEGORY,
            min_price=parse_price_bound(min_price),
            max_price=parse_price_bound(max_price),
            only_in_stock=bool(only_in_stock),
        )

    @property
    def query(self) -> str:
        """Normalized search text."""
        return self.text.strip().casefold()

    @property
    def is_default(self) -> bool:
        """Check whether no constraint is active."""
        return (
            not self.query
            and self.category == ANY_CATEGORY
            and self.min_price is None
            and self.max_price is None
            and not self.only_in_stock
        )


def matches(product: Product, request: FilterRequest) -> bool:
    """Check a product against every constraint of a request."""
    query = request.query
    if query and query not in product.title.casefold():
        return False
    if request.category != ANY_CATEGORY and product.category != request.category:
        return False
    if request.min_price is not None and product.price < request.min_price:
        return False
    if request.max_price is not None and product.price > request.max_price:
        return False
    if request.only_in_stock and not product.in_stock:
        return False
    return True


def filter_products(
    catalog: Iterable[Product], request: FilterRequest
) -> list[Product]:
    """Select the products matching a request.

    Args:
        catalog: Products to search, in display order.
        request: Constraints to apply.

    Returns:
        Matching products in catalog order.
    """
    return [p for p in catalog if matches(p, request)]


def results_label(count: int) -> str:
    """Render the result count caption."""
    return f"{count} result" if count == 1 else f"{count} results"

