"""In-memory catalog store.

Holds the catalog currently shown to the user: the local segment at
start-up, extended with the remote segment once it has been loaded.
"""

from typing import Iterable, Sequence

import structlog

from showcase.comparison import compare_products
from showcase.filters import FilterRequest, filter_products
from showcase.generator import generate_api_products, generate_products
from showcase.schemas import Product

logger = structlog.get_logger()

LOAD_FAILED_NOTICE = "Could not load products from the API."


def merge_catalogs(
    local: Sequence[Product], remote: Iterable[Product]
) -> list[Product]:
    """Append remote products to the local ones.

    Remote entries whose id already exists locally are dropped, so local
    products win on collision.

    Args:
        local: Local segment.
        remote: Remote segment.

    Returns:
        Local products followed by the non-colliding remote products.
    """
    existing_ids = {p.id for p in local}
    return list(local) + [p for p in remote if p.id not in existing_ids]


class CatalogStore:
    """Current catalog plus its loading state."""

    def __init__(
        self,
        local_products: Sequence[Product] | None = None,
        local_count: int = 100,
        currency: str = "RON",
    ) -> None:
        """Initialize catalog store.

        Args:
            local_products: Local segment; generated when omitted.
            local_count: Size of the generated local segment.
            currency: Label used in comparison summaries.
        """
        if local_products is None:
            local_products = generate_products(local_count)
        self.local_products: list[Product] = list(local_products)
        self.currency = currency
        self._products: list[Product] = list(self.local_products)
        self.loading = False
        self.notice: str | None = None

    @property
    def products(self) -> list[Product]:
        """Products currently in the catalog, in display order."""
        return self._products

    def begin_load(self) -> None:
        """Mark the remote segment as loading."""
        self.loading = True
        self.notice = None

    def apply_remote(self, remote: Iterable[Product]) -> None:
        """Merge a loaded remote segment into the catalog."""
        self._products = merge_catalogs(self.local_products, remote)
        self.loading = False
        logger.info(
            "Remote catalog merged",
            local_count=len(self.local_products),
            total_count=len(self._products),
        )

    def fail_load(self, notice: str = LOAD_FAILED_NOTICE) -> None:
        """Record a failed remote load; the catalog stays as it is."""
        self.loading = False
        self.notice = notice

    def find_product(self, product_id: str | None) -> Product | None:
        """Get product by ID.

        Args:
            product_id: Product ID, empty or None for no selection.

        Returns:
            The product, or None if not selected or not found.
        """
        if not product_id:
            return None
        for product in self._products:
            if product.id == product_id:
                return product
        return None

    def search(self, request: FilterRequest) -> list[Product]:
        """Filter the current catalog."""
        return filter_products(self._products, request)

    def compare(self, id_a: str | None, id_b: str | None) -> str:
        """Compare two catalog products by ID."""
        return compare_products(
            self.find_product(id_a),
            self.find_product(id_b),
            currency=self.currency,
        )


# Global catalog store instance
_catalog_store: CatalogStore | None = None


def get_catalog_store(
    local_count: int = 100,
    currency: str = "RON",
) -> CatalogStore:
    """Get or create catalog store instance.

    Args:
        local_count: Size of the generated local segment.
        currency: Label used in comparison summaries.

    Returns:
        CatalogStore instance.
    """
    global _catalog_store
    if _catalog_store is None:
        _catalog_store = CatalogStore(local_count=local_count, currency=currency)
    return _catalog_store


# Mock endpoint payload, fixed for the life of the process
_api_feed: list[Product] | None = None


def get_api_feed(count: int = 24) -> list[Product]:
    """Get the products served by the mock endpoint.

    Args:
        count: Number of products generated on first use.

    Returns:
        The API segment.
    """
    global _api_feed
    if _api_feed is None:
        _api_feed = generate_api_products(count)
    return _api_feed
