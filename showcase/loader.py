"""One-time, cancellable loading of the remote catalog segment."""

import asyncio
import contextlib
from typing import Protocol

import structlog

from showcase.catalog import CatalogStore, get_api_feed
from showcase.client import RemoteCatalogError
from showcase.schemas import Product

logger = structlog.get_logger()


class CatalogSource(Protocol):
    """Anything that can supply the remote segment."""

    async def fetch_products(self) -> list[Product]:
        ...


class InProcessCatalogSource:
    """Serves the mock endpoint's products without a network round trip."""

    def __init__(self, count: int = 24) -> None:
        self.count = count

    async def fetch_products(self) -> list[Product]:
        return list(get_api_feed(self.count))


class CatalogLoader:
    """Loads the remote segment into a store once.

    After cancel() the outstanding load is abandoned: whatever it returns,
    success or failure, is discarded and the store is not touched.

    Example usage:
        loader = CatalogLoader(store, RemoteCatalogClient(url))
        loader.start()
        ...
        loader.cancel()
    """

    def __init__(self, store: CatalogStore, source: CatalogSource) -> None:
        """Initialize loader.

        Args:
            store: Catalog store receiving the merged result.
            source: Supplier of the remote segment.
        """
        self.store = store
        self.source = source
        self.cancelled = False
        self._task: asyncio.Task | None = None

    async def load(self) -> bool:
        """Fetch the remote segment and merge it into the store.

        Returns:
            True if the remote segment was applied.
        """
        self.store.begin_load()

        try:
            products = await self.source.fetch_products()
        except RemoteCatalogError as e:
            if self.cancelled:
                logger.info("Discarding failed load after cancellation")
                return False
            logger.warning(
                "Remote catalog unavailable, keeping local catalog",
                error=e.message,
                status_code=e.status_code,
            )
            self.store.fail_load()
            return False

        if self.cancelled:
            logger.info(
                "Discarding late remote catalog response",
                product_count=len(products),
            )
            return False

        self.store.apply_remote(products)
        return True

    def start(self) -> asyncio.Task:
        """Run load() in the background."""
        if self._task is None:
            self._task = asyncio.create_task(self.load())
        return self._task

    def cancel(self) -> None:
        """Abandon the outstanding load."""
        self.cancelled = True

    async def shutdown(self) -> None:
        """Abandon the load and stop its background task."""
        self.cancel()
        task = self._task
        if task is None or task.done():
            return
        task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task
