"""HTTP client for the remote catalog segment.

Fetches the mock products endpoint of a showcase service and parses the
payload into Product records.
"""

import httpx
import structlog
from pydantic import ValidationError

from showcase.schemas import Product, ProductFeed

logger = structlog.get_logger()

PRODUCTS_PATH = "/api/products"


class RemoteCatalogError(Exception):
    """Error fetching the remote catalog segment."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class RemoteCatalogClient:
    """Read-only client for the mock products endpoint."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize remote catalog client.

        Args:
            base_url: Base URL of the service serving the endpoint.
            timeout: Request timeout in seconds.
            transport: Optional transport override.
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self._transport,
                headers={
                    "Accept": "application/json",
                    "Cache-Control": "no-store",
                },
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def fetch_products(self) -> list[Product]:
        """Fetch the remote product segment.

        Returns:
            Products in the order served.

        Raises:
            RemoteCatalogError: On non-success status, transport error or
                malformed payload.
        """
        client = await self._get_client()

        try:
            response = await client.get(PRODUCTS_PATH)
        except httpx.RequestError as e:
            logger.error(
                "Remote catalog request failed",
                url=f"{self.base_url}{PRODUCTS_PATH}",
                error=str(e),
            )
            raise RemoteCatalogError(f"Request failed: {e}") from e

        if not response.is_success:
            raise RemoteCatalogError(
                f"HTTP {response.status_code}", response.status_code
            )

        try:
            feed = ProductFeed.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise RemoteCatalogError(
                f"Malformed products payload: {e}", response.status_code
            ) from e

        logger.debug("Remote catalog fetched", product_count=len(feed.products))
        return feed.products
