"""Product Showcase main application.

Serves the mock products endpoint and JSON views of the searchable,
filterable catalog and of the two-product comparison.
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import Annotated, AsyncGenerator

import structlog
from fastapi import Depends, FastAPI, HTTPException, Query, Response, status
from fastapi.responses import JSONResponse

from showcase.catalog import CatalogStore, get_api_feed, get_catalog_store
from showcase.client import RemoteCatalogClient
from showcase.config import settings
from showcase.filters import EMPTY_RESULTS_MESSAGE, FilterRequest, results_label
from showcase.loader import CatalogLoader, InProcessCatalogSource
from showcase.middleware import setup_middleware
from showcase.schemas import (
    ANY_CATEGORY,
    CatalogResponse,
    ComparisonResponse,
    ErrorResponse,
    HealthResponse,
    Product,
    ProductFeed,
)


# ============================================================================
# Logging
# ============================================================================

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(message)s",
    stream=sys.stderr,
)
structlog.configure(
    processors=[
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer(),
    ],
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    wrapper_class=structlog.stdlib.BoundLogger,
    cache_logger_on_first_use=True,
)

logger = structlog.get_logger()


# ============================================================================
# Application Lifecycle
# ============================================================================


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Build the catalog and load the remote segment.

    With remote_catalog_url set, the segment is fetched in the background
    and the load is abandoned on shutdown. Otherwise the in-process mock
    feed is merged before the first request.
    """
    store = get_catalog_store(
        local_count=settings.local_product_count,
        currency=settings.currency_label,
    )
    logger.info(
        "Starting Product Showcase",
        version=settings.api_version,
        local_count=len(store.local_products),
        remote_catalog_url=settings.remote_catalog_url,
    )

    client: RemoteCatalogClient | None = None
    if settings.remote_catalog_url:
        client = RemoteCatalogClient(
            settings.remote_catalog_url, timeout=settings.request_timeout
        )
        loader = CatalogLoader(store, client)
        loader.start()
    else:
        loader = CatalogLoader(
            store, InProcessCatalogSource(settings.api_product_count)
        )
        await loader.load()

    yield

    await loader.shutdown()
    if client is not None:
        await client.close()
    logger.info("Product Showcase shutdown complete")


app = FastAPI(
    title="Product Showcase",
    description="Mock product catalog with search, filters and comparison",
    version=settings.api_version,
    lifespan=lifespan,
)

setup_middleware(app)


# ============================================================================
# Dependencies
# ============================================================================


def get_store() -> CatalogStore:
    """Get catalog store dependency."""
    return get_catalog_store(
        local_count=settings.local_product_count,
        currency=settings.currency_label,
    )


# ============================================================================
# Health Endpoints
# ============================================================================


@app.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check(
    store: Annotated[CatalogStore, Depends(get_store)],
) -> HealthResponse:
    """Check service health."""
    return HealthResponse(
        status="healthy",
        service=settings.service_name,
        version=settings.api_version,
        product_count=len(store.products),
    )


# ============================================================================
# Mock Endpoint
# ============================================================================


@app.get("/api/products", response_model=ProductFeed, tags=["Products"])
async def list_api_products(response: Response) -> ProductFeed:
    """Serve the mock product segment.

    Same products for the life of the process; clients must not cache.
    """
    response.headers["Cache-Control"] = "no-store"
    return ProductFeed(products=get_api_feed(settings.api_product_count))


# ============================================================================
# Catalog Endpoints
# ============================================================================


@app.get("/catalog", response_model=CatalogResponse, tags=["Catalog"])
async def search_catalog(
    store: Annotated[CatalogStore, Depends(get_store)],
    q: Annotated[str | None, Query()] = None,
    category: Annotated[str, Query()] = ANY_CATEGORY,
    min_price: Annotated[str | None, Query()] = None,
    max_price: Annotated[str | None, Query()] = None,
    only_in_stock: Annotated[bool, Query()] = False,
) -> CatalogResponse:
    """Search and filter the catalog.

    Args:
        q: Case-insensitive title search.
        category: Category name, or "All".
        min_price: Lower price bound; non-numeric text is ignored.
        max_price: Upper price bound; non-numeric text is ignored.
        only_in_stock: Restrict to available products.

    Returns:
        Matching products in catalog order.
    """
    request = FilterRequest.from_raw(
        text=q,
        category=category,
        min_price=min_price,
        max_price=max_price,
        only_in_stock=only_in_stock,
    )
    items = store.search(request)

    return CatalogResponse(
        items=items,
        total=len(items),
        label=results_label(len(items)),
        filters_active=not request.is_default,
        loading=store.loading,
        notice=store.notice,
        empty_message=None if items else EMPTY_RESULTS_MESSAGE,
    )


@app.get(
    "/catalog/{product_id}",
    response_model=Product,
    responses={404: {"model": ErrorResponse}},
    tags=["Catalog"],
)
async def get_product(
    product_id: str,
    store: Annotated[CatalogStore, Depends(get_store)],
) -> Product:
    """Get product details by ID.

    Raises:
        HTTPException: If product not found.
    """
    product = store.find_product(product_id)
    if product is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={
                "error_code": "PRODUCT_NOT_FOUND",
                "message": f"Product not found: {product_id}",
            },
        )
    return product


@app.get("/compare", response_model=ComparisonResponse, tags=["Catalog"])
async def compare(
    store: Annotated[CatalogStore, Depends(get_store)],
    a: Annotated[str | None, Query()] = None,
    b: Annotated[str | None, Query()] = None,
) -> ComparisonResponse:
    """Compare two catalog products.

    Unknown or missing IDs count as no selection.
    """
    return ComparisonResponse(
        a=store.find_product(a),
        b=store.find_product(b),
        summary=store.compare(a, b),
    )


# ============================================================================
# Error Handlers
# ============================================================================


@app.exception_handler(HTTPException)
async def http_exception_handler(request, exc: HTTPException):
    """Handle HTTP exceptions with consistent format."""
    detail = exc.detail
    if isinstance(detail, dict):
        error_code = detail.get("error_code", "ERROR")
        message = detail.get("message", str(detail))
        details = detail.get("details", [])
    else:
        error_code = "ERROR"
        message = str(detail)
        details = []

    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error_code": error_code,
            "message": message,
            "details": details,
            "request_id": getattr(request.state, "request_id", None),
        },
    )
