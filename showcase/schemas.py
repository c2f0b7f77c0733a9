"""Pydantic schemas for the showcase API.

Defines the product record and the request/response models for the
catalog, comparison and health endpoints.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


# ============================================================================
# Common Types
# ============================================================================


class Category(str, Enum):
    """Product categories."""

    ELECTRONICS = "Electronics"
    BOOKS = "Books"
    CLOTHING = "Clothing"
    HOME = "Home"


# Sentinel category value meaning "no category constraint"
ANY_CATEGORY = "All"


# ============================================================================
# Product Schemas
# ============================================================================


class Product(BaseModel):
    """A sellable catalog item."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(..., description="Product ID, unique within a catalog")
    title: str = Field(..., description="Display title")
    category: Category = Field(..., description="Product category")
    price: int = Field(..., ge=0, description="Price in whole currency units")
    in_stock: bool = Field(
        ..., alias="inStock", description="Availability flag"
    )


class ProductFeed(BaseModel):
    """Mock endpoint payload."""

    products: list[Product] = Field(default_factory=list)


class CatalogResponse(BaseModel):
    """Filtered catalog view."""

    items: list[Product]
    total: int
    label: str = Field(..., description="Result count caption")
    filters_active: bool = Field(
        ..., description="Whether any filter differs from its default"
    )
    loading: bool = Field(
        default=False, description="Whether the remote segment is still loading"
    )
    notice: str | None = Field(None, description="User-visible notice")
    empty_message: str | None = Field(
        None, description="Hint shown when nothing matches"
    )


class ComparisonResponse(BaseModel):
    """Two-product comparison."""

    a: Product | None = None
    b: Product | None = None
    summary: str


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    service: str
    version: str
    product_count: int


class ErrorResponse(BaseModel):
    """Error response body."""

    error_code: str
    message: str
    details: list = Field(default_factory=list)
