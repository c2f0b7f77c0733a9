"""Test fixtures for Product Showcase tests."""

import pytest
from fastapi.testclient import TestClient

import showcase.catalog as catalog_module
from showcase.catalog import CatalogStore
from showcase.schemas import Category, Product


@pytest.fixture(autouse=True)
def reset_stores():
    """Reset global stores before each test."""
    catalog_module._catalog_store = None
    catalog_module._api_feed = None
    yield
    catalog_module._catalog_store = None
    catalog_module._api_feed = None


@pytest.fixture
def client():
    """Create test client."""
    from showcase.main import app

    with TestClient(app) as client:
        yield client


@pytest.fixture
def lamp() -> Product:
    return Product(
        id="1",
        title="Smart Lamp",
        category=Category.HOME,
        price=50,
        in_stock=True,
    )


@pytest.fixture
def jacket() -> Product:
    return Product(
        id="2",
        title="Pro Jacket",
        category=Category.CLOTHING,
        price=150,
        in_stock=False,
    )


@pytest.fixture
def small_catalog(lamp: Product, jacket: Product) -> list[Product]:
    """Two-product catalog used by the end-to-end scenarios."""
    return [lamp, jacket]


@pytest.fixture
def catalog_store() -> CatalogStore:
    """Create catalog store with the default local segment."""
    return CatalogStore(local_count=100)
