"""
==============================================================================
Pytest Configuration and Fixtures
==============================================================================

Provides settings, product, state and client fixtures.

==============================================================================
"""

import pytest
from typing import Callable, Generator, List
from fastapi.testclient import TestClient

from catalog_editor.catalog.models import Product
from catalog_editor.catalog.store import ProductStore
from catalog_editor.config import Settings
from catalog_editor.main import Application
from catalog_editor.state.manager import CatalogStateManager


# ============================================================================
# SETTINGS FIXTURES
# ============================================================================

@pytest.fixture
def settings() -> Settings:
    """Settings isolated from the environment and .env file."""
    return Settings(
        _env_file=None,
        app_env="development",
        debug=False,
        category_locale="en",
        refilter_after_commit=False,
    )


# ============================================================================
# PRODUCT FIXTURES
# ============================================================================

@pytest.fixture
def pen() -> Product:
    return Product(id=1, name="Pen", price="2.50", category="Stationery", stock=40)


@pytest.fixture
def book() -> Product:
    return Product(id=2, name="Book", price="39.90", category="Books", stock=3)


@pytest.fixture
def products(pen: Product, book: Product) -> List[Product]:
    """Two products: Pen (#1) and Book (#2)."""
    return [pen, book]


@pytest.fixture
def store(products: List[Product]) -> ProductStore:
    return ProductStore(products)


# ============================================================================
# STATE FIXTURES
# ============================================================================

@pytest.fixture
def manager(settings: Settings, products: List[Product]) -> CatalogStateManager:
    """State manager seeded with Pen and Book."""
    return CatalogStateManager(settings, products)


@pytest.fixture
def empty_manager(settings: Settings) -> CatalogStateManager:
    return CatalogStateManager(settings)


@pytest.fixture
def fill_form() -> Callable[..., None]:
    """Type values into every form field of a state manager."""
    def _fill(
        manager: CatalogStateManager,
        name: str = "Chair",
        category: str = "Furniture",
        price: str = "99.90",
        stock: str = "5"
    ) -> None:
        manager.set_field("name", name)
        manager.select_category(category)
        manager.set_field("price", price)
        manager.set_field("stock", stock)

    return _fill


# ============================================================================
# CLIENT FIXTURES
# ============================================================================

@pytest.fixture
def client(settings: Settings) -> Generator[TestClient, None, None]:
    """Test client running the application lifespan."""
    app = Application(settings).app

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def seeded_client(client: TestClient) -> TestClient:
    """Client whose catalog holds Pen (#1) and Book (#2)."""
    for name, category, price, stock in (
        ("Pen", "Stationery", "2.50", "40"),
        ("Book", "Books", "39.90", "3"),
    ):
        client.put("/api/v1/catalog/form/fields/name", json={"value": name})
        client.put("/api/v1/catalog/form/fields/category", json={"value": category})
        client.put("/api/v1/catalog/form/fields/price", json={"value": price})
        client.put("/api/v1/catalog/form/fields/stock", json={"value": stock})
        response = client.post("/api/v1/catalog/form/submit")
        assert response.json()["committed"] is True
    return client
