"""Shared fixtures.

Every test gets its own application, and therefore its own freshly
seeded product store, so mutations never leak between tests.
"""

import pytest
from fastapi.testclient import TestClient

from product_catalog_api.app.core.config import Settings
from product_catalog_api.app.core.seed import seed_products
from product_catalog_api.app.main import create_app
from product_catalog_api.app.schemas.product import Product
from product_catalog_api.app.services.product_store import ProductStore


@pytest.fixture
def products() -> list[Product]:
    return seed_products()


@pytest.fixture
def store(products) -> ProductStore:
    return ProductStore(products)


@pytest.fixture
def app():
    return create_app(Settings(api_prefix="/api", seed_products=True))


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client
