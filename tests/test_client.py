"""Tests for the requests-based API client.

Successful calls go through FastAPI's ``TestClient``, which accepts the
same ``request(method, url, params=, json=, timeout=)`` call as a
``requests.Session``.  Failure paths use a stub session returning real
``requests.Response`` objects.
"""

import json

import pytest
import requests

from product_catalog_api.client import ProductCatalogAPI


@pytest.fixture
def api(client):
    return ProductCatalogAPI(base_url="http://testserver", session=client)


def _response(status_code: int, body=None) -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    response._content = json.dumps(body).encode("utf-8") if body is not None else b""
    response.url = "http://testserver/api/products"
    return response


class StubSession:

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def request(self, **kwargs):
        self.calls.append(kwargs)
        if self.error:
            raise self.error
        return self.response


class TestAgainstApplication:

    def test_list_products(self, api):
        products, total, error = api.list_products(category="Electronics", sort="price-desc", limit=3)
        assert error is None
        assert total == 6
        assert [p["id"] for p in products] == [10, 13, 2]

    def test_create_update_delete(self, api):
        created, error = api.create_product({"name": "Mug", "price": 10})
        assert error is None
        assert created["id"] == 16

        updated, error = api.update_product(16, {"brand": "Clay"})
        assert error is None
        assert updated["brand"] == "Clay"
        assert updated["name"] == "Mug"

        ok, error = api.delete_product(16)
        assert ok is True
        assert error is None


class TestFailures:

    def test_validation_error_message(self):
        session = StubSession(_response(400, {"detail": "Product name and price are required."}))
        api = ProductCatalogAPI(base_url="http://example.com", session=session)
        result, error = api.create_product({"name": "Mug"})
        assert result is None
        assert error == {"status_code": 400, "message": "Product name and price are required."}
        assert session.calls[0]["json"] == {"name": "Mug"}

    def test_http_error_detail(self):
        session = StubSession(_response(404, {"detail": "Product 5 not found."}))
        api = ProductCatalogAPI(base_url="http://example.com", session=session)
        ok, error = api.delete_product(5)
        assert ok is False
        assert error == {"status_code": 404, "message": "Product 5 not found."}
        assert session.calls[0]["url"] == "http://example.com/api/products/5"
        assert session.calls[0]["method"] == "DELETE"

    def test_connection_error(self):
        session = StubSession(error=requests.ConnectionError("refused"))
        api = ProductCatalogAPI(base_url="http://example.com/", session=session)
        products, total, error = api.list_products()
        assert (products, total) == ([], 0)
        assert error == {"status_code": None, "message": "refused"}

    def test_list_params_skip_unset_values(self):
        session = StubSession(_response(200, {"products": [], "total": 0}))
        api = ProductCatalogAPI(base_url="http://example.com", prefix="", session=session)
        api.list_products(brand="AudioLux", price_min=10, page=2)
        call = session.calls[0]
        assert call["url"] == "http://example.com/products"
        assert call["params"] == {"brand": "AudioLux", "priceMin": 10, "page": 2}
