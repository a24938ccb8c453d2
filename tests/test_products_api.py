"""HTTP tests for the product routes against the seeded catalogue."""

from fastapi.testclient import TestClient

from product_catalog_api.app.core.config import Settings
from product_catalog_api.app.main import create_app


class TestListProducts:

    def test_default_page(self, client):
        resp = client.get("/api/products")
        assert resp.status_code == 200
        body = resp.json()
        assert body["total"] == 15
        assert [p["id"] for p in body["products"]] == list(range(1, 10))

    def test_serializes_image_url_in_camel_case(self, client):
        product = client.get("/api/products", params={"limit": 1}).json()["products"][0]
        assert product == {
            "id": 1,
            "name": "Luxury Perfume",
            "price": 120,
            "brand": "Scentful",
            "category": "Fragrances",
            "imageUrl": "https://placehold.co/400x400/1e293b/d1d5db?text=Perfume",
        }

    def test_electronics_by_price_desc_first_page(self, client):
        resp = client.get(
            "/api/products",
            params={"category": "Electronics", "sort": "price-desc", "page": 1, "limit": 3},
        )
        body = resp.json()
        assert body["total"] == 6
        assert [p["id"] for p in body["products"]] == [10, 13, 2]
        assert [p["price"] for p in body["products"]] == [450, 300, 250]

    def test_search_audio(self, client):
        body = client.get("/api/products", params={"search": "audio"}).json()
        assert [p["id"] for p in body["products"]] == [2, 8]
        assert body["total"] == 2

    def test_malformed_numbers_are_ignored(self, client):
        resp = client.get(
            "/api/products",
            params={"priceMin": "abc", "priceMax": "", "page": "x", "limit": "y"},
        )
        assert resp.status_code == 200
        body = resp.json()
        assert body["total"] == 15
        assert len(body["products"]) == 9

    def test_price_range_and_brand(self, client):
        body = client.get(
            "/api/products", params={"brand": "AUDIOLUX", "priceMin": "200", "priceMax": "300"}
        ).json()
        assert [p["id"] for p in body["products"]] == [2]

    def test_page_past_end(self, client):
        body = client.get("/api/products", params={"page": 5}).json()
        assert body == {"products": [], "total": 15}


class TestCreateProduct:

    def test_created_with_next_id(self, client):
        resp = client.post("/api/products", json={"name": "Mug", "price": 10})
        assert resp.status_code == 201
        assert resp.json()["id"] == 16
        assert client.get("/api/products").json()["total"] == 16

    def test_ids_not_reused_after_delete(self, client):
        assert client.post("/api/products", json={"name": "Mug", "price": 10}).json()["id"] == 16
        assert client.delete("/api/products/16").status_code == 204
        resp = client.post("/api/products", json={"name": "Cup", "price": 8})
        assert resp.json()["id"] == 17

    def test_missing_fields(self, client):
        assert client.post("/api/products", json={"name": "Mug"}).status_code == 400
        resp = client.post("/api/products", json={"price": 10})
        assert resp.status_code == 400
        assert resp.json()["detail"] == "Product name and price are required."
        assert client.get("/api/products").json()["total"] == 15

    def test_accepts_image_url_alias(self, client):
        resp = client.post(
            "/api/products", json={"name": "Mug", "price": 10, "imageUrl": "mug.png"}
        )
        assert resp.json()["imageUrl"] == "mug.png"


class TestUpdateProduct:

    def test_merges_fields(self, client):
        resp = client.put("/api/products/2", json={"price": 199, "id": 42})
        assert resp.status_code == 200
        body = resp.json()
        assert body["id"] == 2
        assert body["price"] == 199
        assert body["name"] == "Wireless Headphones"

    def test_unknown_id(self, client):
        assert client.put("/api/products/999", json={"price": 1}).status_code == 404


class TestDeleteProduct:

    def test_deletes(self, client):
        resp = client.delete("/api/products/1")
        assert resp.status_code == 204
        assert resp.content == b""
        assert client.get("/api/products").json()["total"] == 14

    def test_unknown_id(self, client):
        assert client.delete("/api/products/999").status_code == 404


class TestApplication:

    def test_health(self, client):
        assert client.get("/health").json() == {"status": "ok", "products": 15}

    def test_unseeded_store_and_custom_prefix(self):
        app = create_app(Settings(api_prefix="", seed_products=False))
        with TestClient(app) as client:
            assert client.get("/products").json() == {"products": [], "total": 0}
            assert client.post("/products", json={"name": "Mug", "price": 10}).json()["id"] == 1

    def test_cors_headers(self, client):
        resp = client.get("/api/products", headers={"Origin": "http://localhost:5173"})
        assert resp.headers["access-control-allow-origin"] == "*"
