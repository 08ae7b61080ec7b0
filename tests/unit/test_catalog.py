"""
Unit tests for catalog loading from the product service.
"""

import pytest
import requests
from fastapi.testclient import TestClient

from app.data import database
from app.data.seed import catalog_from_payload
from app.product_service.main import app as product_app
from app.services.product_client import ProductClient


class FakeResponse:
    def __init__(self, payload, status_code=200):
        self.payload = payload
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")

    def json(self):
        return self.payload


PAYLOAD = [{"id": "p9", "name": "Poster", "price": 900}]


class TestCatalogFromPayload:

    def test_builds_products(self):
        catalog = catalog_from_payload(PAYLOAD)
        assert catalog["p9"].name == "Poster"
        assert catalog["p9"].price == 900

    def test_negative_price_rejected(self):
        with pytest.raises(ValueError):
            catalog_from_payload([{"id": "x", "name": "X", "price": -1}])

    @pytest.mark.parametrize("price", [199.99, 200.0, True, "500", None])
    def test_non_integer_price_rejected(self, price):
        with pytest.raises(ValueError):
            catalog_from_payload([{"id": "x", "name": "X", "price": price}])

    def test_load_catalog_fails_on_fractional_price(self, monkeypatch):
        monkeypatch.setattr(database, "PRODUCT_SERVICE_URL", "http://catalog")
        monkeypatch.setattr(
            requests, "get",
            lambda url, timeout: FakeResponse([{"id": "k", "name": "Keyboard", "price": 199.99}]),
        )

        with pytest.raises(ValueError):
            database.load_catalog()


class TestProductClient:

    def test_fetch_catalog(self, monkeypatch):
        calls = []

        def fake_get(url, timeout):
            calls.append(url)
            return FakeResponse(PAYLOAD)

        monkeypatch.setattr(requests, "get", fake_get)

        assert ProductClient("http://catalog:8000/").fetch_catalog() == PAYLOAD
        assert calls == ["http://catalog:8000/products"]

    def test_retries_transient_errors(self, monkeypatch):
        attempts = iter([requests.ConnectionError("down"), FakeResponse(PAYLOAD)])

        def fake_get(url, timeout):
            result = next(attempts)
            if isinstance(result, Exception):
                raise result
            return result

        monkeypatch.setattr(requests, "get", fake_get)

        assert ProductClient("http://catalog").fetch_catalog() == PAYLOAD

    def test_load_catalog_uses_product_service(self, monkeypatch):
        monkeypatch.setattr(database, "PRODUCT_SERVICE_URL", "http://catalog")
        monkeypatch.setattr(requests, "get", lambda url, timeout: FakeResponse(PAYLOAD))

        assert list(database.load_catalog()) == ["p9"]

    def test_load_catalog_defaults_to_seed(self, monkeypatch):
        monkeypatch.setattr(database, "PRODUCT_SERVICE_URL", "")
        assert sorted(database.load_catalog()) == ["p1", "p2", "p3"]


class TestProductServiceMock:

    def test_serves_seed_catalog(self):
        client = TestClient(product_app)

        products = client.get("/products").json()

        assert catalog_from_payload(products)["p1"].price == 500
        assert client.get("/products/p2").json()["name"] == "Mug"
        assert client.get("/products/nope").status_code == 404


def test_main_app_serves_requests():
    from app.data.database import reset_store
    from app.main import app

    reset_store()
    client = TestClient(app)
    assert client.get("/health").status_code == 200
    assert client.get("/cart/main-user").json()["total"] == 0
    reset_store()
