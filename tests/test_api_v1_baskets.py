# Tests for API v1 baskets router.
# Created: 2026-10-19

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from scango.api.v1.baskets import router
from scango.store import BasketStore


@pytest.fixture
def store(monkeypatch):
    import scango.store as mod

    basket_store = BasketStore(ttl_seconds=3600)
    monkeypatch.setattr(mod, "_basket_store", basket_store)
    return basket_store


@pytest.fixture
def client(store):
    app = FastAPI()
    app.include_router(router, prefix="/api/v1")
    return TestClient(app)


class TestCreateBasket:
    """Tests for POST /api/v1/baskets."""

    def test_create(self, client, store):
        resp = client.post(
            "/api/v1/baskets",
            json={"items": [{"barcode": "5012345678900", "quantity": 2, "title": "Tea"}]},
        )
        assert resp.status_code == 200
        data = resp.json()
        assert data["ok"] is True
        assert data["code"].startswith("SG-")
        assert store.get(data["code"]) is not None

    @pytest.mark.parametrize(
        "body",
        [{}, {"items": []}, {"items": "nope"}, {"items": [{"quantity": 1}]}],
    )
    def test_rejects_empty_or_invalid(self, client, body):
        resp = client.post("/api/v1/baskets", json=body)
        assert resp.status_code == 400
        assert resp.json() == {"ok": False}

    def test_rejects_invalid_json(self, client):
        resp = client.post(
            "/api/v1/baskets", content=b"{not json", headers={"Content-Type": "application/json"}
        )
        assert resp.status_code == 400


class TestGetBasket:
    """Tests for GET /api/v1/baskets/{code}."""

    def test_round_trip(self, client):
        created = client.post(
            "/api/v1/baskets", json={"items": [{"barcode": "123", "quantity": 3}]}
        ).json()
        resp = client.get(f"/api/v1/baskets/{created['code']}")
        assert resp.status_code == 200
        data = resp.json()
        assert data["ok"] is True
        assert data["items"][0]["barcode"] == "123"
        assert data["items"][0]["quantity"] == 3

    def test_unknown_code(self, client):
        resp = client.get("/api/v1/baskets/SG-00000")
        assert resp.status_code == 404
        assert resp.json() == {"ok": False}

    def test_legacy_create_path(self, client):
        resp = client.post("/api/v1/baskets/create", json={"items": [{"barcode": "9"}]})
        assert resp.status_code == 200
        assert client.get(f"/api/v1/baskets/{resp.json()['code']}").status_code == 200


class TestScanPageItems:
    """Items as the scan page builds them round-trip unchanged."""

    ITEM = {
        "barcode": "5012345678900",
        "title": "Breakfast Tea",
        "price": 2.5,
        "quantity": 2,
        "stock": 7,
        "inStock": True,
        "variantId": "gid://shopify/ProductVariant/4411",
        "variantTitle": "Default Title",
    }

    def test_numeric_price_and_variant_fields_kept(self, client):
        created = client.post("/api/v1/baskets", json={"items": [self.ITEM]})
        assert created.status_code == 200

        resp = client.get(f"/api/v1/baskets/{created.json()['code']}")
        assert resp.status_code == 200
        assert resp.json()["items"] == [self.ITEM]

    def test_string_price_accepted(self, client):
        item = {**self.ITEM, "price": "2.50"}
        created = client.post("/api/v1/baskets", json={"items": [item]}).json()
        items = client.get(f"/api/v1/baskets/{created['code']}").json()["items"]
        assert items[0]["price"] == "2.50"
        assert items[0]["variantId"] == "gid://shopify/ProductVariant/4411"

    def test_unsent_fields_not_returned_as_null(self, client):
        created = client.post(
            "/api/v1/baskets", json={"items": [{"barcode": "123", "quantity": 1}]}
        ).json()
        items = client.get(f"/api/v1/baskets/{created['code']}").json()["items"]
        assert items == [{"barcode": "123", "quantity": 1}]
