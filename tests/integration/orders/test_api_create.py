"""Integration tests for the order endpoints.

Covers:
- 201 on POST /api/v1/orders/ with total, line items and registration time.
- 400 when the product number list is missing or empty.
- 404 for unknown product numbers; 409 for insufficient stock.
- GET /api/v1/orders/{id}/ returns the stored order or 404.
"""

from __future__ import annotations

import uuid

import pytest
from freezegun import freeze_time

from modules.orders.models import Order
from modules.products.models import ProductType
from modules.stocks.models import Stock

pytestmark = pytest.mark.integration

URL = "/api/v1/orders/"


@pytest.fixture()
def menu(make_product, make_stock):
    make_product("001", price=1000, type=ProductType.BOTTLE)
    make_product("002", price=3000, type=ProductType.BAKERY)
    make_product("003", price=5000, type=ProductType.HANDMADE)
    make_stock("001", 2)
    make_stock("002", 1)


class TestCreateOrderEndpoint:
    @freeze_time("2026-03-01 10:00:00")
    def test_create_success(self, api_client, menu):
        response = api_client.post(
            URL, {"product_numbers": ["001", "001", "003"]}, format="json"
        )

        assert response.status_code == 201
        body = response.json()
        assert body["order_status"] == "INIT"
        assert body["total_price"] == 7000
        assert body["registered_date_time"].startswith("2026-03-01T10:00:00")
        assert sorted(body["products"], key=lambda p: p["price"]) == [
            {"product_number": "001", "price": 1000},
            {"product_number": "001", "price": 1000},
            {"product_number": "003", "price": 5000},
        ]
        assert Order.objects.filter(id=body["id"]).exists()
        assert Stock.objects.get(product_number="001").quantity == 0

    def test_missing_product_numbers_returns_400(self, api_client):
        response = api_client.post(URL, {}, format="json")

        assert response.status_code == 400
        assert response.json()["product_numbers"] == [
            "Product number list is required."
        ]

    def test_empty_product_numbers_returns_400(self, api_client):
        response = api_client.post(URL, {"product_numbers": []}, format="json")

        assert response.status_code == 400
        assert response.json()["product_numbers"] == [
            "Product number list is required."
        ]

    def test_unknown_product_returns_404(self, api_client, menu):
        response = api_client.post(
            URL, {"product_numbers": ["001", "999"]}, format="json"
        )

        assert response.status_code == 404
        assert response.json()["product_numbers"] == ["999"]
        assert Order.objects.count() == 0
        assert Stock.objects.get(product_number="001").quantity == 2

    def test_insufficient_stock_returns_409(self, api_client, menu):
        response = api_client.post(
            URL, {"product_numbers": ["001", "002", "002"]}, format="json"
        )

        assert response.status_code == 409
        body = response.json()
        assert body["product_number"] == "002"
        assert "requested 2, available 1" in body["detail"]
        assert Stock.objects.get(product_number="001").quantity == 2
        assert Order.objects.count() == 0


class TestRetrieveOrderEndpoint:
    def test_retrieve_created_order(self, api_client, menu):
        created = api_client.post(
            URL, {"product_numbers": ["003"]}, format="json"
        ).json()

        response = api_client.get(f"{URL}{created['id']}/")

        assert response.status_code == 200
        assert response.json() == created

    def test_retrieve_unknown_returns_404(self, api_client):
        response = api_client.get(f"{URL}{uuid.uuid4()}/")

        assert response.status_code == 404
        assert response.json() == {"detail": "Order not found."}

    def test_retrieve_invalid_id_returns_404(self, api_client):
        response = api_client.get(f"{URL}not-a-uuid/")

        assert response.status_code == 404
