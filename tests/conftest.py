import pytest

from rest_framework.test import APIClient

from modules.products.models import Product, ProductSellingStatus, ProductType
from modules.stocks.models import Stock


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def make_product():
    """Factory persisting a Product with sensible defaults."""

    def _make(
        product_number: str,
        price: int = 1000,
        type: str = ProductType.HANDMADE,
        selling_status: str = ProductSellingStatus.SELLING,
        name: str = "Menu item",
    ) -> Product:
        return Product.objects.create(
            product_number=product_number,
            type=type,
            selling_status=selling_status,
            name=name,
            price=price,
        )

    return _make


@pytest.fixture()
def make_stock():
    """Factory persisting a Stock row."""

    def _make(product_number: str, quantity: int) -> Stock:
        stock = Stock.create(product_number, quantity)
        stock.save()
        return stock

    return _make
