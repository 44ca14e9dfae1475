"""Unit tests for ProductService."""

from __future__ import annotations

import pytest

from modules.products.dtos import ProductOutputDTO
from modules.products.models import ProductSellingStatus, ProductType
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.services import ProductService

pytestmark = pytest.mark.unit


class TestGetSellingProducts:
    def test_returns_selling_and_hold_products(self, make_product):
        make_product("001", selling_status=ProductSellingStatus.SELLING)
        make_product("002", selling_status=ProductSellingStatus.HOLD)
        make_product("003", selling_status=ProductSellingStatus.STOP_SELLING)
        service = ProductService(ProductDjangoRepository())

        products = service.get_selling_products()

        assert all(isinstance(p, ProductOutputDTO) for p in products)
        assert [(p.product_number, p.selling_status) for p in products] == [
            ("001", "SELLING"),
            ("002", "HOLD"),
        ]

    def test_dto_carries_catalog_fields(self, make_product):
        make_product("001", price=4500, type=ProductType.BOTTLE, name="Cold brew")
        service = ProductService(ProductDjangoRepository())

        (product,) = service.get_selling_products()

        assert product.type == "BOTTLE"
        assert product.name == "Cold brew"
        assert product.price == 4500
