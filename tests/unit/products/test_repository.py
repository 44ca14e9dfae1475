"""Unit tests for ProductDjangoRepository.

Covers:
- Batch look-up by product number (duplicates collapse, unknown ignored).
- Look-up by selling status.
- save.
"""

from __future__ import annotations

import pytest

from modules.products.models import Product, ProductSellingStatus, ProductType
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.repositories.interfaces import IProductRepository

pytestmark = pytest.mark.unit


class TestRepositoryInstantiation:
    def test_is_instance_of_interface(self):
        assert isinstance(ProductDjangoRepository(), IProductRepository)


class TestFindAllByProductNumberIn:
    def test_returns_distinct_matches(self, make_product):
        make_product("001")
        make_product("002")
        make_product("003")
        repo = ProductDjangoRepository()

        results = repo.find_all_by_product_number_in(["001", "001", "002"])

        assert sorted(p.product_number for p in results) == ["001", "002"]

    def test_unknown_numbers_are_ignored(self, make_product):
        make_product("001")
        repo = ProductDjangoRepository()

        results = repo.find_all_by_product_number_in(["001", "999"])

        assert [p.product_number for p in results] == ["001"]

    def test_empty_input_returns_empty_list(self):
        assert ProductDjangoRepository().find_all_by_product_number_in([]) == []


class TestFindAllBySellingStatusIn:
    def test_filters_by_status(self, make_product):
        make_product("001", selling_status=ProductSellingStatus.SELLING)
        make_product("002", selling_status=ProductSellingStatus.HOLD)
        make_product("003", selling_status=ProductSellingStatus.STOP_SELLING)
        repo = ProductDjangoRepository()

        results = repo.find_all_by_selling_status_in(
            [ProductSellingStatus.SELLING, ProductSellingStatus.HOLD]
        )

        assert [p.product_number for p in results] == ["001", "002"]


class TestSave:
    def test_creates_new_product(self):
        repo = ProductDjangoRepository()
        product = Product(
            product_number="100",
            type=ProductType.BOTTLE,
            name="Orange juice",
            price=3500,
        )
        saved = repo.save(product)
        assert saved is product
        assert Product.objects.filter(product_number="100").exists()
