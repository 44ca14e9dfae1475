"""Unit tests for Order and OrderLineItem models.

Covers:
- Default status is INIT.
- Pending line items are attached to the order in memory only.
- Line item reverse relation via order.line_items.
- Product FK with PROTECT.
- __str__ representation.
"""

from __future__ import annotations

from datetime import datetime, timezone

import pytest
from django.db.models import ProtectedError

from modules.orders.constants import OrderStatus
from modules.orders.models import Order, OrderLineItem

pytestmark = pytest.mark.unit

REGISTERED_AT = datetime(2026, 3, 1, 10, 0, tzinfo=timezone.utc)


@pytest.fixture()
def order():
    return Order.objects.create(total_price=4000, registered_date_time=REGISTERED_AT)


class TestOrderModel:
    def test_default_status_is_init(self, order):
        assert order.order_status == OrderStatus.INIT

    def test_status_choices(self):
        assert {choice for choice, _ in OrderStatus.choices} == {
            "INIT",
            "CANCELED",
            "PAYMENT_COMPLETED",
            "PAYMENT_FAILED",
            "RECEIVED",
            "COMPLETED",
        }

    def test_attach_line_items_sets_order_and_keeps_them_pending(self, make_product):
        product = make_product("001", price=1000)
        order = Order(total_price=1000, registered_date_time=REGISTERED_AT)
        item = OrderLineItem(product=product, product_number="001", price=1000)

        order.attach_line_items([item])

        assert item.order is order
        assert order.pending_line_items == [item]
        assert OrderLineItem.objects.count() == 0

    def test_clear_pending_line_items(self, make_product):
        product = make_product("001")
        order = Order(total_price=1000, registered_date_time=REGISTERED_AT)
        order.attach_line_items(
            [OrderLineItem(product=product, product_number="001", price=1000)]
        )

        order.clear_pending_line_items()

        assert order.pending_line_items == []

    def test_pending_line_items_empty_by_default(self):
        assert Order(registered_date_time=REGISTERED_AT).pending_line_items == []

    def test_str(self, order):
        assert str(order) == f"Order {order.id} (INIT, 4000)"


class TestOrderLineItemModel:
    def test_reverse_relation(self, order, make_product):
        product = make_product("001", price=1000)
        OrderLineItem.objects.create(
            order=order, product=product, product_number="001", price=1000
        )
        OrderLineItem.objects.create(
            order=order, product=product, product_number="001", price=1000
        )

        assert order.line_items.count() == 2

    def test_product_delete_is_protected(self, order, make_product):
        product = make_product("001")
        OrderLineItem.objects.create(
            order=order, product=product, product_number="001", price=1000
        )

        with pytest.raises(ProtectedError):
            product.delete()

    def test_price_is_a_snapshot(self, order, make_product):
        product = make_product("001", price=1000)
        item = OrderLineItem.objects.create(
            order=order, product=product, product_number="001", price=1000
        )

        product.price = 5000
        product.save()
        item.refresh_from_db()

        assert item.price == 1000

    def test_str(self, order, make_product):
        product = make_product("001")
        item = OrderLineItem(
            order=order, product=product, product_number="001", price=1000
        )
        assert str(item) == "001 (1000)"
