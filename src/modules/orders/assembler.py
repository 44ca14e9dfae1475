"""Builds the Order aggregate from a resolved product list."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Sequence

from modules.orders.constants import OrderStatus
from modules.orders.models import Order, OrderLineItem

if TYPE_CHECKING:
    from modules.products.models import Product


class OrderAssembler:
    """Creates unsaved orders; persistence is the repository's job.

    ``registered_date_time`` always comes from the caller.  Shop opening
    hours are not checked here.
    """

    def create(
        self, products: Sequence[Product], registered_date_time: datetime
    ) -> Order:
        line_items = [
            OrderLineItem(
                product=product,
                product_number=product.product_number,
                price=product.price,
            )
            for product in products
        ]
        order = Order(
            order_status=OrderStatus.INIT,
            registered_date_time=registered_date_time,
            total_price=sum(item.price for item in line_items),
        )
        order.attach_line_items(line_items)
        return order
