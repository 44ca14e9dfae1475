"""Order and OrderLineItem models.

Business rules implemented:
- RN-PED-001: One line item per requested unit; duplicates in the request
  produce separate line items.
- RN-PED-002: Line items snapshot ``product_number`` and ``price`` at order
  time; later catalog price changes never rewrite history.
- RN-PED-003: ``total_price`` is the sum of the line item prices.
- Product FK uses PROTECT to preserve order history.
"""

from __future__ import annotations

from typing import List

from django.db import models

from modules.core.models import BaseModel
from modules.orders.constants import OrderStatus


class Order(BaseModel):
    """Order aggregate root.

    Line items built before the order is persisted are kept in memory as
    *pending* and written by the repository together with the order.
    """

    order_status = models.CharField(
        max_length=20,
        choices=OrderStatus.choices,
        default=OrderStatus.INIT,
    )
    total_price = models.PositiveIntegerField(default=0)
    registered_date_time = models.DateTimeField()

    class Meta:
        db_table = "orders"
        ordering = ["-registered_date_time"]
        indexes = [
            models.Index(fields=["order_status"], name="orders_status_idx"),
            models.Index(
                fields=["registered_date_time"], name="orders_registered_idx"
            ),
        ]

    # ------------------------------------------------------------------
    # Pending line items
    # ------------------------------------------------------------------

    def attach_line_items(self, line_items: List[OrderLineItem]) -> None:
        if not hasattr(self, "_pending_line_items"):
            self._pending_line_items = []
        for item in line_items:
            item.order = self
            self._pending_line_items.append(item)

    def clear_pending_line_items(self) -> None:
        if hasattr(self, "_pending_line_items"):
            self._pending_line_items.clear()

    @property
    def pending_line_items(self) -> List[OrderLineItem]:
        return list(getattr(self, "_pending_line_items", []))

    def __str__(self) -> str:
        return f"Order {self.id} ({self.order_status}, {self.total_price})"


class OrderLineItem(BaseModel):
    """One unit of a product within an order, with a price snapshot."""

    order = models.ForeignKey(
        "orders.Order",
        on_delete=models.CASCADE,
        related_name="line_items",
    )
    product = models.ForeignKey(
        "products.Product",
        on_delete=models.PROTECT,
        related_name="order_line_items",
    )
    product_number = models.CharField(max_length=32)
    price = models.PositiveIntegerField()

    class Meta:
        db_table = "order_line_items"
        ordering = ["created_at", "id"]

    def __str__(self) -> str:
        return f"{self.product_number} ({self.price})"
