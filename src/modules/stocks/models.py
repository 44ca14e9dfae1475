"""Stock model: per-product inventory for stock-tracked product types.

Business rules implemented:
- RN-EST-001: One stock row per stock-tracked product number.
- RN-EST-002: Quantity never goes negative (model guard + DB constraint).
- RN-EST-003: ``version`` is bumped by every optimistic write so stale
  readers can detect a lost update.

Rows are created administratively and only ever decremented by order
placement; nothing in this module deletes them.
"""

from __future__ import annotations

import structlog
from django.db import models

from modules.core.models import BaseModel
from modules.stocks.exceptions import InsufficientStock

logger = structlog.get_logger(__name__)


class Stock(BaseModel):
    """Inventory record keyed by product number."""

    product_number = models.CharField(max_length=32, unique=True)
    quantity = models.PositiveIntegerField(default=0)
    version = models.PositiveIntegerField(default=0)

    class Meta:
        db_table = "stocks"
        ordering = ["product_number"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(quantity__gte=0),
                name="stocks_quantity_non_negative",
            ),
        ]

    @classmethod
    def create(cls, product_number: str, quantity: int) -> Stock:
        """Build an unsaved stock row."""
        return cls(product_number=product_number, quantity=quantity)

    # ------------------------------------------------------------------
    # Domain behaviour
    # ------------------------------------------------------------------

    def is_quantity_less_than(self, quantity: int) -> bool:
        return self.quantity < quantity

    def deduct_quantity(self, quantity: int) -> None:
        """Subtract *quantity* in memory; the caller persists the row.

        Raises:
            InsufficientStock: the deduction would make the quantity negative.
        """
        if self.is_quantity_less_than(quantity):
            raise InsufficientStock(self.product_number, quantity, self.quantity)
        self.quantity -= quantity

    def __str__(self) -> str:
        return f"{self.product_number}: {self.quantity}"
