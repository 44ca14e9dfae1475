"""Product catalog model.

Business rules implemented:
- RN-PRO-001: ``product_number`` is the unique business key of a product.
- RN-PRO-002: Price is a non-negative integer (smallest currency unit).
- RN-PRO-003: Only BOTTLE and BAKERY products are stock-tracked; HANDMADE
  products are made to order and never touch a Stock row.

The order workflow only **reads** products.
"""

from __future__ import annotations

from typing import FrozenSet, List

from django.db import models

from modules.core.models import BaseModel


class ProductType(models.TextChoices):
    HANDMADE = "HANDMADE", "Handmade beverage"
    BOTTLE = "BOTTLE", "Bottled beverage"
    BAKERY = "BAKERY", "Bakery"

    @classmethod
    def stock_tracked_types(cls) -> FrozenSet[str]:
        """Product types for which inventory is maintained."""
        return frozenset({cls.BOTTLE, cls.BAKERY})

    @classmethod
    def contains_stock_type(cls, product_type: str) -> bool:
        return product_type in cls.stock_tracked_types()


class ProductSellingStatus(models.TextChoices):
    SELLING = "SELLING", "Selling"
    HOLD = "HOLD", "On hold"
    STOP_SELLING = "STOP_SELLING", "Stopped"

    @classmethod
    def for_display(cls) -> List[str]:
        """Statuses shown on the kiosk menu."""
        return [cls.SELLING, cls.HOLD]


class Product(BaseModel):
    """Product aggregate root (read-only for ordering)."""

    product_number = models.CharField(max_length=32, unique=True)
    type = models.CharField(max_length=20, choices=ProductType.choices)
    selling_status = models.CharField(
        max_length=20,
        choices=ProductSellingStatus.choices,
        default=ProductSellingStatus.SELLING,
    )
    name = models.CharField(max_length=255)
    price = models.PositiveIntegerField()

    class Meta:
        db_table = "products"
        ordering = ["product_number"]
        indexes = [
            models.Index(fields=["selling_status"], name="products_selling_idx"),
        ]

    @property
    def is_stock_tracked(self) -> bool:
        return ProductType.contains_stock_type(self.type)

    def __str__(self) -> str:
        return f"{self.product_number} - {self.name}"
