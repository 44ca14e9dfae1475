"""Stock domain exceptions.

Raised by the Stock model and the StockLedger.  The API layer (Views)
catches these and translates them into HTTP 409 responses.
"""

from __future__ import annotations


class InsufficientStock(Exception):
    """Available quantity is lower than the quantity an order needs."""

    def __init__(self, product_number: str, requested: int, available: int) -> None:
        self.product_number = product_number
        self.requested = requested
        self.available = available
        super().__init__(
            f"Product {product_number}: requested {requested}, available {available}."
        )


class StockUpdateConflict(Exception):
    """A version-checked stock write lost the race to a concurrent order."""

    def __init__(self, product_number: str) -> None:
        self.product_number = product_number
        super().__init__(
            f"Stock for product {product_number} was modified concurrently."
        )
