"""Order domain exceptions.

Raised by the Service Layer when business rules are violated.
The API layer (Views) catches these and translates them into
appropriate HTTP responses.

Stock failures are raised by the stock ledger and re-exported here so
callers of the order workflow need a single import.
"""

from __future__ import annotations

from typing import Sequence

from modules.stocks.exceptions import InsufficientStock, StockUpdateConflict

__all__ = [
    "InsufficientStock",
    "OrderNotFound",
    "ProductNotFound",
    "StockUpdateConflict",
]


class OrderNotFound(Exception):
    """The requested order does not exist."""


class ProductNotFound(Exception):
    """One or more requested product numbers have no catalog entry."""

    def __init__(self, product_numbers: Sequence[str]) -> None:
        self.product_numbers = list(product_numbers)
        super().__init__(f"Products not found: {', '.join(self.product_numbers)}.")
