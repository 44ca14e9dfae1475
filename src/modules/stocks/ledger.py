"""Stock ledger: all-or-nothing stock deduction for one order.

Business rules enforced:
- RN-EST-001: Only stock-tracked product types (BOTTLE, BAKERY) are counted.
- RN-EST-002: Each distinct product number is checked against the total
  units requested for it (``["A", "A"]`` needs two units of A).
- RN-EST-004: Every product is validated **before** any row is changed,
  so a failing product never leaves a partial deduction behind.

Check-then-deduct is only race-free under a locking discipline: rows are
either locked for the transaction (``pessimistic``) or written with a
version check (``optimistic``).  The caller owns the transaction.
"""

from __future__ import annotations

from collections import Counter
from typing import TYPE_CHECKING, Dict, List, Sequence

import structlog

from modules.stocks.constants import StockLockingMode
from modules.stocks.exceptions import InsufficientStock

if TYPE_CHECKING:
    from modules.products.models import Product
    from modules.stocks.models import Stock
    from modules.stocks.repositories.interfaces import IStockRepository

logger = structlog.get_logger(__name__)


class StockLedger:
    """Verifies and applies the stock deductions an order implies."""

    def __init__(
        self,
        stock_repository: IStockRepository,
        locking_mode: str = StockLockingMode.PESSIMISTIC,
    ) -> None:
        self._stock_repo = stock_repository
        self._locking_mode = StockLockingMode(locking_mode)

    @property
    def locking_mode(self) -> StockLockingMode:
        return self._locking_mode

    def deduct_for_order(self, products: Sequence[Product]) -> Dict[str, int]:
        """Deduct one unit per stock-tracked product in *products*.

        Returns the applied deduction per product number (empty when the
        order has no stock-tracked products).

        Raises:
            InsufficientStock: some product lacks quantity; nothing deducted.
            StockUpdateConflict: optimistic write lost a race (optimistic
                mode only); the caller must roll back and may retry.
        """
        stock_product_numbers = self._extract_stock_product_numbers(products)
        if not stock_product_numbers:
            return {}

        counts = Counter(stock_product_numbers)
        stocks = self._stock_map_by(counts)

        self._verify(counts, stocks)

        for product_number, count in counts.items():
            stock = stocks[product_number]
            stock.deduct_quantity(count)
            if self._locking_mode is StockLockingMode.OPTIMISTIC:
                self._stock_repo.save_versioned(stock)
            else:
                self._stock_repo.save(stock)
            logger.info(
                "stock.deducted",
                product_number=product_number,
                quantity=count,
                remaining=stock.quantity,
            )

        return dict(counts)

    # ------------------------------------------------------------------
    # Steps
    # ------------------------------------------------------------------

    @staticmethod
    def _extract_stock_product_numbers(products: Sequence[Product]) -> List[str]:
        return [p.product_number for p in products if p.is_stock_tracked]

    def _stock_map_by(self, counts: Counter) -> Dict[str, Stock]:
        lock = self._locking_mode is StockLockingMode.PESSIMISTIC
        stocks = self._stock_repo.find_all_by_product_number_in(counts.keys(), lock=lock)
        return {s.product_number: s for s in stocks}

    @staticmethod
    def _verify(counts: Counter, stocks: Dict[str, Stock]) -> None:
        for product_number in sorted(counts):
            requested = counts[product_number]
            stock = stocks.get(product_number)
            available = stock.quantity if stock is not None else 0
            if stock is None or stock.is_quantity_less_than(requested):
                logger.warning(
                    "stock.insufficient",
                    product_number=product_number,
                    requested=requested,
                    available=available,
                )
                raise InsufficientStock(product_number, requested, available)
