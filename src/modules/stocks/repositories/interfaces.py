"""Stock repository interface.

Besides the batch look-up shared with products, stock needs two write
paths, one per locking discipline:

- ``save``: plain write, safe only while the row is locked by the
  current transaction (pessimistic mode).
- ``save_versioned``: conditional write that only succeeds if nobody
  changed the row since it was read (optimistic mode).
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Iterable, List

from modules.core.repositories.interfaces import IProductNumberKeyed, IRepository

if TYPE_CHECKING:
    from modules.stocks.models import Stock


class IStockRepository(IRepository["Stock"], IProductNumberKeyed["Stock"]):
    """Repository contract for the Stock aggregate."""

    @abstractmethod
    def find_all_by_product_number_in(
        self, product_numbers: Iterable[str], lock: bool = False
    ) -> List[Stock]:
        """Batch fetch stock rows.

        With ``lock=True`` the rows are locked (``SELECT ... FOR UPDATE``)
        until the surrounding transaction ends.  Must then be called inside
        ``transaction.atomic()``.
        """

    @abstractmethod
    def save_versioned(self, stock: Stock) -> Stock:
        """Write ``quantity`` only if ``version`` still matches the database.

        Raises:
            StockUpdateConflict: the row changed since it was read.
        """
