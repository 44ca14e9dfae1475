"""Django ORM implementation of the Stock repository.

Pessimistic reads lock rows ordered by product number so that two orders
touching the same products always acquire locks in the same order and
cannot deadlock each other.
"""

from __future__ import annotations

from typing import Iterable, List

import structlog
from django.db.models import F
from django.utils import timezone

from modules.stocks.exceptions import StockUpdateConflict
from modules.stocks.models import Stock
from modules.stocks.repositories.interfaces import IStockRepository

logger = structlog.get_logger(__name__)


class StockDjangoRepository(IStockRepository):
    """Concrete Stock repository backed by Django ORM."""

    def find_all_by_product_number_in(
        self, product_numbers: Iterable[str], lock: bool = False
    ) -> List[Stock]:
        numbers = sorted(set(product_numbers))
        if not numbers:
            return []
        queryset = Stock.objects.filter(product_number__in=numbers)
        if lock:
            queryset = queryset.select_for_update()
        return list(queryset.order_by("product_number"))

    def save(self, entity: Stock) -> Stock:
        """Persist (create or update) a stock row.

        Updates always bump ``version`` so a concurrent ``save_versioned``
        holding the previous version is rejected.
        """
        if entity._state.adding:
            entity.save()
        else:
            entity.version = F("version") + 1
            entity.save(update_fields=["quantity", "version"])
            entity.refresh_from_db(fields=["version"])
        logger.info(
            "stock.saved",
            product_number=entity.product_number,
            quantity=entity.quantity,
            version=entity.version,
        )
        return entity

    def save_versioned(self, stock: Stock) -> Stock:
        now = timezone.now()
        updated = Stock.objects.filter(pk=stock.pk, version=stock.version).update(
            quantity=stock.quantity,
            version=F("version") + 1,
            updated_at=now,
        )
        if not updated:
            logger.warning(
                "stock.version_conflict",
                product_number=stock.product_number,
                expected_version=stock.version,
            )
            raise StockUpdateConflict(stock.product_number)

        stock.version += 1
        stock.updated_at = now
        logger.info(
            "stock.saved",
            product_number=stock.product_number,
            quantity=stock.quantity,
            version=stock.version,
        )
        return stock
