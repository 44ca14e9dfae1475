"""Django ORM implementation of the Order repository.

Satisfies ``IOrderRepository`` using Django's QuerySet API.
``save`` is wrapped in ``transaction.atomic()`` so the Order aggregate
(Order + OrderLineItems) is persisted atomically; when called from the
order workflow it joins the workflow's transaction as a savepoint.
"""

from __future__ import annotations

from typing import Optional

import structlog
from django.core.exceptions import ValidationError
from django.db import transaction

from modules.orders.models import Order, OrderLineItem
from modules.orders.repositories.interfaces import IOrderRepository

logger = structlog.get_logger(__name__)


class OrderDjangoRepository(IOrderRepository):
    """Concrete Order repository backed by Django ORM."""

    @transaction.atomic
    def save(self, entity: Order) -> Order:
        """Persist (create or update) an order and its pending line items.

        Line items are inserted with a single ``bulk_create``.
        """
        entity.save()

        line_items = entity.pending_line_items
        if line_items:
            OrderLineItem.objects.bulk_create(line_items)
        entity.clear_pending_line_items()

        logger.info(
            "order.saved",
            order_id=str(entity.id),
            line_item_count=len(line_items),
            total_price=entity.total_price,
        )
        return entity

    def get_by_id(self, id: str) -> Optional[Order]:
        """Retrieve an order with eager-loaded line items.

        Returns ``None`` for non-existent or invalid IDs.
        """
        try:
            return (
                Order.objects.prefetch_related("line_items")
                .filter(id=id)
                .first()
            )
        except (ValueError, ValidationError):
            return None
