"""Order service layer (Use Cases).

Orchestrates order placement: product resolution, stock deduction, order
assembly and persistence.  The service defines the unit-of-work boundary.
Every write of one order happens inside a single ``transaction.atomic``
block, so stock is never deducted without the order that consumed it.

Business rules enforced:
- RN-PED-001: Every requested unit (duplicates included) becomes a line item.
- RN-PED-004: Unknown product numbers reject the whole request.
- RN-EST-001/002/004: All-or-nothing stock deduction (see ``StockLedger``).
- RN-EST-005: Concurrent deductions are serialized by the configured
  ``STOCK_LOCKING_MODE``; optimistic conflicts re-run the transaction.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Optional, Sequence

import structlog
from django.conf import settings
from django.db import transaction

from modules.orders.assembler import OrderAssembler
from modules.orders.dtos import OrderOutputDTO
from modules.orders.exceptions import OrderNotFound, ProductNotFound, StockUpdateConflict
from modules.products.lookup import ProductLookup
from modules.stocks.constants import StockLockingMode
from modules.stocks.ledger import StockLedger

if TYPE_CHECKING:
    from modules.orders.dtos import CreateOrderDTO
    from modules.orders.models import Order
    from modules.orders.repositories.interfaces import IOrderRepository
    from modules.products.models import Product
    from modules.products.repositories.interfaces import IProductRepository
    from modules.stocks.repositories.interfaces import IStockRepository

logger = structlog.get_logger(__name__)


class OrderService:
    """Application service for Order use-cases.

    Receives repositories via constructor injection (DIP).  ``locking_mode``
    and ``max_retries`` default to the ``STOCK_LOCKING_MODE`` and
    ``STOCK_OPTIMISTIC_MAX_RETRIES`` settings.
    """

    def __init__(
        self,
        order_repository: IOrderRepository,
        product_repository: IProductRepository,
        stock_repository: IStockRepository,
        locking_mode: Optional[str] = None,
        max_retries: Optional[int] = None,
    ) -> None:
        self._order_repo = order_repository
        self._lookup = ProductLookup(product_repository)
        self._ledger = StockLedger(
            stock_repository,
            locking_mode or settings.STOCK_LOCKING_MODE,
        )
        self._assembler = OrderAssembler()

        if self._ledger.locking_mode is StockLockingMode.OPTIMISTIC:
            if max_retries is None:
                max_retries = settings.STOCK_OPTIMISTIC_MAX_RETRIES
            self._max_attempts = max(1, max_retries)
        else:
            self._max_attempts = 1

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create_order(
        self, dto: CreateOrderDTO, registered_date_time: datetime
    ) -> OrderOutputDTO:
        """Place an order for ``dto.product_numbers``.

        Raises:
            ProductNotFound: a requested product number does not exist.
            InsufficientStock: a stock-tracked product lacks quantity.
            StockUpdateConflict: optimistic retries exhausted.
            django.db.DatabaseError: persistence failed (propagated as is).
        """
        log = logger.bind(
            product_count=len(dto.product_numbers),
            locking_mode=str(self._ledger.locking_mode),
        )
        log.info("order.creation_started")

        attempt = 0
        while True:
            attempt += 1
            try:
                order = self._place_order(dto.product_numbers, registered_date_time)
                break
            except StockUpdateConflict as exc:
                if attempt >= self._max_attempts:
                    log.warning(
                        "order.stock_conflict_exhausted",
                        attempts=attempt,
                        product_number=exc.product_number,
                    )
                    raise
                log.info(
                    "order.stock_conflict_retry",
                    attempt=attempt,
                    product_number=exc.product_number,
                )

        log.info(
            "order.created",
            order_id=str(order.id),
            total_price=order.total_price,
            attempts=attempt,
        )

        # Re-fetch with prefetch for output
        order_with_relations = self._order_repo.get_by_id(str(order.id))
        return OrderOutputDTO.from_entity(order_with_relations or order)

    @transaction.atomic
    def _place_order(
        self, product_numbers: Sequence[str], registered_date_time: datetime
    ) -> Order:
        """RESOLVE_PRODUCTS -> DEDUCT_STOCK -> ASSEMBLE_ORDER -> PERSIST."""
        products = self._find_products_by(product_numbers)
        self._ledger.deduct_for_order(products)
        order = self._assembler.create(products, registered_date_time)
        return self._order_repo.save(order)

    def _find_products_by(self, product_numbers: Sequence[str]) -> list[Product]:
        resolved = self._lookup.resolve_ordered(product_numbers)
        missing = self._lookup.missing_product_numbers(product_numbers, resolved)
        if missing:
            logger.warning("order.products_not_found", product_numbers=missing)
            raise ProductNotFound(missing)
        return [p for p in resolved if p is not None]

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_order(self, order_id: str) -> OrderOutputDTO:
        """Retrieve a single order by ID.

        Raises:
            OrderNotFound: if the order does not exist.
        """
        order = self._order_repo.get_by_id(order_id)
        if not order:
            raise OrderNotFound(f"Order {order_id} not found.")
        return OrderOutputDTO.from_entity(order)
