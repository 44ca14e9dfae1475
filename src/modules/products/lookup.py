"""Duplicate-preserving product resolution.

A kiosk order is a list of product numbers in which the same number may
appear several times (two americanos are ``["001", "001"]``).  The product
store answers a single ``IN`` query with *distinct* rows, so the requested
sequence is rebuilt from an index keyed by product number.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, List, Optional, Sequence

import structlog

if TYPE_CHECKING:
    from modules.products.models import Product
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductLookup:
    """Resolves requested product numbers to Product rows in one batch."""

    def __init__(self, product_repository: IProductRepository) -> None:
        self._product_repo = product_repository

    def resolve_ordered(self, product_numbers: Sequence[str]) -> List[Optional[Product]]:
        """Return one entry per requested number, in request order.

        Numbers with no catalog match resolve to ``None``; the caller
        decides whether that fails the request.
        """
        products = self._product_repo.find_all_by_product_number_in(set(product_numbers))
        index: Dict[str, Product] = {p.product_number: p for p in products}

        logger.debug(
            "product.lookup_resolved",
            requested=len(product_numbers),
            distinct_found=len(index),
        )
        return [index.get(number) for number in product_numbers]

    @staticmethod
    def missing_product_numbers(
        product_numbers: Sequence[str], resolved: Sequence[Optional[Product]]
    ) -> List[str]:
        """Distinct requested numbers that resolved to ``None``, first-seen order."""
        missing: List[str] = []
        for number, product in zip(product_numbers, resolved):
            if product is None and number not in missing:
                missing.append(number)
        return missing
