"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.
Error handling follows the Null Object pattern: look-ups never raise for
missing rows; the Service Layer decides how to translate a missing
product into a domain error.
"""

from __future__ import annotations

from typing import Iterable, List

import structlog
from django.db import transaction

from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def find_all_by_product_number_in(
        self, product_numbers: Iterable[str]
    ) -> List[Product]:
        """Batch fetch by product number (``WHERE product_number IN (...)``).

        The ``IN`` clause collapses duplicates: each matching product is
        returned once regardless of how often its number was requested.
        """
        numbers = set(product_numbers)
        if not numbers:
            return []
        return list(Product.objects.filter(product_number__in=numbers))

    def find_all_by_selling_status_in(self, statuses: Iterable[str]) -> List[Product]:
        return list(Product.objects.filter(selling_status__in=list(statuses)))

    @transaction.atomic
    def save(self, entity: Product) -> Product:
        """Persist (create or update) a product."""
        entity.save()
        logger.info(
            "product.saved",
            product_id=str(entity.id),
            product_number=entity.product_number,
        )
        return entity
