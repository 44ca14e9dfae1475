"""Product service layer (read-side use cases).

Catalog administration lives outside this service; the kiosk only needs
to know which products can currently be shown on the menu.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

import structlog

from modules.products.dtos import ProductOutputDTO
from modules.products.models import ProductSellingStatus

if TYPE_CHECKING:
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductService:
    """Application service for Product queries.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    def get_selling_products(self) -> List[ProductOutputDTO]:
        """Products whose selling status is displayable (SELLING or HOLD)."""
        products = self._repo.find_all_by_selling_status_in(
            ProductSellingStatus.for_display()
        )
        logger.info("product.selling_listed", count=len(products))
        return [ProductOutputDTO.from_entity(p) for p in products]
