"""Product repository interface.

Extends the generic contracts with the batch look-ups the ordering core
and the kiosk menu need.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Iterable, List

from modules.core.repositories.interfaces import IProductNumberKeyed, IRepository

if TYPE_CHECKING:
    from modules.products.models import Product


class IProductRepository(IRepository["Product"], IProductNumberKeyed["Product"]):
    """Repository contract for the Product aggregate."""

    @abstractmethod
    def find_all_by_selling_status_in(self, statuses: Iterable[str]) -> List[Product]:
        """List products whose selling status is one of *statuses*."""
