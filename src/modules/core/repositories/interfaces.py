"""Generic repository interface (Dependency Inversion Principle).

Provides ``IRepository[T]``, the base abstract class that all
domain-specific repository interfaces extend.  Service-layer code
depends on this abstraction, never on Django ORM directly.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Iterable, List, TypeVar

T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """Base generic repository contract.

    Type parameter ``T`` represents the domain entity managed by the
    repository (e.g. ``Product``, ``Stock``, ``Order``).
    """

    @abstractmethod
    def save(self, entity: T) -> T:
        """Persist (create or update) an entity."""


class IProductNumberKeyed(ABC, Generic[T]):
    """Mixin contract for aggregates addressed by their product number.

    Batch look-ups take a collection of product numbers and return the
    **distinct** matching records, in no guaranteed order.  Callers that
    need the requested sequence back (duplicates included) must re-expand
    the result themselves.
    """

    @abstractmethod
    def find_all_by_product_number_in(
        self, product_numbers: Iterable[str]
    ) -> List[T]:
        """Return every record whose ``product_number`` is in the collection."""
