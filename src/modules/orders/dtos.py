"""Order DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (DRF Serializers)
and the Service layer.  DTOs are immutable (``frozen=True``).

- ``CreateOrderDTO``: list of requested product numbers (duplicates allowed).
- ``OrderLineItemOutputDTO``: one ``(product_number, price)`` pair.
- ``OrderOutputDTO``: order summary returned to callers.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, List
from uuid import UUID

from pydantic import BaseModel, ConfigDict, field_validator

if TYPE_CHECKING:
    from modules.orders.models import Order


# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class CreateOrderDTO(BaseModel):
    """Immutable DTO for order creation requests.

    Validates:
    - ``product_numbers`` must contain at least one entry.
    - Entries must be non-blank; surrounding whitespace is stripped.

    Repeated numbers are kept: each occurrence is one unit ordered.
    """

    model_config = ConfigDict(frozen=True)

    product_numbers: List[str]

    @field_validator("product_numbers")
    @classmethod
    def product_numbers_must_not_be_empty(cls, v: List[str]) -> List[str]:
        if not v:
            raise ValueError("Product number list is required.")
        cleaned = [number.strip() for number in v]
        if any(not number for number in cleaned):
            raise ValueError("Product numbers must not be blank.")
        return cleaned


# ---------------------------------------------------------------------------
# Output DTOs
# ---------------------------------------------------------------------------


class OrderLineItemOutputDTO(BaseModel):
    """Immutable DTO for a single ordered unit."""

    model_config = ConfigDict(frozen=True)

    product_number: str
    price: int


class OrderOutputDTO(BaseModel):
    """Immutable DTO for order API responses."""

    model_config = ConfigDict(frozen=True)

    id: UUID
    order_status: str
    total_price: int
    registered_date_time: datetime
    products: List[OrderLineItemOutputDTO]

    @classmethod
    def from_entity(cls, order: Order) -> OrderOutputDTO:
        """Build an output DTO from an Order model instance.

        Assumes ``line_items`` are prefetched.
        """
        products = [
            OrderLineItemOutputDTO(
                product_number=item.product_number,
                price=item.price,
            )
            for item in order.line_items.all()
        ]
        return cls(
            id=order.id,
            order_status=str(order.order_status),
            total_price=order.total_price,
            registered_date_time=order.registered_date_time,
            products=products,
        )
