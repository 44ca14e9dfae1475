"""Order DRF serializers for API input.

The serializer operates at the Interface layer (API Views).
Business logic lives in the Service Layer, which receives
Pydantic DTOs from ``dtos.py``.
"""

from __future__ import annotations

from rest_framework import serializers

PRODUCT_NUMBERS_REQUIRED = "Product number list is required."


class CreateOrderSerializer(serializers.Serializer):
    """Validates the order creation request payload."""

    product_numbers = serializers.ListField(
        child=serializers.CharField(max_length=32),
        allow_empty=False,
        error_messages={
            "required": PRODUCT_NUMBERS_REQUIRED,
            "empty": PRODUCT_NUMBERS_REQUIRED,
            "null": PRODUCT_NUMBERS_REQUIRED,
        },
    )
