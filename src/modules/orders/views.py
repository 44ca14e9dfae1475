"""Order API views.

Exposes the ``OrderService`` via HTTP using a DRF ViewSet.
Domain exceptions are caught and translated into appropriate
HTTP status codes. The view never swallows generic exceptions.
"""

from __future__ import annotations

from django.utils import timezone
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from modules.orders.dtos import CreateOrderDTO
from modules.orders.exceptions import (
    InsufficientStock,
    OrderNotFound,
    ProductNotFound,
    StockUpdateConflict,
)
from modules.orders.repositories.django_repository import OrderDjangoRepository
from modules.orders.serializers import CreateOrderSerializer
from modules.orders.services import OrderService
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.stocks.repositories.django_repository import StockDjangoRepository


class OrderViewSet(ViewSet):
    """ViewSet for Order operations.

    Uses ``OrderService`` with injected repositories (DIP).  All ORM access
    goes through the service/repository layer.
    """

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = OrderService(
            order_repository=OrderDjangoRepository(),
            product_repository=ProductDjangoRepository(),
            stock_repository=StockDjangoRepository(),
        )

    # ------------------------------------------------------------------
    # Create
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /api/v1/orders/

        The registration time is sampled here, at the edge, and handed to
        the service.
        """
        create_serializer = CreateOrderSerializer(data=request.data)
        create_serializer.is_valid(raise_exception=True)

        dto = CreateOrderDTO(
            product_numbers=create_serializer.validated_data["product_numbers"],
        )

        try:
            order = self._service.create_order(dto, registered_date_time=timezone.now())
        except ProductNotFound as exc:
            return Response(
                {"detail": str(exc), "product_numbers": exc.product_numbers},
                status=status.HTTP_404_NOT_FOUND,
            )
        except InsufficientStock as exc:
            return Response(
                {"detail": str(exc), "product_number": exc.product_number},
                status=status.HTTP_409_CONFLICT,
            )
        except StockUpdateConflict as exc:
            return Response(
                {"detail": str(exc), "product_number": exc.product_number},
                status=status.HTTP_409_CONFLICT,
            )

        return Response(order.model_dump(mode="json"), status=status.HTTP_201_CREATED)

    # ------------------------------------------------------------------
    # Retrieve
    # ------------------------------------------------------------------

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/orders/{pk}/"""
        if pk is None:
            return Response(
                {"detail": "Order not found."},
                status=status.HTTP_404_NOT_FOUND,
            )
        try:
            order = self._service.get_order(pk)
        except OrderNotFound:
            return Response(
                {"detail": "Order not found."},
                status=status.HTTP_404_NOT_FOUND,
            )
        return Response(order.model_dump(mode="json"))
