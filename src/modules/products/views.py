"""Product API views.

Read-only: exposes the kiosk menu (displayable products).
"""

from __future__ import annotations

from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.services import ProductService


class ProductViewSet(ViewSet):
    """ViewSet for product queries backed by ``ProductService``."""

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(ProductDjangoRepository())

    @action(detail=False, methods=["get"])
    def selling(self, request: Request) -> Response:
        """GET /api/v1/products/selling/"""
        products = self._service.get_selling_products()
        return Response([p.model_dump(mode="json") for p in products])
