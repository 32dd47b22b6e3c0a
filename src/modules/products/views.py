"""Product API views.

Exposes the ``ProductService`` via HTTP using DRF ViewSets.
Domain exceptions are caught and translated into appropriate
HTTP status codes.
"""

from __future__ import annotations

from django_filters.rest_framework import DjangoFilterBackend
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.exceptions import ValidationError
from rest_framework.filters import OrderingFilter, SearchFilter
from rest_framework.mixins import ListModelMixin
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.core.errors import field_errors
from modules.core.payloads import request_payload
from modules.products.dtos import ProductInputDTO
from modules.products.exceptions import ProductNotFound
from modules.products.filters import ProductFilter
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.serializers import ProductSerializer
from modules.products.services import ProductService

_NOT_FOUND = {"detail": "Product not found."}


class ProductViewSet(ListModelMixin, GenericViewSet):
    """ViewSet for Product CRUD operations.

    Uses ``ProductService`` with ``ProductDjangoRepository`` (DIP).
    Does **not** extend ``ModelViewSet``: all writes go through the
    service/repository layer.
    """

    filterset_class = ProductFilter
    search_fields = ["name"]
    ordering_fields = ["name", "price", "created_at"]
    ordering = ["name", "id"]
    filter_backends = [DjangoFilterBackend, SearchFilter, OrderingFilter]
    serializer_class = ProductSerializer

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._repository = ProductDjangoRepository()
        self._service = ProductService(repository=self._repository)

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    def get_queryset(self):
        return self._repository.queryset()

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/products/{pk}/"""
        try:
            product = self._service.get_product(pk)
        except ProductNotFound:
            return Response(_NOT_FOUND, status=status.HTTP_404_NOT_FOUND)
        return Response(ProductSerializer(product).data)

    @action(detail=False, methods=["get"], pagination_class=None)
    def options(self, request: Request) -> Response:
        """GET /api/v1/products/options/

        ``[{id, name, price}]`` for the order form selector, cached.
        """
        return Response(self._service.product_options())

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /api/v1/products/"""
        dto = self._input_dto(request)
        product = self._service.create_product(dto)
        return Response(
            ProductSerializer(product).data, status=status.HTTP_201_CREATED
        )

    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /api/v1/products/{pk}/"""
        dto = self._input_dto(request)
        try:
            product = self._service.update_product(pk, dto)
        except ProductNotFound:
            return Response(_NOT_FOUND, status=status.HTTP_404_NOT_FOUND)
        return Response(ProductSerializer(product).data)

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/v1/products/{pk}/"""
        try:
            self._service.delete_product(pk)
        except ProductNotFound:
            return Response(_NOT_FOUND, status=status.HTTP_404_NOT_FOUND)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @staticmethod
    def _input_dto(request: Request) -> ProductInputDTO:
        try:
            return ProductInputDTO.model_validate(request_payload(request))
        except PydanticValidationError as exc:
            raise ValidationError(field_errors(exc)) from exc
