"""Order API views.

Exposes the ``OrderService`` via HTTP using DRF ViewSets.
Domain exceptions are caught and translated into appropriate
HTTP status codes.  Orders are replaced with PUT only; there is no
partial update.
"""

from __future__ import annotations

from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import status
from rest_framework.exceptions import ValidationError
from rest_framework.filters import OrderingFilter, SearchFilter
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.throttling import BaseThrottle
from rest_framework.viewsets import GenericViewSet

from modules.core.payloads import request_payload
from modules.orders.exceptions import OrderNotFound, OrderValidationError
from modules.orders.filters import OrderFilter
from modules.orders.repositories.django_repository import OrderDjangoRepository
from modules.orders.serializers import OrderSerializer
from modules.orders.services import OrderService

_NOT_FOUND = {"detail": "Order not found."}


class OrderViewSet(GenericViewSet):
    """ViewSet for Order operations.

    Uses ``OrderService`` with an injected repository (DIP).
    Does **not** extend ``ModelViewSet``: every write goes through the
    financial core in the service layer.
    """

    serializer_class = OrderSerializer
    filterset_class = OrderFilter
    search_fields = ["client_name", "product_name"]
    ordering_fields = [
        "order_date",
        "created_at",
        "total",
        "amount_paid",
        "remaining_amount",
        "status",
        "payment_status",
    ]
    ordering = ["-order_date", "-created_at"]
    filter_backends = [DjangoFilterBackend, SearchFilter, OrderingFilter]

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._repository = OrderDjangoRepository()
        self._service = OrderService(order_repository=self._repository)

    def get_queryset(self):
        return self._repository.queryset()

    def get_throttles(self) -> list[BaseThrottle]:
        """Throttling scope per action."""
        throttle_scope: str | None
        if self.action in {"create", "update", "destroy"}:
            throttle_scope = "order_writes"
        elif self.action in {"list", "retrieve"}:
            throttle_scope = "order_listing"
        else:
            throttle_scope = None
        self.throttle_scope = throttle_scope
        return super().get_throttles()

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /api/v1/orders/"""
        queryset = self.filter_queryset(self.get_queryset())
        page = self.paginate_queryset(queryset)
        serializer = OrderSerializer(page, many=True)
        return self.get_paginated_response(serializer.data)

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/orders/{pk}/"""
        try:
            order = self._service.get_order(pk)
        except OrderNotFound:
            return Response(_NOT_FOUND, status=status.HTTP_404_NOT_FOUND)
        return Response(OrderSerializer(order).data)

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /api/v1/orders/"""
        try:
            order = self._service.create_order(request_payload(request))
        except OrderValidationError as exc:
            raise ValidationError(exc.errors) from exc
        return Response(OrderSerializer(order).data, status=status.HTTP_201_CREATED)

    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /api/v1/orders/{pk}/

        Full replacement: every editable field must be sent again.
        """
        try:
            order = self._service.update_order(pk, request_payload(request))
        except OrderValidationError as exc:
            raise ValidationError(exc.errors) from exc
        except OrderNotFound:
            return Response(_NOT_FOUND, status=status.HTTP_404_NOT_FOUND)
        return Response(OrderSerializer(order).data)

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/v1/orders/{pk}/"""
        try:
            self._service.delete_order(pk)
        except OrderNotFound:
            return Response(_NOT_FOUND, status=status.HTTP_404_NOT_FOUND)
        return Response(status=status.HTTP_204_NO_CONTENT)
