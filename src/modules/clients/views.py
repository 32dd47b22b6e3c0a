"""Client API views.

Exposes the ``ClientService`` via HTTP using DRF ViewSets.
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

from modules.clients.dtos import ClientInputDTO
from modules.clients.exceptions import ClientNotFound
from modules.clients.filters import ClientFilter
from modules.clients.repositories.django_repository import ClientDjangoRepository
from modules.clients.serializers import ClientSerializer
from modules.clients.services import ClientService
from modules.core.errors import field_errors
from modules.core.payloads import request_payload

_NOT_FOUND = {"detail": "Client not found."}


class ClientViewSet(ListModelMixin, GenericViewSet):
    """ViewSet for Client CRUD operations.

    Uses ``ClientService`` with ``ClientDjangoRepository`` (DIP).
    Does **not** extend ``ModelViewSet``: all writes go through the
    service/repository layer.
    """

    filterset_class = ClientFilter
    search_fields = ["name", "phone", "address"]
    ordering_fields = ["name", "created_at"]
    ordering = ["name", "id"]
    filter_backends = [DjangoFilterBackend, SearchFilter, OrderingFilter]
    serializer_class = ClientSerializer

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._repository = ClientDjangoRepository()
        self._service = ClientService(repository=self._repository)

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    def get_queryset(self):
        return self._repository.queryset()

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/clients/{pk}/"""
        try:
            client = self._service.get_client(pk)
        except ClientNotFound:
            return Response(_NOT_FOUND, status=status.HTTP_404_NOT_FOUND)
        return Response(ClientSerializer(client).data)

    @action(detail=False, methods=["get"], pagination_class=None)
    def options(self, request: Request) -> Response:
        """GET /api/v1/clients/options/

        ``[{id, name}]`` for the order form selector, cached.
        """
        return Response(self._service.client_options())

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /api/v1/clients/"""
        dto = self._input_dto(request)
        client = self._service.create_client(dto)
        return Response(
            ClientSerializer(client).data, status=status.HTTP_201_CREATED
        )

    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /api/v1/clients/{pk}/"""
        dto = self._input_dto(request)
        try:
            client = self._service.update_client(pk, dto)
        except ClientNotFound:
            return Response(_NOT_FOUND, status=status.HTTP_404_NOT_FOUND)
        return Response(ClientSerializer(client).data)

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/v1/clients/{pk}/"""
        try:
            self._service.delete_client(pk)
        except ClientNotFound:
            return Response(_NOT_FOUND, status=status.HTTP_404_NOT_FOUND)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @staticmethod
    def _input_dto(request: Request) -> ClientInputDTO:
        try:
            return ClientInputDTO.model_validate(request_payload(request))
        except PydanticValidationError as exc:
            raise ValidationError(field_errors(exc)) from exc
