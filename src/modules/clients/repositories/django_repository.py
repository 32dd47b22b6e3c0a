"""Django ORM implementation of the Client repository.

Satisfies ``IClientRepository`` using Django's QuerySet API.
Error handling follows the Null Object pattern: methods return ``None``
instead of raising HTTP-level exceptions; the Service Layer decides
how to translate a missing entity into an API response.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import structlog
from django.core.exceptions import ValidationError
from django.db import models, transaction

from modules.clients.models import Client
from modules.clients.repositories.interfaces import IClientRepository

logger = structlog.get_logger(__name__)


class ClientDjangoRepository(IClientRepository):
    """Concrete Client repository backed by Django ORM."""

    def get_by_id(self, id: str) -> Optional[Client]:
        """Retrieve a client by primary key.

        Returns ``None`` for non-existent or invalid IDs.
        """
        try:
            return Client.objects.filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def list(self, filters: Optional[Dict[str, Any]] = None) -> List[Client]:
        """List clients with optional Django ORM look-ups.

        Examples of valid filters::

            {"name__icontains": "silva"}
            {"phone__startswith": "(11)"}
        """
        queryset = self.queryset()
        if filters:
            queryset = queryset.filter(**filters)
        return list(queryset)

    def queryset(self) -> models.QuerySet:
        return Client.objects.all()

    def list_ordered_by_name(self) -> List[Client]:
        return list(Client.objects.order_by("name", "id"))

    def count(self) -> int:
        return Client.objects.count()

    @transaction.atomic
    def save(self, entity: Client) -> Client:
        """Persist (create or update) a client."""
        entity.save()
        logger.info("client.saved", client_id=str(entity.id))
        return entity

    @transaction.atomic
    def delete(self, id: str) -> bool:
        """Hard-delete a client by ID.

        Returns ``True`` if the client was found and deleted,
        ``False`` if no client exists with the given ID.
        """
        client = self.get_by_id(id)
        if not client:
            return False
        client.delete()
        logger.info("client.deleted", client_id=str(id))
        return True
