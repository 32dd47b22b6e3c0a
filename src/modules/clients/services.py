"""Client service layer (Use Cases).

Orchestrates business logic for the Client aggregate, delegating
persistence to the injected ``IClientRepository``.

Business rules enforced here:
- Updates replace every editable field.
- Hard delete via repository; existing orders are left untouched.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Optional

import structlog
from django.db import transaction

from modules.clients.dtos import ClientOptionDTO
from modules.clients.events import ClientCreated, ClientDeleted, ClientUpdated
from modules.clients.exceptions import ClientNotFound
from modules.clients.models import Client
from modules.core.cache import ListingCache, listing_cache
from shared.infrastructure.bus import event_bus as default_event_bus, publish_on_commit

if TYPE_CHECKING:
    from modules.clients.dtos import ClientInputDTO
    from modules.clients.repositories.interfaces import IClientRepository
    from shared.domain.bus import IEventBus

logger = structlog.get_logger(__name__)


class ClientService:
    """Application service for Client use-cases.

    Receives an ``IClientRepository`` via constructor injection (DIP).
    """

    def __init__(
        self,
        repository: IClientRepository,
        event_bus: Optional[IEventBus] = None,
        cache: Optional[ListingCache] = None,
    ) -> None:
        self._repo = repository
        self._event_bus = event_bus or default_event_bus
        self._cache = cache or listing_cache

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_client(self, dto: ClientInputDTO) -> Client:
        client = Client(name=dto.name, phone=dto.phone, address=dto.address)
        client = self._repo.save(client)
        logger.info("client.created", client_id=str(client.id))
        publish_on_commit(self._event_bus, ClientCreated(aggregate_id=client.id))
        return client

    @transaction.atomic
    def update_client(self, id: str, dto: ClientInputDTO) -> Client:
        """Replace the editable fields of an existing client.

        Raises:
            ClientNotFound: if the client does not exist.
        """
        client = self._repo.get_by_id(id)
        if not client:
            raise ClientNotFound(f"Client {id} not found.")

        client.name = dto.name
        client.phone = dto.phone
        client.address = dto.address
        client = self._repo.save(client)
        logger.info("client.updated", client_id=str(id))
        publish_on_commit(self._event_bus, ClientUpdated(aggregate_id=client.id))
        return client

    @transaction.atomic
    def delete_client(self, id: str) -> None:
        """Hard-delete a client.

        Raises:
            ClientNotFound: if the client does not exist.
        """
        client = self._repo.get_by_id(id)
        if not client:
            raise ClientNotFound(f"Client {id} not found.")
        self._repo.delete(id)
        publish_on_commit(self._event_bus, ClientDeleted(aggregate_id=client.id))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_clients(self, filters: Optional[Dict[str, Any]] = None) -> List[Client]:
        """Return a list of clients, optionally filtered."""
        return self._repo.list(filters)

    def get_client(self, id: str) -> Client:
        """Retrieve a single client by ID.

        Raises:
            ClientNotFound: if the client does not exist.
        """
        client = self._repo.get_by_id(id)
        if not client:
            raise ClientNotFound(f"Client {id} not found.")
        return client

    def client_options(self) -> List[Dict[str, Any]]:
        """``{id, name}`` of every client, served from the listing cache."""
        return self._cache.get_or_load(
            "client_options",
            depends_on="clients",
            loader=self._load_options,
        )

    def _load_options(self) -> List[Dict[str, Any]]:
        return [
            ClientOptionDTO.from_entity(client).model_dump(mode="json")
            for client in self._repo.list_ordered_by_name()
        ]
