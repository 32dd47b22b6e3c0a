"""Domain events for the Clients bounded context."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from shared.domain.events import DomainEvent


@dataclass(frozen=True)
class ClientEvent(DomainEvent):
    entity_type: ClassVar[str] = "clients"


@dataclass(frozen=True)
class ClientCreated(ClientEvent):
    """Raised when a client is created."""


@dataclass(frozen=True)
class ClientUpdated(ClientEvent):
    """Raised when a client is replaced."""


@dataclass(frozen=True)
class ClientDeleted(ClientEvent):
    """Raised when a client is deleted."""


CLIENT_EVENTS = [ClientCreated, ClientUpdated, ClientDeleted]
