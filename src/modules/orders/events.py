"""Domain events for the Orders bounded context."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from shared.domain.events import DomainEvent


@dataclass(frozen=True)
class OrderEvent(DomainEvent):
    entity_type: ClassVar[str] = "orders"


@dataclass(frozen=True)
class OrderCreated(OrderEvent):
    """Raised when an order is created."""


@dataclass(frozen=True)
class OrderUpdated(OrderEvent):
    """Raised when an order is replaced or its derived fields are corrected."""


@dataclass(frozen=True)
class OrderDeleted(OrderEvent):
    """Raised when an order is deleted."""


ORDER_EVENTS = [OrderCreated, OrderUpdated, OrderDeleted]
