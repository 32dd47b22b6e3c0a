"""In-memory event bus implementation."""

from __future__ import annotations

from functools import partial
from typing import Dict, Iterable, List, Type

import structlog
from django.db import transaction

from shared.domain.bus import IEventBus, IEventHandler
from shared.domain.events import DomainEvent

logger = structlog.get_logger(__name__)


class InMemoryEventBus(IEventBus):
    """Simple in-process event bus.

    Handlers run synchronously in the publisher's thread, in subscription
    order.  Handler errors propagate to the publisher.
    """

    def __init__(self) -> None:
        self._handlers: Dict[Type[DomainEvent], List[IEventHandler]] = {}

    def subscribe(self, event_class: Type[DomainEvent], handler: IEventHandler) -> None:
        handlers = self._handlers.setdefault(event_class, [])
        if handler not in handlers:
            handlers.append(handler)

    def subscribe_many(
        self, event_classes: Iterable[Type[DomainEvent]], handler: IEventHandler
    ) -> None:
        for event_class in event_classes:
            self.subscribe(event_class, handler)

    def publish(self, event: DomainEvent) -> None:
        handlers = self._handlers.get(type(event), [])
        logger.debug(
            "event_bus.published",
            event_name=event.event_name,
            aggregate_id=str(event.aggregate_id),
            handler_count=len(handlers),
        )
        for handler in handlers:
            handler.handle(event)


def publish_on_commit(bus: IEventBus, event: DomainEvent) -> None:
    """Publish *event* on *bus* once the current transaction commits.

    Outside an atomic block the event is published right away; when the
    transaction rolls back it is never published.
    """
    transaction.on_commit(partial(bus.publish, event))


# Global bus instance (singleton)

event_bus = InMemoryEventBus()
