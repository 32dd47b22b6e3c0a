"""Domain bus interfaces for in-process event handling.

Services depend on ``IEventBus`` only; the concrete bus lives in
``shared.infrastructure.bus``.  App configs subscribe their listing
invalidation handler with ``subscribe_many`` at start-up.
"""

from __future__ import annotations

from typing import Generic, Iterable, Protocol, Type, TypeVar

from shared.domain.events import DomainEvent

E = TypeVar("E", bound=DomainEvent, contravariant=True)


class IEventHandler(Protocol, Generic[E]):
    """Handler interface for domain events."""

    def handle(self, event: E) -> None: ...


class IEventBus(Protocol):
    """Event bus interface.

    Dispatch is by exact event class: subscribing to a base event does not
    receive its subclasses.
    """

    def publish(self, event: DomainEvent) -> None: ...

    def subscribe(self, event_class: Type[E], handler: IEventHandler[E]) -> None: ...

    def subscribe_many(
        self, event_classes: Iterable[Type[E]], handler: IEventHandler[E]
    ) -> None: ...
