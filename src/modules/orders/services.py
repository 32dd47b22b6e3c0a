"""Order service layer (Use Cases).

Orchestrates the order use-cases around the financial core: every draft
goes through ``prepare_order_for_persistence`` before it reaches the
repository, so the derived fields are never taken from the caller.

Once a write commits an ``OrderCreated``/``OrderUpdated``/``OrderDeleted``
event is published; listing caches subscribe to them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Mapping, Optional, Union
from uuid import UUID

import structlog
from django.db import transaction

from modules.orders.dtos import ReconciliationResultDTO
from modules.orders.events import OrderCreated, OrderDeleted, OrderUpdated
from modules.orders.exceptions import OrderNotFound
from modules.orders.financial import prepare_order_for_persistence
from shared.infrastructure.bus import event_bus as default_event_bus, publish_on_commit

if TYPE_CHECKING:
    from modules.orders.dtos import OrderDraftDTO
    from modules.orders.models import Order
    from modules.orders.repositories.interfaces import IOrderRepository
    from shared.domain.bus import IEventBus

logger = structlog.get_logger(__name__)

Draft = Union["OrderDraftDTO", Mapping[str, Any]]


class OrderService:
    """Application service for Order use-cases.

    Receives the repository and the event bus via constructor injection (DIP).
    """

    def __init__(
        self,
        order_repository: IOrderRepository,
        event_bus: Optional[IEventBus] = None,
    ) -> None:
        self._order_repo = order_repository
        self._event_bus = event_bus or default_event_bus

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_order(self, draft: Draft) -> Order:
        """Create an order from a draft.

        Raises:
            OrderValidationError: the draft was rejected; nothing is stored.
        """
        prepared = prepare_order_for_persistence(draft)
        order = self._order_repo.create(prepared)
        publish_on_commit(self._event_bus, OrderCreated(aggregate_id=order.id))
        return order

    @transaction.atomic
    def update_order(self, order_id: UUID, draft: Draft) -> Order:
        """Replace every editable field of an order.

        Raises:
            OrderValidationError: the draft was rejected; nothing is stored.
            OrderNotFound: the order does not exist.
        """
        try:
            order_id = UUID(str(order_id))
        except ValueError:
            raise OrderNotFound(f"Order {order_id} not found.") from None

        prepared = prepare_order_for_persistence(draft, order_id=order_id)
        order = self._order_repo.update(order_id, prepared)
        if order is None:
            raise OrderNotFound(f"Order {order_id} not found.")
        publish_on_commit(self._event_bus, OrderUpdated(aggregate_id=order.id))
        return order

    @transaction.atomic
    def delete_order(self, order_id: UUID) -> None:
        """Hard-delete an order.

        Raises:
            OrderNotFound: the order does not exist.
        """
        if not self._order_repo.delete(str(order_id)):
            raise OrderNotFound(f"Order {order_id} not found.")
        publish_on_commit(self._event_bus, OrderDeleted(aggregate_id=order_id))

    def reconcile_financial_state(self) -> ReconciliationResultDTO:
        """Rewrite stored orders whose derived fields disagree with their amounts.

        Orders written before the derivation was enforced may carry a
        payment status picked by hand.
        """
        checked = 0
        stale: List[Order] = []
        for order in self._order_repo.iterate_all():
            checked += 1
            if not order.has_consistent_financial_state:
                stale.append(order)

        for order in stale:
            stale_status = order.payment_status
            self._order_repo.save(order)
            logger.warning(
                "order.financial_state_corrected",
                order_id=str(order.id),
                stale_payment_status=stale_status,
                payment_status=order.payment_status,
            )
            publish_on_commit(self._event_bus, OrderUpdated(aggregate_id=order.id))

        logger.info("order.reconciliation_finished", checked=checked, corrected=len(stale))
        return ReconciliationResultDTO(checked=checked, corrected=len(stale))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_order(self, order_id: str) -> Order:
        """Retrieve a single order by ID.

        Raises:
            OrderNotFound: if the order does not exist.
        """
        order = self._order_repo.get_by_id(order_id)
        if not order:
            raise OrderNotFound(f"Order {order_id} not found.")
        return order

    def list_orders(self, filters: Optional[Dict[str, Any]] = None) -> List[Order]:
        """Return a list of orders, optionally filtered."""
        return self._order_repo.list(filters)
