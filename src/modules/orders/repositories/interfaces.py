"""Order repository interface.

Extends ``IRepository[Order]`` with the write methods of the Order
aggregate: creation from a prepared record and full replacement.

The Service Layer depends exclusively on this contract (DIP).
"""

from __future__ import annotations

from abc import abstractmethod
from decimal import Decimal
from typing import TYPE_CHECKING, Any, Dict, Iterator, List, Optional
from uuid import UUID

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.orders.dtos import PreparedOrderDTO
    from modules.orders.models import Order


class IOrderRepository(IRepository["Order"]):
    """Repository contract for the Order aggregate root."""

    @abstractmethod
    def create(self, prepared: PreparedOrderDTO) -> Order:
        """Persist a new order; the repository assigns its ``id``."""

    @abstractmethod
    def update(self, id: UUID, prepared: PreparedOrderDTO) -> Optional[Order]:
        """Replace every editable field of an order.

        Returns ``None`` when no order with *id* exists.
        """

    @abstractmethod
    def get_by_id(self, id: str) -> Optional[Order]:
        """Retrieve an order, ``None`` for unknown or malformed ids."""

    @abstractmethod
    def list(self, filters: Optional[Dict[str, Any]] = None) -> List[Order]:
        """List orders with optional filters."""

    @abstractmethod
    def iterate_all(self, chunk_size: int = 500) -> Iterator[Order]:
        """Stream every stored order (used by reconciliation)."""

    @abstractmethod
    def financial_totals(self) -> Dict[str, Decimal]:
        """Sums of ``total``, ``amount_paid`` and ``remaining_amount``."""

    @abstractmethod
    def count_by(self, field: str) -> Dict[str, int]:
        """Number of orders per distinct value of *field*."""

    @abstractmethod
    def most_recent(self, limit: int) -> List[Order]:
        """The *limit* latest orders by order date."""
