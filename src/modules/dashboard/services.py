"""Dashboard service.

Builds the home screen summary from the order and client repositories.
The result is cached in the listing cache and rebuilt after any order,
client or product write (recent orders show client and product names).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Optional

import structlog

from modules.core.cache import ListingCache, listing_cache
from modules.dashboard.dtos import DashboardSummaryDTO, RecentOrderDTO
from modules.orders.constants import RECENT_ORDERS_LIMIT, OrderStatus, PaymentStatus

if TYPE_CHECKING:
    from modules.clients.repositories.interfaces import IClientRepository
    from modules.orders.repositories.interfaces import IOrderRepository

logger = structlog.get_logger(__name__)

SUMMARY_DEPENDENCIES = ("orders", "clients", "products")


class DashboardService:
    def __init__(
        self,
        order_repository: IOrderRepository,
        client_repository: IClientRepository,
        cache: Optional[ListingCache] = None,
    ) -> None:
        self._orders = order_repository
        self._clients = client_repository
        self._cache = cache or listing_cache

    def summary(self) -> Dict[str, Any]:
        """Dashboard figures as JSON-ready data, served from the listing cache."""
        return self._cache.get_or_load(
            "dashboard_summary",
            depends_on=SUMMARY_DEPENDENCIES,
            loader=self._build_summary,
        )

    def _build_summary(self) -> Dict[str, Any]:
        by_payment_status = self._orders.count_by("payment_status")
        by_status = self._orders.count_by("status")
        summary = DashboardSummaryDTO(
            total_clients=self._clients.count(),
            total_orders=self._orders.count(),
            **self._orders.financial_totals(),
            orders_by_payment_status={
                value: by_payment_status.get(value, 0)
                for value in PaymentStatus.values
            },
            orders_by_status={
                value: by_status.get(value, 0) for value in OrderStatus.values
            },
            recent_orders=[
                RecentOrderDTO.model_validate(order)
                for order in self._orders.most_recent(RECENT_ORDERS_LIMIT)
            ],
        )
        logger.info(
            "dashboard.summary_built",
            total_orders=summary.total_orders,
            total_clients=summary.total_clients,
        )
        return summary.model_dump(mode="json")
