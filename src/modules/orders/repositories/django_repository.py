"""Django ORM implementation of the Order repository.

Satisfies ``IOrderRepository`` using Django's QuerySet API.
All write operations are wrapped in ``transaction.atomic()``.

Updates lock the row with ``select_for_update()``; concurrent edits are
last-write-wins (there is no version column).  Client and product names are
read through subqueries rather than joins: an order whose client or product
was deleted must still be listed.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Dict, Iterator, List, Optional
from uuid import UUID

import structlog
from django.core.exceptions import ValidationError
from django.db import models, transaction
from django.db.models import Count, DecimalField, OuterRef, Subquery, Sum, Value
from django.db.models.functions import Coalesce

from modules.clients.models import Client
from modules.orders.dtos import PreparedOrderDTO
from modules.orders.models import Order
from modules.orders.repositories.interfaces import IOrderRepository
from modules.products.models import Product

logger = structlog.get_logger(__name__)


def _money_sum(field: str) -> Coalesce:
    return Coalesce(
        Sum(field),
        Value(Decimal("0.00")),
        output_field=DecimalField(max_digits=14, decimal_places=2),
    )


class OrderDjangoRepository(IOrderRepository):
    """Concrete Order repository backed by Django ORM."""

    # ------------------------------------------------------------------
    # Create / Update
    # ------------------------------------------------------------------

    @transaction.atomic
    def create(self, prepared: PreparedOrderDTO) -> Order:
        order = Order(**prepared.as_model_fields())
        order.save()
        logger.info(
            "order.created",
            order_id=str(order.id),
            payment_status=order.payment_status,
        )
        return self.get_by_id(order.id) or order

    @transaction.atomic
    def update(self, id: UUID, prepared: PreparedOrderDTO) -> Optional[Order]:
        try:
            order = Order.objects.select_for_update().filter(id=id).first()
        except (ValueError, ValidationError):
            return None
        if not order:
            return None

        for field, value in prepared.as_model_fields().items():
            setattr(order, field, value)

        order.save()
        logger.info(
            "order.updated",
            order_id=str(id),
            payment_status=order.payment_status,
        )
        return self.get_by_id(order.id) or order

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def get_by_id(self, id: str) -> Optional[Order]:
        """Returns ``None`` for non-existent or invalid IDs."""
        try:
            return self.queryset().filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def list(self, filters: Optional[Dict[str, Any]] = None) -> List[Order]:
        """List orders, most recent first.

        ``filters`` are passed to ``QuerySet.filter`` as is, e.g.
        ``status``, ``payment_status``, ``client_id``, ``order_date__range``.
        """
        queryset = self.queryset()
        if filters:
            queryset = queryset.filter(**filters)
        return list(queryset)

    def queryset(self) -> models.QuerySet:
        return Order.objects.annotate(
            client_name=Subquery(
                Client.objects.filter(pk=OuterRef("client_id")).values("name")[:1]
            ),
            product_name=Subquery(
                Product.objects.filter(pk=OuterRef("product_id")).values("name")[:1]
            ),
        )

    def iterate_all(self, chunk_size: int = 500) -> Iterator[Order]:
        return Order.objects.order_by("id").iterator(chunk_size=chunk_size)

    def count(self) -> int:
        return Order.objects.count()

    # ------------------------------------------------------------------
    # Aggregates
    # ------------------------------------------------------------------

    def financial_totals(self) -> Dict[str, Decimal]:
        return Order.objects.aggregate(
            total_sales=_money_sum("total"),
            total_received=_money_sum("amount_paid"),
            total_outstanding=_money_sum("remaining_amount"),
        )

    def count_by(self, field: str) -> Dict[str, int]:
        rows = Order.objects.order_by().values(field).annotate(n=Count("id"))
        return {row[field]: row["n"] for row in rows}

    def most_recent(self, limit: int) -> List[Order]:
        return list(self.queryset().order_by("-order_date", "-created_at")[:limit])

    # ------------------------------------------------------------------
    # Save / Delete (IRepository contract)
    # ------------------------------------------------------------------

    @transaction.atomic
    def save(self, entity: Order) -> Order:
        """Persist (create or update) an order, re-deriving its financial state."""
        entity.save()
        logger.info("order.saved", order_id=str(entity.id))
        return entity

    @transaction.atomic
    def delete(self, id: str) -> bool:
        """Hard-delete an order by ID."""
        order = self.get_by_id(id)
        if not order:
            return False
        order.delete()
        logger.info("order.deleted", order_id=str(id))
        return True
