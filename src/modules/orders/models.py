"""Order model.

Business rules implemented:
- ``remaining_amount`` is always ``total - amount_paid`` (recalculated on save).
- ``payment_status`` always agrees with the payment classification
  (recalculated on save).
- ``total`` is entered by the operator; it is never computed from
  ``quantity`` or the product price.
- Client and product references are not enforced by the database
  (``db_constraint=False``): an order outlives the records it points to.
- Deletion is a hard delete.
"""

from __future__ import annotations

from typing import Any

from django.core.validators import MinValueValidator
from django.db import models
from django.utils import timezone

from modules.core.models import BaseModel
from modules.orders.amounts import coerce_amount, quantize_currency
from modules.orders.constants import (
    DEFAULT_ORDER_STATUS,
    ZERO,
    OrderStatus,
    PaymentStatus,
)
from modules.orders.financial import derive_financial_state

_AMOUNT_FIELDS = {"total", "amount_paid"}
_DERIVED_FIELDS = ["remaining_amount", "payment_status"]


class Order(BaseModel):
    """Order aggregate root.

    ``remaining_amount`` and ``payment_status`` are derived fields: any value
    assigned to them is overwritten by ``save()``.
    """

    client = models.ForeignKey(
        "clients.Client",
        on_delete=models.DO_NOTHING,
        db_constraint=False,
        related_name="orders",
    )
    product = models.ForeignKey(
        "products.Product",
        on_delete=models.DO_NOTHING,
        db_constraint=False,
        related_name="orders",
    )
    quantity = models.PositiveIntegerField(
        default=1,
        validators=[MinValueValidator(1)],
    )
    order_date = models.DateField(default=timezone.localdate)
    status = models.CharField(
        max_length=20,
        choices=OrderStatus.choices,
        default=DEFAULT_ORDER_STATUS,
    )
    total = models.DecimalField(max_digits=10, decimal_places=2)
    amount_paid = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=ZERO,
    )
    remaining_amount = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        editable=False,
    )
    payment_status = models.CharField(
        max_length=20,
        choices=PaymentStatus.choices,
        editable=False,
    )

    class Meta:
        db_table = "orders"
        ordering = ["-order_date", "-created_at"]
        indexes = [
            models.Index(fields=["status"], name="orders_status_idx"),
            models.Index(fields=["payment_status"], name="orders_payment_status_idx"),
            models.Index(fields=["-order_date"], name="orders_order_date_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(quantity__gte=1),
                name="orders_quantity_positive",
            ),
            models.CheckConstraint(
                condition=models.Q(total__gte=0),
                name="orders_total_non_negative",
            ),
            models.CheckConstraint(
                condition=models.Q(amount_paid__gte=0),
                name="orders_amount_paid_non_negative",
            ),
        ]

    # ------------------------------------------------------------------
    # Financial state
    # ------------------------------------------------------------------

    def apply_financial_state(self) -> None:
        """Normalise the amounts and recompute the derived fields in place."""
        self.total = quantize_currency(coerce_amount(self.total, field="total"))
        self.amount_paid = quantize_currency(
            coerce_amount(self.amount_paid, field="amount_paid")
        )
        state = derive_financial_state(self.total, self.amount_paid)
        self.remaining_amount = state.remaining_amount
        self.payment_status = state.payment_status

    @property
    def has_consistent_financial_state(self) -> bool:
        state = derive_financial_state(self.total, self.amount_paid)
        return (
            self.remaining_amount == state.remaining_amount
            and self.payment_status == state.payment_status
        )

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def save(self, *args: Any, **kwargs: Any) -> None:
        self.apply_financial_state()
        update_fields = kwargs.get("update_fields")
        if update_fields is not None and _AMOUNT_FIELDS & set(update_fields):
            kwargs["update_fields"] = list(
                dict.fromkeys(list(update_fields) + _DERIVED_FIELDS)
            )
        super().save(*args, **kwargs)

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        return f"Order {self.id} ({self.status}, {self.payment_status})"
