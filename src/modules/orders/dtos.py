"""Order DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (Views) and the
financial core.  DTOs are immutable (``frozen=True``).

- ``OrderDraftDTO``: an order as submitted by the operator, before
  derivation.  Derived fields sent by the caller are ignored.
- ``PreparedOrderDTO``: a validated order whose ``remaining_amount`` and
  ``payment_status`` agree with ``total`` and ``amount_paid``.
- ``ReconciliationResultDTO``: outcome of a reconciliation run.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Any, Dict, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator

from modules.orders.amounts import coerce_amount
from modules.orders.constants import (
    DEFAULT_ORDER_STATUS,
    MAX_AMOUNT,
    ZERO,
    OrderStatus,
    PaymentStatus,
)

# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class OrderDraftDTO(BaseModel):
    """Immutable DTO for an order draft (create or full replacement).

    Unusable ``total`` and ``amount_paid`` values are coerced to ``0`` with a
    ``NumericCoercionWarning``.  Usable values above ``MAX_AMOUNT`` are
    rejected since they cannot be stored.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    client_id: UUID
    product_id: UUID
    quantity: int
    order_date: Optional[date] = None
    status: OrderStatus = DEFAULT_ORDER_STATUS
    total: Decimal
    amount_paid: Decimal = ZERO

    @field_validator("quantity")
    @classmethod
    def quantity_must_be_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("Quantity must be at least 1.")
        return v

    @field_validator("status", mode="before")
    @classmethod
    def status_must_be_known(cls, v: Any) -> Any:
        if v not in OrderStatus.values:
            allowed = ", ".join(OrderStatus.values)
            raise ValueError(f"Unknown order status {v!r}; expected one of {allowed}.")
        return v

    @field_validator("total", "amount_paid", mode="before")
    @classmethod
    def coerce_money(cls, v: Any, info: ValidationInfo) -> Decimal:
        return coerce_amount(v, field=info.field_name)

    @field_validator("total", "amount_paid")
    @classmethod
    def amount_must_be_storable(cls, v: Decimal) -> Decimal:
        if v > MAX_AMOUNT:
            raise ValueError(f"Amount must not exceed {MAX_AMOUNT}.")
        return v


# ---------------------------------------------------------------------------
# Output DTOs
# ---------------------------------------------------------------------------


class PreparedOrderDTO(BaseModel):
    """Immutable, fully derived order ready to be persisted.

    ``id`` is only bound when the record replaces an existing order.
    """

    model_config = ConfigDict(frozen=True)

    id: Optional[UUID] = None
    client_id: UUID
    product_id: UUID
    quantity: int
    order_date: date
    status: OrderStatus
    total: Decimal
    amount_paid: Decimal
    remaining_amount: Decimal
    payment_status: PaymentStatus

    def as_model_fields(self) -> Dict[str, Any]:
        """Field values for ``Order``, excluding the primary key."""
        return self.model_dump(exclude={"id"})


class ReconciliationResultDTO(BaseModel):
    """Immutable DTO summarising a reconciliation run."""

    model_config = ConfigDict(frozen=True)

    checked: int
    corrected: int
