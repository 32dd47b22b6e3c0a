"""Order financial state model.

Derives ``remaining_amount`` and ``payment_status`` from the operator
entered ``total`` and ``amount_paid``.  Both derived fields are always
recomputed here; whatever a caller supplies for them is discarded.

The functions are pure apart from coercion warnings, and idempotent:
deriving an already derived record yields the same record.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Mapping, Optional, Union
from uuid import UUID

import structlog
from django.utils import timezone
from pydantic import ValidationError as PydanticValidationError

from modules.orders.amounts import coerce_amount, quantize_currency
from modules.orders.constants import ZERO, PaymentStatus
from modules.orders.dtos import OrderDraftDTO, PreparedOrderDTO
from modules.orders.exceptions import OrderValidationError

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class FinancialState:
    remaining_amount: Decimal
    payment_status: PaymentStatus


def classify_payment(total: Decimal, amount_paid: Decimal) -> PaymentStatus:
    """Classify a payment; the first matching rule wins.

    1. nothing paid                 -> ``PENDING``
    2. paid covers the total        -> ``FULLY_PAID`` (overpayment included)
    3. anything else                -> ``PARTIALLY_PAID``
    """
    if amount_paid <= ZERO:
        return PaymentStatus.PENDING
    if amount_paid >= total:
        return PaymentStatus.FULLY_PAID
    return PaymentStatus.PARTIALLY_PAID


def derive_financial_state(total: Any, amount_paid: Any) -> FinancialState:
    """Compute the derived financial fields of an order.

    Both inputs go through ``coerce_amount``.  A negative remaining amount
    (overpayment) is returned as is.
    """
    total = coerce_amount(total, field="total")
    amount_paid = coerce_amount(amount_paid, field="amount_paid")
    return FinancialState(
        remaining_amount=quantize_currency(total - amount_paid),
        payment_status=classify_payment(total, amount_paid),
    )


def prepare_order_for_persistence(
    draft: Union[OrderDraftDTO, Mapping[str, Any]],
    *,
    order_id: Optional[UUID] = None,
) -> PreparedOrderDTO:
    """Validate a draft and return it with consistent derived fields.

    ``draft`` may be an ``OrderDraftDTO`` or any mapping of its fields.

    Raises:
        OrderValidationError: quantity below 1, unknown status or malformed
            identifiers.  No record is produced.
    """
    if not isinstance(draft, OrderDraftDTO):
        try:
            draft = OrderDraftDTO.model_validate(dict(draft))
        except PydanticValidationError as exc:
            error = OrderValidationError.from_pydantic(exc)
            logger.info("order.draft_rejected", errors=error.errors)
            raise error from exc

    total = quantize_currency(draft.total)
    amount_paid = quantize_currency(draft.amount_paid)
    state = derive_financial_state(total, amount_paid)

    return PreparedOrderDTO(
        id=order_id,
        client_id=draft.client_id,
        product_id=draft.product_id,
        quantity=draft.quantity,
        order_date=draft.order_date or timezone.localdate(),
        status=draft.status,
        total=total,
        amount_paid=amount_paid,
        remaining_amount=state.remaining_amount,
        payment_status=state.payment_status,
    )
