"""Monetary amount parsing for operator-entered values.

Amounts arrive from forms as strings, numbers or nothing at all.  Parsing
is deliberately lenient: anything that is not a finite, non-negative number
becomes ``0`` and a ``NumericCoercionWarning`` is emitted, the operation
carries on.
"""

from __future__ import annotations

import warnings
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any

import structlog

from modules.orders.constants import CURRENCY_QUANTUM
from modules.orders.exceptions import NumericCoercionWarning

logger = structlog.get_logger(__name__)


def _coerced_to_zero(value: Any, field: str, reason: str) -> Decimal:
    logger.warning(
        "order.amount_coerced",
        field=field,
        reason=reason,
        raw_value=repr(value)[:64],
    )
    warnings.warn(
        f"{field}: {reason}, using 0",
        NumericCoercionWarning,
        stacklevel=3,
    )
    return Decimal(0)


def coerce_amount(value: Any, field: str = "amount") -> Decimal:
    """Parse *value* as a non-negative decimal, falling back to ``0``.

    Accepts ``int``, ``float``, ``Decimal`` and numeric strings (surrounding
    whitespace allowed).  ``None``, blanks, booleans, unparsable text, NaN,
    infinities and negative numbers all yield ``0``.
    """
    if isinstance(value, Decimal):
        parsed = value
    elif isinstance(value, bool) or value is None:
        return _coerced_to_zero(value, field, "not a number")
    elif isinstance(value, (int, float)):
        parsed = Decimal(str(value))
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return _coerced_to_zero(value, field, "blank value")
        try:
            parsed = Decimal(text)
        except InvalidOperation:
            return _coerced_to_zero(value, field, "not a number")
    else:
        return _coerced_to_zero(value, field, "unsupported type")

    if not parsed.is_finite():
        return _coerced_to_zero(value, field, "not a finite number")
    if parsed < 0:
        return _coerced_to_zero(value, field, "negative amount")
    return parsed


def quantize_currency(amount: Decimal) -> Decimal:
    """Round *amount* to currency precision (two places, half up).

    Amounts too large to carry two places within the decimal context
    precision are returned unchanged; they are far outside any storable
    amount and are rejected by input validation.
    """
    try:
        return amount.quantize(CURRENCY_QUANTUM, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        return amount
