"""Display labels for order enumerations.

Pure presentation data: the stored enum value is what the rest of the
code compares against; these mappings only turn it into text.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Dict, Optional

from django.utils import translation

from modules.orders.amounts import quantize_currency
from modules.orders.constants import OrderStatus, PaymentStatus

DEFAULT_LANGUAGE = "pt-br"

STATUS_LABELS: Dict[str, Dict[str, str]] = {
    "pt-br": {
        OrderStatus.IN_PRODUCTION: "Em Produção",
        OrderStatus.COMPLETED: "Finalizado",
        OrderStatus.CANCELED: "Cancelado",
    },
    "en": {
        OrderStatus.IN_PRODUCTION: "In Production",
        OrderStatus.COMPLETED: "Completed",
        OrderStatus.CANCELED: "Canceled",
    },
}

PAYMENT_STATUS_LABELS: Dict[str, Dict[str, str]] = {
    "pt-br": {
        PaymentStatus.PENDING: "Pendente",
        PaymentStatus.PARTIALLY_PAID: "Pagamento Parcial",
        PaymentStatus.FULLY_PAID: "Pago 100%",
    },
    "en": {
        PaymentStatus.PENDING: "Pending",
        PaymentStatus.PARTIALLY_PAID: "Partially Paid",
        PaymentStatus.FULLY_PAID: "Fully Paid",
    },
}

_PAYMENT_SUMMARY: Dict[str, Dict[str, str]] = {
    "pt-br": {"pending": "Pendente", "paid": "Pago", "due": "Falta"},
    "en": {"pending": "Pending", "paid": "Paid", "due": "Due"},
}

CURRENCY_SYMBOL = "R$"


def resolve_language(language: Optional[str] = None) -> str:
    """Map *language* (or the active Django language) to a supported one."""
    code = (language or translation.get_language() or DEFAULT_LANGUAGE).lower()
    if code in STATUS_LABELS:
        return code
    base = code.split("-")[0]
    if base in STATUS_LABELS:
        return base
    return DEFAULT_LANGUAGE


def status_label(value: str, language: Optional[str] = None) -> str:
    return STATUS_LABELS[resolve_language(language)].get(value, str(value))


def payment_status_label(value: str, language: Optional[str] = None) -> str:
    return PAYMENT_STATUS_LABELS[resolve_language(language)].get(value, str(value))


def format_currency(amount: Decimal) -> str:
    return f"{CURRENCY_SYMBOL} {quantize_currency(Decimal(amount))}"


def describe_payment(
    payment_status: str,
    amount_paid: Decimal,
    remaining_amount: Decimal,
    language: Optional[str] = None,
) -> str:
    """Badge text for an order's payment.

    ``PENDING`` shows what is owed, ``PARTIALLY_PAID`` what was paid and
    what is still due, ``FULLY_PAID`` what was paid.
    """
    words = _PAYMENT_SUMMARY[resolve_language(language)]
    if payment_status == PaymentStatus.PENDING:
        return f"{words['pending']}: {format_currency(remaining_amount)}"
    if payment_status == PaymentStatus.PARTIALLY_PAID:
        return (
            f"{words['paid']}: {format_currency(amount_paid)} | "
            f"{words['due']}: {format_currency(remaining_amount)}"
        )
    return f"{words['paid']}: {format_currency(amount_paid)}"
