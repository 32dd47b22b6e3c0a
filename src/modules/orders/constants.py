"""Order domain constants.

Status and payment-status enumerations.  The stored value is the enum
identity used in comparisons and persistence; the label is the default
(pt-br) display text.  Other languages are mapped in ``labels.py``.
"""

from decimal import Decimal

from django.db import models


class OrderStatus(models.TextChoices):
    IN_PRODUCTION = "IN_PRODUCTION", "Em Produção"
    COMPLETED = "COMPLETED", "Finalizado"
    CANCELED = "CANCELED", "Cancelado"


class PaymentStatus(models.TextChoices):
    PENDING = "PENDING", "Pendente"
    PARTIALLY_PAID = "PARTIALLY_PAID", "Pagamento Parcial"
    FULLY_PAID = "FULLY_PAID", "Pago 100%"


DEFAULT_ORDER_STATUS = OrderStatus.IN_PRODUCTION

# Currency precision: every monetary amount is stored with two decimals.
CURRENCY_QUANTUM = Decimal("0.01")
ZERO = Decimal("0.00")
# Largest amount a DecimalField(max_digits=10, decimal_places=2) column holds.
MAX_AMOUNT = Decimal("99999999.99")

RECENT_ORDERS_LIMIT = 5
