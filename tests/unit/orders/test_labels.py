"""Unit tests for order display labels."""

from __future__ import annotations

from decimal import Decimal

import pytest
from django.utils import translation

from modules.orders.constants import OrderStatus, PaymentStatus
from modules.orders.labels import (
    describe_payment,
    payment_status_label,
    resolve_language,
    status_label,
)

pytestmark = pytest.mark.unit


class TestLabels:
    @pytest.mark.parametrize(
        "value, label",
        [
            (OrderStatus.IN_PRODUCTION, "Em Produção"),
            (OrderStatus.COMPLETED, "Finalizado"),
            (OrderStatus.CANCELED, "Cancelado"),
        ],
    )
    def test_status_labels_default_to_portuguese(self, value, label):
        assert status_label(value) == label
        assert status_label(value.value) == label

    @pytest.mark.parametrize(
        "value, label",
        [
            (PaymentStatus.PENDING, "Pending"),
            (PaymentStatus.PARTIALLY_PAID, "Partially Paid"),
            (PaymentStatus.FULLY_PAID, "Fully Paid"),
        ],
    )
    def test_payment_status_labels_in_english(self, value, label):
        assert payment_status_label(value, language="en") == label

    def test_labels_agree_with_enum_choices(self):
        for value, label in PaymentStatus.choices:
            assert payment_status_label(value, language="pt-br") == label
        for value, label in OrderStatus.choices:
            assert status_label(value, language="pt-br") == label

    def test_active_language_is_used(self):
        with translation.override("en"):
            assert status_label(OrderStatus.COMPLETED) == "Completed"

    @pytest.mark.parametrize(
        "language, resolved",
        [("en-us", "en"), ("EN", "en"), ("pt-br", "pt-br"), ("de", "pt-br")],
    )
    def test_language_resolution(self, language, resolved):
        assert resolve_language(language) == resolved

    def test_unknown_value_is_shown_as_is(self):
        assert status_label("ARCHIVED") == "ARCHIVED"


class TestDescribePayment:
    def test_pending_shows_amount_owed(self):
        text = describe_payment(
            PaymentStatus.PENDING, Decimal("0.00"), Decimal("100.00"), language="pt-br"
        )
        assert text == "Pendente: R$ 100.00"

    def test_partial_shows_paid_and_due(self):
        text = describe_payment(
            PaymentStatus.PARTIALLY_PAID,
            Decimal("45.50"),
            Decimal("54.50"),
            language="pt-br",
        )
        assert text == "Pago: R$ 45.50 | Falta: R$ 54.50"

    def test_fully_paid_shows_amount_paid(self):
        text = describe_payment(
            PaymentStatus.FULLY_PAID, Decimal("100"), Decimal("0"), language="pt-br"
        )
        assert text == "Pago: R$ 100.00"

    def test_english_wording(self):
        text = describe_payment(
            PaymentStatus.PARTIALLY_PAID, Decimal("10"), Decimal("5"), language="en"
        )
        assert text == "Paid: R$ 10.00 | Due: R$ 5.00"

    def test_accepts_serialized_amounts(self):
        text = describe_payment("PENDING", "0.00", "12.5", language="pt-br")
        assert text == "Pendente: R$ 12.50"
