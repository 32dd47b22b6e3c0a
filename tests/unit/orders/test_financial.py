"""Unit tests for the order financial state model.

Covers:
- Remaining amount derivation, including overpayment.
- Payment classification priority (nothing paid wins over paid >= total).
- Idempotence of the derivation.
- Draft preparation: validation, defaults and discarded derived fields.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from uuid import uuid4

import pytest
from freezegun import freeze_time

from modules.orders.constants import OrderStatus, PaymentStatus
from modules.orders.dtos import OrderDraftDTO, PreparedOrderDTO
from modules.orders.exceptions import NumericCoercionWarning, OrderValidationError
from modules.orders.financial import (
    FinancialState,
    classify_payment,
    derive_financial_state,
    prepare_order_for_persistence,
)

pytestmark = pytest.mark.unit


def _draft(**overrides):
    data = {
        "client_id": str(uuid4()),
        "product_id": str(uuid4()),
        "quantity": 1,
        "order_date": "2024-05-01",
        "total": "100.00",
        "amount_paid": "0",
    }
    data.update(overrides)
    return data


# ---------------------------------------------------------------------------
# derive_financial_state
# ---------------------------------------------------------------------------


class TestDeriveFinancialState:
    @pytest.mark.parametrize(
        "total, paid, remaining, payment_status",
        [
            ("100.00", "100.00", "0.00", PaymentStatus.FULLY_PAID),
            ("100.00", "0", "100.00", PaymentStatus.PENDING),
            ("100.00", "45.50", "54.50", PaymentStatus.PARTIALLY_PAID),
            ("0", "0", "0.00", PaymentStatus.PENDING),
            ("50.00", "75.00", "-25.00", PaymentStatus.FULLY_PAID),
            ("100.00", "99.99", "0.01", PaymentStatus.PARTIALLY_PAID),
            ("100.00", "0.01", "99.99", PaymentStatus.PARTIALLY_PAID),
            ("0", "10.00", "-10.00", PaymentStatus.FULLY_PAID),
        ],
    )
    def test_examples(self, total, paid, remaining, payment_status):
        state = derive_financial_state(Decimal(total), Decimal(paid))
        assert state == FinancialState(Decimal(remaining), payment_status)

    def test_remaining_is_rounded_half_up(self):
        state = derive_financial_state(Decimal("10.005"), Decimal("0"))
        assert state.remaining_amount == Decimal("10.01")

    def test_unparsable_total_is_zero_and_pending(self):
        with pytest.warns(NumericCoercionWarning):
            state = derive_financial_state("abc", "0")
        assert state.remaining_amount == Decimal("0.00")
        assert state.payment_status == PaymentStatus.PENDING

    def test_unparsable_amount_paid_is_zero(self):
        with pytest.warns(NumericCoercionWarning):
            state = derive_financial_state("80.00", "lots")
        assert state.remaining_amount == Decimal("80.00")
        assert state.payment_status == PaymentStatus.PENDING

    def test_accepts_strings_and_numbers(self):
        assert derive_financial_state("100", 45.5).remaining_amount == Decimal("54.50")

    def test_huge_amounts_do_not_raise(self):
        state = derive_financial_state("1e30", "0")
        assert state.remaining_amount == Decimal("1e30")
        assert state.payment_status == PaymentStatus.PENDING

    @pytest.mark.parametrize(
        "total, paid",
        [("100.00", "45.50"), ("50.00", "75.00"), ("0", "0"), ("19.99", "19.99")],
    )
    def test_is_idempotent(self, total, paid):
        first = derive_financial_state(total, paid)
        second = derive_financial_state(total, paid)
        assert first == second


# ---------------------------------------------------------------------------
# classify_payment
# ---------------------------------------------------------------------------


class TestClassifyPayment:
    def test_nothing_paid_wins_over_fully_paid(self):
        # 0 >= 0 would also match the fully paid rule.
        assert classify_payment(Decimal("0"), Decimal("0")) == PaymentStatus.PENDING

    def test_exact_payment_is_fully_paid(self):
        assert (
            classify_payment(Decimal("10.00"), Decimal("10.00"))
            == PaymentStatus.FULLY_PAID
        )

    def test_overpayment_is_fully_paid(self):
        assert (
            classify_payment(Decimal("10.00"), Decimal("10.01"))
            == PaymentStatus.FULLY_PAID
        )

    def test_partial_payment(self):
        assert (
            classify_payment(Decimal("10.00"), Decimal("9.99"))
            == PaymentStatus.PARTIALLY_PAID
        )


# ---------------------------------------------------------------------------
# prepare_order_for_persistence
# ---------------------------------------------------------------------------


class TestPrepareOrderForPersistence:
    def test_returns_prepared_record(self):
        prepared = prepare_order_for_persistence(_draft(amount_paid="45.50"))

        assert isinstance(prepared, PreparedOrderDTO)
        assert prepared.id is None
        assert prepared.total == Decimal("100.00")
        assert prepared.amount_paid == Decimal("45.50")
        assert prepared.remaining_amount == Decimal("54.50")
        assert prepared.payment_status == PaymentStatus.PARTIALLY_PAID
        assert prepared.order_date == date(2024, 5, 1)

    def test_accepts_draft_dto(self):
        draft = OrderDraftDTO.model_validate(_draft(amount_paid="100"))
        prepared = prepare_order_for_persistence(draft)
        assert prepared.payment_status == PaymentStatus.FULLY_PAID
        assert prepared.remaining_amount == Decimal("0.00")

    def test_binds_id_for_updates(self):
        order_id = uuid4()
        prepared = prepare_order_for_persistence(_draft(), order_id=order_id)
        assert prepared.id == order_id

    def test_caller_supplied_derived_fields_are_ignored(self):
        prepared = prepare_order_for_persistence(
            _draft(
                amount_paid="0",
                remaining_amount="0.00",
                payment_status=PaymentStatus.FULLY_PAID,
            )
        )
        assert prepared.remaining_amount == Decimal("100.00")
        assert prepared.payment_status == PaymentStatus.PENDING

    def test_amounts_are_quantized_before_derivation(self):
        prepared = prepare_order_for_persistence(
            _draft(total="10.005", amount_paid="10.004")
        )
        assert prepared.total == Decimal("10.01")
        assert prepared.amount_paid == Decimal("10.00")
        assert prepared.remaining_amount == prepared.total - prepared.amount_paid
        assert prepared.payment_status == PaymentStatus.PARTIALLY_PAID

    def test_overpayment_is_kept(self):
        prepared = prepare_order_for_persistence(
            _draft(total="50.00", amount_paid="75.00")
        )
        assert prepared.remaining_amount == Decimal("-25.00")
        assert prepared.payment_status == PaymentStatus.FULLY_PAID

    def test_unparsable_total_does_not_raise(self):
        with pytest.warns(NumericCoercionWarning):
            prepared = prepare_order_for_persistence(_draft(total="abc"))
        assert prepared.total == Decimal("0.00")
        assert prepared.payment_status == PaymentStatus.PENDING

    def test_missing_amount_paid_defaults_to_zero(self):
        data = _draft()
        del data["amount_paid"]
        prepared = prepare_order_for_persistence(data)
        assert prepared.amount_paid == Decimal("0.00")
        assert prepared.payment_status == PaymentStatus.PENDING

    def test_status_defaults_to_in_production(self):
        prepared = prepare_order_for_persistence(_draft())
        assert prepared.status == OrderStatus.IN_PRODUCTION

    @freeze_time("2024-07-15 12:00:00")
    def test_order_date_defaults_to_today(self):
        data = _draft()
        del data["order_date"]
        prepared = prepare_order_for_persistence(data)
        assert prepared.order_date == date(2024, 7, 15)

    @pytest.mark.parametrize("quantity", [0, -1])
    def test_quantity_below_one_is_rejected(self, quantity):
        with pytest.raises(OrderValidationError) as exc_info:
            prepare_order_for_persistence(_draft(quantity=quantity))
        assert exc_info.value.errors == {"quantity": ["Quantity must be at least 1."]}

    def test_non_integer_quantity_is_rejected(self):
        with pytest.raises(OrderValidationError) as exc_info:
            prepare_order_for_persistence(_draft(quantity="two"))
        assert "quantity" in exc_info.value.errors

    def test_status_label_is_not_accepted_as_status(self):
        with pytest.raises(OrderValidationError) as exc_info:
            prepare_order_for_persistence(_draft(status="Em Produção"))
        assert "status" in exc_info.value.errors

    def test_malformed_identifiers_are_rejected(self):
        with pytest.raises(OrderValidationError) as exc_info:
            prepare_order_for_persistence(_draft(client_id="7", product_id="abc"))
        assert set(exc_info.value.errors) == {"client_id", "product_id"}

    @pytest.mark.parametrize("field", ["total", "amount_paid"])
    @pytest.mark.parametrize("amount", ["123456789012.00", "1e30", "99999999.995"])
    def test_unstorable_amounts_are_rejected(self, field, amount):
        with pytest.raises(OrderValidationError) as exc_info:
            prepare_order_for_persistence(_draft(**{field: amount}))
        assert exc_info.value.errors == {
            field: ["Amount must not exceed 99999999.99."]
        }

    def test_largest_storable_amount_is_accepted(self):
        prepared = prepare_order_for_persistence(_draft(total="99999999.99"))
        assert prepared.total == Decimal("99999999.99")
        assert prepared.remaining_amount == Decimal("99999999.99")

    def test_every_failure_is_reported(self):
        with pytest.raises(OrderValidationError) as exc_info:
            prepare_order_for_persistence(_draft(quantity=0, status="SHIPPED"))
        assert set(exc_info.value.errors) == {"quantity", "status"}
        assert "quantity" in str(exc_info.value)
