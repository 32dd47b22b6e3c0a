"""Unit tests for OrderService."""

from __future__ import annotations

from decimal import Decimal
from uuid import uuid4

import pytest
from django.db import transaction

from modules.orders.constants import OrderStatus, PaymentStatus
from modules.orders.events import OrderCreated, OrderDeleted, OrderUpdated
from modules.orders.exceptions import OrderNotFound, OrderValidationError
from modules.orders.models import Order
from modules.orders.repositories.django_repository import OrderDjangoRepository
from modules.orders.services import OrderService

pytestmark = pytest.mark.unit


class RecordingBus:
    def __init__(self):
        self.events = []

    def publish(self, event):
        self.events.append(event)

    def subscribe(self, event_class, handler):
        pass


@pytest.fixture()
def bus():
    return RecordingBus()


@pytest.fixture()
def service(bus):
    return OrderService(order_repository=OrderDjangoRepository(), event_bus=bus)


class TestCreateOrder:
    def test_derives_financial_state(
        self, service, bus, order_payload, django_capture_on_commit_callbacks
    ):
        with django_capture_on_commit_callbacks(execute=True):
            order = service.create_order(order_payload)
        assert order.remaining_amount == Decimal("54.50")
        assert order.payment_status == PaymentStatus.PARTIALLY_PAID
        assert [type(e) for e in bus.events] == [OrderCreated]
        assert bus.events[0].aggregate_id == order.id

    def test_event_waits_for_commit(
        self, service, bus, order_payload, django_capture_on_commit_callbacks
    ):
        with django_capture_on_commit_callbacks() as callbacks:
            order = service.create_order(order_payload)
        assert bus.events == []
        assert len(callbacks) == 1

        callbacks[0]()
        assert [e.aggregate_id for e in bus.events] == [order.id]

    def test_rolled_back_write_publishes_nothing(
        self, service, bus, order_payload, django_capture_on_commit_callbacks
    ):
        with django_capture_on_commit_callbacks(execute=True) as callbacks:
            with pytest.raises(RuntimeError):
                with transaction.atomic():
                    service.create_order(order_payload)
                    raise RuntimeError("abort")
        assert callbacks == []
        assert bus.events == []
        assert not Order.objects.exists()

    def test_submitted_derived_fields_are_ignored(self, service, order_payload):
        order_payload.update(payment_status="FULLY_PAID", remaining_amount="0")
        order = service.create_order(order_payload)
        assert order.payment_status == PaymentStatus.PARTIALLY_PAID
        assert order.remaining_amount == Decimal("54.50")

    def test_invalid_draft_stores_nothing(self, service, bus, order_payload):
        order_payload["quantity"] = 0
        with pytest.raises(OrderValidationError) as exc_info:
            service.create_order(order_payload)
        assert "quantity" in exc_info.value.errors
        assert not Order.objects.exists()
        assert bus.events == []


class TestUpdateOrder:
    def test_replaces_and_rederives(
        self, service, bus, make_order, order_payload, django_capture_on_commit_callbacks
    ):
        order = make_order()
        order_payload.update(amount_paid="100.00", status=OrderStatus.COMPLETED)
        with django_capture_on_commit_callbacks(execute=True):
            updated = service.update_order(order.id, order_payload)
        assert updated.payment_status == PaymentStatus.FULLY_PAID
        assert updated.remaining_amount == Decimal("0.00")
        assert updated.status == OrderStatus.COMPLETED
        assert [type(e) for e in bus.events] == [OrderUpdated]

    def test_missing_order(self, service, bus, order_payload):
        with pytest.raises(OrderNotFound):
            service.update_order(uuid4(), order_payload)
        assert bus.events == []

    def test_malformed_id_is_not_found(self, service, order_payload):
        with pytest.raises(OrderNotFound):
            service.update_order("abc", order_payload)

    def test_validation_runs_before_lookup(self, service, order_payload):
        order_payload["quantity"] = -1
        with pytest.raises(OrderValidationError):
            service.update_order(uuid4(), order_payload)


class TestDeleteOrder:
    def test_deletes_and_publishes(
        self, service, bus, make_order, django_capture_on_commit_callbacks
    ):
        order = make_order()
        with django_capture_on_commit_callbacks(execute=True):
            service.delete_order(order.id)
        assert not Order.objects.filter(id=order.id).exists()
        assert [type(e) for e in bus.events] == [OrderDeleted]

    def test_missing_order(self, service):
        with pytest.raises(OrderNotFound):
            service.delete_order(uuid4())


class TestQueries:
    def test_get_order(self, service, make_order):
        order = make_order()
        assert service.get_order(str(order.id)).id == order.id

    def test_get_order_missing(self, service):
        with pytest.raises(OrderNotFound):
            service.get_order(str(uuid4()))

    def test_list_orders(self, service, make_order):
        make_order(status=OrderStatus.CANCELED)
        make_order()
        assert len(service.list_orders()) == 2
        assert len(service.list_orders({"status": OrderStatus.CANCELED})) == 1


class TestReconcileFinancialState:
    def test_corrects_stale_rows(
        self, service, bus, make_order, django_capture_on_commit_callbacks
    ):
        stale = make_order(amount_paid=Decimal("100.00"))
        make_order()
        Order.objects.filter(id=stale.id).update(
            payment_status=PaymentStatus.PENDING,
            remaining_amount=Decimal("100.00"),
        )

        with django_capture_on_commit_callbacks(execute=True):
            result = service.reconcile_financial_state()

        assert result.checked == 2
        assert result.corrected == 1
        stale.refresh_from_db()
        assert stale.payment_status == PaymentStatus.FULLY_PAID
        assert stale.remaining_amount == Decimal("0.00")
        assert [e.aggregate_id for e in bus.events] == [stale.id]

    def test_consistent_rows_are_untouched(self, service, bus, make_order):
        make_order()
        result = service.reconcile_financial_state()
        assert result.corrected == 0
        assert bus.events == []
