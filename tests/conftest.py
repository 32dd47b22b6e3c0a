from datetime import date
from decimal import Decimal

import pytest
from django.contrib.auth import get_user_model
from django.core.cache import cache
from rest_framework.test import APIClient

from modules.clients.models import Client
from modules.orders.constants import OrderStatus
from modules.orders.models import Order
from modules.products.models import Product


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture(autouse=True)
def _clear_cache():
    """Listing versions and cached listings must not leak between tests."""
    cache.clear()
    yield
    cache.clear()


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def auth_client():
    """APIClient with a force-authenticated Django user."""
    client = APIClient()
    user = get_user_model().objects.create_user(
        username="balcao", password="testpass123"
    )
    client.force_authenticate(user=user)
    return client


@pytest.fixture()
def api_client_with_correlation(api_client):
    """APIClient pre-configured with a known correlation ID header."""
    cid = "test-correlation-id-fixture"
    api_client.defaults["HTTP_X_REQUEST_ID"] = cid
    return api_client, cid


@pytest.fixture()
def client_record():
    return Client.objects.create(
        name="Padaria Pão Quente",
        phone="(11) 3344-5566",
        address="Av. Brasil, 455",
    )


@pytest.fixture()
def product_record():
    return Product.objects.create(name="Cartão de Visita", price=Decimal("89.90"))


@pytest.fixture()
def make_order(client_record, product_record):
    """Factory persisting an order through the model (derivation included)."""

    def _make(**overrides):
        fields = {
            "client": client_record,
            "product": product_record,
            "quantity": 1,
            "order_date": date(2024, 5, 1),
            "status": OrderStatus.IN_PRODUCTION,
            "total": Decimal("100.00"),
            "amount_paid": Decimal("0.00"),
        }
        fields.update(overrides)
        return Order.objects.create(**fields)

    return _make


@pytest.fixture()
def order_payload(client_record, product_record):
    """A valid order draft as the order form submits it."""
    return {
        "client_id": str(client_record.id),
        "product_id": str(product_record.id),
        "quantity": 2,
        "order_date": "2024-05-01",
        "status": OrderStatus.IN_PRODUCTION.value,
        "total": "100.00",
        "amount_paid": "45.50",
    }
