"""Asynchronous tasks of the orders module."""

import structlog
from celery import shared_task

from modules.orders.repositories.django_repository import OrderDjangoRepository
from modules.orders.services import OrderService

logger = structlog.get_logger(__name__)


@shared_task(name="orders.reconcile_financial_state")
def reconcile_financial_state():
    """Rewrite orders whose stored payment state disagrees with their amounts."""
    service = OrderService(order_repository=OrderDjangoRepository())
    result = service.reconcile_financial_state()
    logger.info("reconcile_task.executed", **result.model_dump())
    return result.model_dump()
