"""Dashboard API view."""

from __future__ import annotations

from typing import Any, Dict

from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from modules.clients.repositories.django_repository import ClientDjangoRepository
from modules.dashboard.services import DashboardService
from modules.orders.labels import (
    describe_payment,
    payment_status_label,
    status_label,
)
from modules.orders.repositories.django_repository import OrderDjangoRepository


def _with_labels(order: Dict[str, Any]) -> Dict[str, Any]:
    return {
        **order,
        "status_label": status_label(order["status"]),
        "payment_status_label": payment_status_label(order["payment_status"]),
        "payment_summary": describe_payment(
            order["payment_status"], order["amount_paid"], order["remaining_amount"]
        ),
    }


class DashboardSummaryView(APIView):
    """GET /api/v1/dashboard/summary/

    Labels are added per request so the cached figures stay
    language-independent.
    """

    def get(self, request: Request) -> Response:
        service = DashboardService(
            order_repository=OrderDjangoRepository(),
            client_repository=ClientDjangoRepository(),
        )
        summary = service.summary()
        return Response(
            {
                **summary,
                "recent_orders": [_with_labels(o) for o in summary["recent_orders"]],
            }
        )
