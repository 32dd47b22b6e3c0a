"""Dashboard DTOs.

The summary is cached as plain JSON data, so every DTO here is dumped
with ``model_dump(mode="json")`` before it leaves the service.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Dict, List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, field_validator

from modules.orders.amounts import quantize_currency


class RecentOrderDTO(BaseModel):
    model_config = ConfigDict(frozen=True, from_attributes=True)

    id: UUID
    client_id: UUID
    client_name: Optional[str] = None
    product_id: UUID
    product_name: Optional[str] = None
    order_date: date
    status: str
    total: Decimal
    amount_paid: Decimal
    remaining_amount: Decimal
    payment_status: str

    @field_validator("total", "amount_paid", "remaining_amount")
    @classmethod
    def to_currency(cls, v: Decimal) -> Decimal:
        return quantize_currency(v)


class DashboardSummaryDTO(BaseModel):
    """Headline figures of the home screen."""

    model_config = ConfigDict(frozen=True)

    total_clients: int
    total_orders: int
    total_sales: Decimal
    total_received: Decimal
    total_outstanding: Decimal
    orders_by_payment_status: Dict[str, int]
    orders_by_status: Dict[str, int]
    recent_orders: List[RecentOrderDTO]

    @field_validator("total_sales", "total_received", "total_outstanding")
    @classmethod
    def to_currency(cls, v: Decimal) -> Decimal:
        # Database sums may come back as 170 or 170.0 depending on the backend.
        return quantize_currency(v)
