"""Order DRF serializers for API output.

Input is validated by the financial core (``OrderDraftDTO``), not by a
serializer: a DRF ``DecimalField`` would reject the unusable amounts the
core coerces to zero.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.orders.labels import (
    describe_payment,
    payment_status_label,
    status_label,
)
from modules.orders.models import Order


class OrderSerializer(serializers.ModelSerializer):
    """Read serializer for orders, with display labels.

    ``client_name``/``product_name`` come from queryset annotations and are
    ``null`` when the referenced record no longer exists.
    """

    client_name = serializers.SerializerMethodField()
    product_name = serializers.SerializerMethodField()
    status_label = serializers.SerializerMethodField()
    payment_status_label = serializers.SerializerMethodField()
    payment_summary = serializers.SerializerMethodField()

    class Meta:
        model = Order
        fields = [
            "id",
            "client_id",
            "client_name",
            "product_id",
            "product_name",
            "quantity",
            "order_date",
            "status",
            "status_label",
            "total",
            "amount_paid",
            "remaining_amount",
            "payment_status",
            "payment_status_label",
            "payment_summary",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields

    def get_client_name(self, obj: Order) -> str | None:
        return getattr(obj, "client_name", None)

    def get_product_name(self, obj: Order) -> str | None:
        return getattr(obj, "product_name", None)

    def get_status_label(self, obj: Order) -> str:
        return status_label(obj.status)

    def get_payment_status_label(self, obj: Order) -> str:
        return payment_status_label(obj.payment_status)

    def get_payment_summary(self, obj: Order) -> str:
        return describe_payment(
            obj.payment_status, obj.amount_paid, obj.remaining_amount
        )
