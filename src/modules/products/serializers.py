"""Product DRF serializers for API output.

Input is validated by ``ProductInputDTO`` in the Service Layer contract.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.products.models import Product


class ProductSerializer(serializers.ModelSerializer):
    """Read serializer for the Product resource."""

    class Meta:
        model = Product
        fields = [
            "id",
            "name",
            "price",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields
