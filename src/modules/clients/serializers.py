"""Client DRF serializers for API output.

Input is validated by ``ClientInputDTO`` in the Service Layer contract.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.clients.models import Client


class ClientSerializer(serializers.ModelSerializer):
    """Read serializer for the Client resource."""

    class Meta:
        model = Client
        fields = [
            "id",
            "name",
            "phone",
            "address",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields
