"""Client model.

Business rules implemented:
- ``name`` is required; ``phone`` and ``address`` may be blank.
- Deletion is a hard delete; orders keep pointing at the removed id.
- Phone numbers are never written to logs.
"""

from __future__ import annotations

from django.db import models

from modules.core.models import BaseModel


class Client(BaseModel):
    """Customer of the print shop."""

    name = models.CharField(max_length=255)
    phone = models.CharField(max_length=32, blank=True, default="")
    address = models.TextField(blank=True, default="")

    class Meta:
        db_table = "clients"
        ordering = ["name"]
        indexes = [
            models.Index(fields=["name"], name="clients_name_idx"),
        ]

    def __str__(self) -> str:
        return self.name
