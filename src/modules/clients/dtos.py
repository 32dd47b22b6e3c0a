"""Client DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (Views) and the
Service layer.  DTOs are immutable (``frozen=True``).

- ``ClientInputDTO``: input for client creation and full replacement.
- ``ClientOptionDTO``: ``{id, name}`` entry of the order form client
  selector.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from pydantic import BaseModel, ConfigDict, field_validator

if TYPE_CHECKING:
    from modules.clients.models import Client


# ---------------------------------------------------------------------------
# Input DTO
# ---------------------------------------------------------------------------


class ClientInputDTO(BaseModel):
    """Immutable DTO for client create/replace requests.

    ``phone`` and ``address`` must be sent but may be blank; ``name`` may
    not.  Surrounding whitespace is stripped from all three.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", str_strip_whitespace=True)

    name: str
    phone: str
    address: str

    @field_validator("name")
    @classmethod
    def name_must_not_be_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("Name must not be empty.")
        return v


# ---------------------------------------------------------------------------
# Output DTO
# ---------------------------------------------------------------------------


class ClientOptionDTO(BaseModel):
    """Immutable DTO for a client selector entry."""

    model_config = ConfigDict(frozen=True)

    id: UUID
    name: str

    @classmethod
    def from_entity(cls, client: Client) -> ClientOptionDTO:
        return cls(id=client.id, name=client.name)
