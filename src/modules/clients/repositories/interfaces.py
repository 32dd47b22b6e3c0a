"""Client repository interface."""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, List

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.clients.models import Client


class IClientRepository(IRepository["Client"]):
    """Repository contract for the Client aggregate."""

    @abstractmethod
    def list_ordered_by_name(self) -> List[Client]:
        """Every client, alphabetically (used for selector options)."""
