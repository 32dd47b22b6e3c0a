"""Client repositories package."""

from modules.clients.repositories.django_repository import ClientDjangoRepository
from modules.clients.repositories.interfaces import IClientRepository

__all__ = ["IClientRepository", "ClientDjangoRepository"]
