"""Domain events for the Products bounded context."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from shared.domain.events import DomainEvent


@dataclass(frozen=True)
class ProductEvent(DomainEvent):
    entity_type: ClassVar[str] = "products"


@dataclass(frozen=True)
class ProductCreated(ProductEvent):
    """Raised when a product is created."""


@dataclass(frozen=True)
class ProductUpdated(ProductEvent):
    """Raised when a product is replaced."""


@dataclass(frozen=True)
class ProductDeleted(ProductEvent):
    """Raised when a product is deleted."""


PRODUCT_EVENTS = [ProductCreated, ProductUpdated, ProductDeleted]
