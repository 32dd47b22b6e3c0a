"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (Views) and the
Service layer.  DTOs are immutable (``frozen=True``).

- ``ProductInputDTO``: input for product creation and full replacement.
- ``ProductOptionDTO``: ``{id, name, price}`` entry of the order form
  product selector.
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING
from uuid import UUID

from pydantic import BaseModel, ConfigDict, field_validator

# Largest price a DecimalField(max_digits=10, decimal_places=2) column holds.
MAX_PRICE = Decimal("99999999.99")

if TYPE_CHECKING:
    from modules.products.models import Product


# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class ProductInputDTO(BaseModel):
    """Immutable DTO for product create/replace requests.

    Validates:
    - ``name`` is a non-empty string.
    - ``price`` is a Decimal greater than zero and at most ``MAX_PRICE``.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str
    price: Decimal

    @field_validator("name")
    @classmethod
    def name_must_not_be_empty(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Name must not be empty.")
        return v.strip()

    @field_validator("price")
    @classmethod
    def price_must_be_positive(cls, v: Decimal) -> Decimal:
        if not v.is_finite() or v <= 0:
            raise ValueError("Price must be greater than zero.")
        if v > MAX_PRICE:
            raise ValueError(f"Price must not exceed {MAX_PRICE}.")
        return v


# ---------------------------------------------------------------------------
# Output DTO
# ---------------------------------------------------------------------------


class ProductOptionDTO(BaseModel):
    """Immutable DTO for a product selector entry."""

    model_config = ConfigDict(frozen=True)

    id: UUID
    name: str
    price: Decimal

    @classmethod
    def from_entity(cls, product: Product) -> ProductOptionDTO:
        return cls(id=product.id, name=product.name, price=product.price)
