"""Product service layer (Use Cases).

Orchestrates business logic for the Product aggregate, delegating
persistence to the injected ``IProductRepository``.

Business rules enforced here:
- Price must be greater than zero and at most MAX_PRICE (validated by DTO).
- Updates replace every editable field.
- Hard delete via repository.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Optional

import structlog
from django.db import transaction

from modules.core.cache import ListingCache, listing_cache
from modules.products.dtos import ProductOptionDTO
from modules.products.events import ProductCreated, ProductDeleted, ProductUpdated
from modules.products.exceptions import ProductNotFound
from modules.products.models import Product
from shared.infrastructure.bus import event_bus as default_event_bus, publish_on_commit

if TYPE_CHECKING:
    from modules.products.dtos import ProductInputDTO
    from modules.products.repositories.interfaces import IProductRepository
    from shared.domain.bus import IEventBus

logger = structlog.get_logger(__name__)


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    """

    def __init__(
        self,
        repository: IProductRepository,
        event_bus: Optional[IEventBus] = None,
        cache: Optional[ListingCache] = None,
    ) -> None:
        self._repo = repository
        self._event_bus = event_bus or default_event_bus
        self._cache = cache or listing_cache

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_product(self, dto: ProductInputDTO) -> Product:
        product = self._repo.save(Product(name=dto.name, price=dto.price))
        logger.info("product.created", product_id=str(product.id))
        publish_on_commit(self._event_bus, ProductCreated(aggregate_id=product.id))
        return product

    @transaction.atomic
    def update_product(self, id: str, dto: ProductInputDTO) -> Product:
        """Replace the editable fields of an existing product.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._repo.get_by_id(id)
        if not product:
            raise ProductNotFound(f"Product {id} not found.")

        product.name = dto.name
        product.price = dto.price
        product = self._repo.save(product)
        logger.info("product.updated", product_id=str(id))
        publish_on_commit(self._event_bus, ProductUpdated(aggregate_id=product.id))
        return product

    @transaction.atomic
    def delete_product(self, id: str) -> None:
        """Hard-delete a product.

        Orders referencing it are kept.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._repo.get_by_id(id)
        if not product:
            raise ProductNotFound(f"Product {id} not found.")
        self._repo.delete(id)
        publish_on_commit(self._event_bus, ProductDeleted(aggregate_id=product.id))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_products(self, filters: Optional[Dict[str, Any]] = None) -> List[Product]:
        """Return a list of products, optionally filtered."""
        return self._repo.list(filters)

    def get_product(self, id: str) -> Product:
        """Retrieve a single product by ID.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._repo.get_by_id(id)
        if not product:
            raise ProductNotFound(f"Product {id} not found.")
        return product

    def product_options(self) -> List[Dict[str, Any]]:
        """``{id, name, price}`` of every product, served from the listing cache."""
        return self._cache.get_or_load(
            "product_options",
            depends_on="products",
            loader=self._load_options,
        )

    def _load_options(self) -> List[Dict[str, Any]]:
        return [
            ProductOptionDTO.from_entity(product).model_dump(mode="json")
            for product in self._repo.list_ordered_by_name()
        ]
