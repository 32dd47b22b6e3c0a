"""Event handlers shared by every bounded context."""

from __future__ import annotations

from typing import Optional

import structlog

from modules.core.cache import ListingCache, listing_cache
from shared.domain.bus import IEventHandler
from shared.domain.events import DomainEvent

logger = structlog.get_logger(__name__)


class ListingInvalidationHandler(IEventHandler[DomainEvent]):
    """Bumps the listing version of the entity type an event belongs to."""

    def __init__(self, cache: Optional[ListingCache] = None) -> None:
        self._cache = cache or listing_cache

    def handle(self, event: DomainEvent) -> None:
        if not event.entity_type:
            logger.warning("listing.event_without_entity", event_name=event.event_name)
            return
        self._cache.invalidate(event.entity_type)


listing_invalidation_handler = ListingInvalidationHandler()
