"""Versioned listing cache.

Cached listings (select options, dashboard aggregates) are keyed by the
current *version* of every entity type they are built from.  Bumping an
entity type's version makes every listing that depends on it unreachable,
so the next read goes back to the database.

Versions live in the Django cache (Redis in production) rather than in
process memory, so every worker observes the same invalidation.
"""

from __future__ import annotations

import time
from typing import Any, Callable, Iterable, Optional, Union

import structlog
from django.conf import settings
from django.core.cache import caches

logger = structlog.get_logger(__name__)

_VERSION_KEY = "listing:{entity_type}:version"
_LISTING_KEY = "listing:{name}:{versions}"


def _initial_version() -> int:
    # Clock-based: a reseeded key never repeats a version issued before it was lost.
    return time.time_ns()


class ListingCache:
    """Read-through cache for listings, invalidated per entity type."""

    def __init__(self, alias: str = "default", timeout: Optional[int] = None) -> None:
        self._alias = alias
        self._timeout = timeout

    @property
    def _cache(self):
        return caches[self._alias]

    @property
    def timeout(self) -> int:
        if self._timeout is not None:
            return self._timeout
        return getattr(settings, "LISTING_CACHE_TIMEOUT", 300)

    # ------------------------------------------------------------------
    # Versions
    # ------------------------------------------------------------------

    def version(self, entity_type: str) -> int:
        """Current version of *entity_type*.

        A version that was never stored, or was evicted, is seeded from the
        clock, so it is always above any version issued before.
        """
        key = _VERSION_KEY.format(entity_type=entity_type)
        self._cache.add(key, _initial_version(), None)
        return self._cache.get(key) or _initial_version()

    def invalidate(self, entity_type: str) -> int:
        """Mark every cached listing of *entity_type* as stale."""
        key = _VERSION_KEY.format(entity_type=entity_type)
        try:
            new_version = self._cache.incr(key)
        except ValueError:
            # Key evicted or never read.
            new_version = _initial_version()
            self._cache.set(key, new_version, None)
        logger.info(
            "listing.invalidated", entity_type=entity_type, version=new_version
        )
        return new_version

    # ------------------------------------------------------------------
    # Listings
    # ------------------------------------------------------------------

    def get_or_load(
        self,
        name: str,
        depends_on: Union[str, Iterable[str]],
        loader: Callable[[], Any],
    ) -> Any:
        """Return the cached listing *name*, building it with *loader* on miss."""
        entity_types = [depends_on] if isinstance(depends_on, str) else list(depends_on)
        versions = "-".join(
            f"{entity_type}.{self.version(entity_type)}"
            for entity_type in sorted(entity_types)
        )
        key = _LISTING_KEY.format(name=name, versions=versions)

        cached = self._cache.get(key)
        if cached is not None:
            return cached

        value = loader()
        self._cache.set(key, value, self.timeout)
        logger.debug("listing.loaded", name=name, versions=versions)
        return value


listing_cache = ListingCache()
