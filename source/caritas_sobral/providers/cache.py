"""This module provides a small in-process cache for list queries.

Paginated list views are cached per entity, filter set and page. Every
mutation of an entity invalidates all of its entries, so a list is never
served stale after the administrator saves a change. Expired entries are
dropped whenever a new value is stored, and the number of entries is
bounded, since public searches produce one key per distinct term.
"""

import threading
import time
from collections.abc import Callable, Hashable, Mapping
from typing import Any, TypeVar

from caritas_sobral.providers.logging import Logger, LoggingProvider

T = TypeVar("T")

CacheKey = tuple[str, frozenset[tuple[str, Hashable]], int]


class QueryCache:
    """A thread-safe, size-bounded cache with a per-entry time-to-live."""

    def __init__(
        self,
        ttl_seconds: float,
        max_entries: int = 512,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initializes the cache.

        Args:
            ttl_seconds: How long an entry stays valid. Zero or less disables
                caching entirely.
            max_entries: The most entries kept at once. When full, the entry
                closest to expiry is evicted.
            clock: The monotonic time source.
        """
        self.logger: Logger = LoggingProvider().get_logger()
        self.ttl_seconds = ttl_seconds
        self.max_entries = max(1, max_entries)
        self._clock = clock
        self._entries: dict[CacheKey, tuple[float, Any]] = {}
        self._generations: dict[str, int] = {}
        self._epoch = 0
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    @staticmethod
    def make_key(entity: str, filters: Mapping[str, Hashable] | None, page: int) -> CacheKey:
        """Builds a cache key.

        Args:
            entity: The entity name, such as "editais".
            filters: The active filters. Empty values are ignored, so an
                absent filter and an empty one share the same entry.
            page: The requested page.

        Returns:
            A hashable key.
        """
        active = frozenset((name, value) for name, value in (filters or {}).items() if value not in (None, ""))
        return (entity, active, page)

    def get_or_load(
        self,
        entity: str,
        filters: Mapping[str, Hashable] | None,
        page: int,
        loader: Callable[[], T],
    ) -> T:
        """Returns a cached value, loading and storing it on a miss.

        A value whose entity was invalidated while the loader was running is
        returned to the caller but not stored.

        Args:
            entity: The entity name.
            filters: The active filters.
            page: The requested page.
            loader: Produces the value on a miss. Errors propagate and
                nothing is stored.

        Returns:
            The cached or freshly loaded value.
        """
        if self.ttl_seconds <= 0:
            return loader()

        key = self.make_key(entity, filters, page)
        with self._lock:
            entry = self._entries.get(key)
            if entry is not None:
                if entry[0] > self._clock():
                    return entry[1]
                del self._entries[key]
            generation = self._generation_of(entity)

        value = loader()

        with self._lock:
            if self._generation_of(entity) != generation:
                self.logger.debug(f"Discarding a {entity} query invalidated while loading.")
                return value
            now = self._clock()
            self._drop_expired(now)
            if len(self._entries) >= self.max_entries:
                oldest = min(self._entries, key=lambda cached: self._entries[cached][0])
                del self._entries[oldest]
            self._entries[key] = (now + self.ttl_seconds, value)
        return value

    def invalidate(self, entity: str) -> None:
        """Drops every entry belonging to an entity.

        Loads of that entity already in flight will not be stored.

        Args:
            entity: The entity name.
        """
        with self._lock:
            self._generations[entity] = self._generations.get(entity, 0) + 1
            stale = [key for key in self._entries if key[0] == entity]
            for key in stale:
                del self._entries[key]
        if stale:
            self.logger.debug(f"Invalidated {len(stale)} cached queries for {entity}.")

    def clear(self) -> None:
        """Drops every entry."""
        with self._lock:
            self._epoch += 1
            self._entries.clear()

    def _generation_of(self, entity: str) -> tuple[int, int]:
        return (self._epoch, self._generations.get(entity, 0))

    def _drop_expired(self, now: float) -> None:
        expired = [key for key, (expires_at, _) in self._entries.items() if expires_at <= now]
        for key in expired:
            del self._entries[key]
