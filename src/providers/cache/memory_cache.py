"""In-memory cache provider using cachetools.TLRUCache.

Each entry carries its own expiry so that image listings (one hour) and
the category list (one day) can share a single store.  Suitable for a
single process; a shared deployment would put Redis or memcached behind
:class:`ICacheProvider` instead.
"""

from __future__ import annotations

import math
import time
from typing import Any, Callable

from cachetools import TLRUCache

from src.interfaces.cache_provider import ICacheProvider
from src.utils.logging import get_logger

logger = get_logger(__name__)


class MemoryCacheProvider(ICacheProvider):
    """In-memory per-entry TTL cache backed by ``cachetools.TLRUCache``.

    Parameters
    ----------
    max_size:
        Maximum number of entries before the least-recently-used entry
        is evicted.
    ttl:
        Default time-to-live in seconds, used when :meth:`set` is called
        without one.  ``None`` keeps such entries until evicted.
    timer:
        Clock returning seconds.  Tests inject a fake to step time.
    """

    def __init__(
        self,
        max_size: int = 1000,
        ttl: int | None = 3600,
        timer: Callable[[], float] = time.monotonic,
    ) -> None:
        self._default_ttl = ttl
        # Values are stored as (value, ttl) so the ttu callback can read
        # the per-entry lifetime.
        self._cache: TLRUCache[str, tuple[Any, float]] = TLRUCache(
            maxsize=max_size,
            ttu=self._time_to_use,
            timer=timer,
        )

    @staticmethod
    def _time_to_use(_key: str, entry: tuple[Any, float], now: float) -> float:
        return now + entry[1]

    # ------------------------------------------------------------------
    # ICacheProvider implementation
    # ------------------------------------------------------------------

    def get(self, key: str) -> Any | None:
        """Retrieve the cached value for *key*, or ``None`` if missing/expired."""
        entry = self._cache.get(key)
        if entry is None:
            logger.debug("cache_miss", key=key)
            return None
        logger.debug("cache_hit", key=key)
        return entry[0]

    def set(self, key: str, value: Any, ttl: int | None = None) -> None:
        """Store *value* under *key* for *ttl* seconds.

        A non-positive TTL stores nothing and drops any previous entry.
        """
        lifetime = ttl if ttl is not None else self._default_ttl
        if lifetime is None:
            lifetime = math.inf
        if lifetime <= 0:
            self._cache.pop(key, None)
            return
        self._cache[key] = (value, lifetime)
        logger.debug("cache_set", key=key, ttl=lifetime)

    def delete(self, key: str) -> None:
        """Remove *key* from the cache (no-op if absent)."""
        self._cache.pop(key, None)
        logger.debug("cache_delete", key=key)

    def exists(self, key: str) -> bool:
        """Return ``True`` if *key* is present and not expired."""
        return key in self._cache
