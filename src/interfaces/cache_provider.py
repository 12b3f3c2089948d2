"""Abstract base class for cache service providers.

Defines the key/value contract used to keep the image API from being hit
for data that was fetched recently (image listings, the category list).
Implementations may use an in-process dict, Redis, memcached or any other
store with TTL semantics; the lookup service only depends on this class.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class ICacheProvider(ABC):
    """Contract for key-value cache services.

    Stores are expected to be atomic per key.  No cross-key transactions
    are assumed.
    """

    @abstractmethod
    def get(self, key: str) -> Any | None:
        """Retrieve the value stored under *key*.

        Parameters
        ----------
        key:
            The cache key to look up.

        Returns
        -------
        Any or None
            The cached value if present and not expired; ``None`` otherwise.
        """

    @abstractmethod
    def set(self, key: str, value: Any, ttl: int | None = None) -> None:
        """Store *value* under *key* with an optional time-to-live.

        Parameters
        ----------
        key:
            The cache key.
        value:
            The value to store (mappings and lists of API entities).
        ttl:
            Time-to-live in seconds.  ``None`` means the store's default.
        """

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove the entry stored under *key* (no-op if absent)."""

    @abstractmethod
    def exists(self, key: str) -> bool:
        """Return ``True`` if *key* is present in the cache and not expired."""
