"""Cache providers.

In-memory TTL cache used to avoid redundant calls to the stock photo API
(the same category requested on consecutive page renders is served from
here for an hour; the category list for a day).

MemoryCacheProvider is dict-based: fast but not shared across processes.
For multi-worker deployments, swap in an adapter implementing
ICacheProvider without changing any lookup logic.
"""

from src.providers.cache.memory_cache import MemoryCacheProvider

__all__ = ["MemoryCacheProvider"]
