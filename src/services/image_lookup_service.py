"""Cache-first stock photo lookup by site category label.

Resolves a site label to a provider category id (alias table first, then
the provider's own category list), serves image listings from cache when
it can, and otherwise fetches them, walking up to the parent category
while a category has no photos of its own.

Every remote or cache failure degrades to an empty image list; nothing is
raised to the caller of :meth:`ImageLookupService.get_images`.
"""

from __future__ import annotations

import random
from collections.abc import Mapping
from typing import Any

import structlog

from src.interfaces.cache_provider import ICacheProvider
from src.interfaces.category_alias_provider import ICategoryAliasProvider
from src.interfaces.stock_photo_provider import IStockPhotoProvider
from src.models.result import FetchResult
from src.models.stock_photo import ImageRecord, ProviderCategory
from src.utils.errors import CategoryHierarchyError
from src.utils.logging import get_logger

_IMAGE_CACHE_PREFIX = "wpem_image_api_"
_CATEGORY_CACHE_KEY = "wpem_image_api_d3_categories"
_IMAGE_CACHE_TTL_SECONDS = 3600  # 1 hour
_CATEGORY_CACHE_TTL_SECONDS = 86400  # 1 day
_MAX_PARENT_HOPS = 10


class ImageLookupService:
    """Return shuffled stock photo records for a site category label.

    All collaborators are injected so tests can hand in in-memory fakes.

    Parameters
    ----------
    provider:
        Remote stock photo catalogue.
    cache:
        Key/value store with per-entry TTL.
    aliases:
        Site label to provider id table.
    image_cache_prefix:
        Namespace prepended to the category id for image cache keys.
    category_cache_key:
        Fixed cache key for the provider category list.
    image_cache_ttl / category_cache_ttl:
        Lifetimes, in seconds, of the two kinds of cache entries.
    max_parent_hops:
        How many times a lookup may move up to a parent category before
        the hierarchy is treated as malformed.
    rng:
        Random source used to shuffle fresh listings.
    """

    def __init__(
        self,
        provider: IStockPhotoProvider,
        cache: ICacheProvider,
        aliases: ICategoryAliasProvider,
        image_cache_prefix: str = _IMAGE_CACHE_PREFIX,
        category_cache_key: str = _CATEGORY_CACHE_KEY,
        image_cache_ttl: int = _IMAGE_CACHE_TTL_SECONDS,
        category_cache_ttl: int = _CATEGORY_CACHE_TTL_SECONDS,
        max_parent_hops: int = _MAX_PARENT_HOPS,
        rng: random.Random | None = None,
    ) -> None:
        self._provider = provider
        self._cache = cache
        self._aliases = aliases
        self._image_cache_prefix = image_cache_prefix
        self._category_cache_key = category_cache_key
        self._image_cache_ttl = image_cache_ttl
        self._category_cache_ttl = category_cache_ttl
        self._max_parent_hops = max_parent_hops
        self._rng = rng or random.Random()
        self._logger: structlog.BoundLogger = get_logger(__name__)

    # -- Public API -----------------------------------------------------------

    def get_images(self, label: str) -> list[ImageRecord]:
        """Return the image records for *label*, shuffled.

        Cached listings keep the order they were stored in; they were
        shuffled once, when they were fetched.  The caller always gets its
        own copy, so mutating the result never touches the cache.
        """
        category_id = self.resolve_category(label)
        if category_id is None:
            self._logger.info("image_lookup_unknown_category", label=label)
            return []

        cache_key = self.image_cache_key(category_id)
        cached = self._cache_get(cache_key)
        if cached is not None:
            return list(cached)

        result = self.fetch_images_with_fallback(category_id)
        if not result.ok:
            self._logger.warning(
                "image_lookup_failed",
                label=label,
                category_id=category_id,
                error=str(result.error),
            )
            return []

        images = list(result.value or [])
        self._rng.shuffle(images)
        self._cache_set(cache_key, list(images), self._image_cache_ttl)

        self._logger.debug(
            "image_lookup_fetched",
            label=label,
            category_id=category_id,
            image_count=len(images),
        )
        return images

    def resolve_category(self, label: str) -> str | None:
        """Map a site label to a provider category id.

        The alias table is consulted first and never costs a network call.
        Otherwise *label* is accepted as-is if the provider lists a category
        with that id.
        """
        aliased = self._aliases.get_api_cat(label)
        if aliased:
            return aliased

        categories = self.get_provider_categories()
        if not categories.ok:
            self._logger.warning(
                "category_resolution_failed",
                label=label,
                error=str(categories.error),
            )
            return None

        if isinstance(categories.value, Mapping) and label in categories.value:
            return label
        return None

    def get_provider_categories(self) -> FetchResult[Any]:
        """Return the provider category list keyed by category id.

        A successful list is cached for a day.  A failed fetch is not
        cached.  A body that is not a JSON array is handed back unchanged,
        uncached.
        """
        cached = self._cache_get(self._category_cache_key)
        if cached is not None:
            return FetchResult.success(cached)

        raw = self._provider.fetch_categories()
        if not raw.ok:
            return raw

        if not isinstance(raw.value, list):
            self._logger.warning(
                "category_list_unexpected_shape",
                value_type=type(raw.value).__name__,
            )
            return raw

        categories = self._index_categories(raw.value)
        self._cache_set(self._category_cache_key, categories, self._category_cache_ttl)
        self._logger.info("category_list_fetched", category_count=len(categories))
        return FetchResult.success(categories)

    def fetch_images_with_fallback(self, category_id: str) -> FetchResult[list[ImageRecord]]:
        """Fetch images for *category_id*, falling back to parent categories.

        Stops at the first category with a positive count.  A category with
        no photos and no parent yields an empty, successful result.
        """
        visited: list[str] = []
        current = category_id

        while True:
            if current in visited:
                return self._hierarchy_failure(
                    f"Category '{current}' appears twice in the parent chain {visited}"
                )
            if len(visited) > self._max_parent_hops:
                return self._hierarchy_failure(
                    f"Parent chain from '{category_id}' exceeds {self._max_parent_hops} hops"
                )
            visited.append(current)

            result = self._provider.fetch_image_page(current)
            if not result.ok:
                return FetchResult.failure(result.error)

            page = result.value
            if page.count > 0:
                return FetchResult.success(list(page.results))

            if not page.parent_category:
                return FetchResult.success([])

            self._logger.debug(
                "category_fallback_to_parent",
                category_id=current,
                parent_category=page.parent_category,
            )
            current = page.parent_category

    def image_cache_key(self, category_id: str) -> str:
        """Cache key for the image listing of *category_id*."""
        return f"{self._image_cache_prefix}{category_id}"

    def close(self) -> None:
        """Release the provider's network resources."""
        self._provider.close()

    def __enter__(self) -> ImageLookupService:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # -- Private helpers ------------------------------------------------------

    def _index_categories(self, raw: list[Any]) -> dict[str, ProviderCategory]:
        categories: dict[str, ProviderCategory] = {}
        for entry in raw:
            try:
                category = ProviderCategory.model_validate(entry)
            except ValueError as exc:
                self._logger.warning("category_entry_skipped", error=str(exc))
                continue
            categories[category.id] = category
        return categories

    def _hierarchy_failure(self, message: str) -> FetchResult[list[ImageRecord]]:
        return FetchResult.failure(
            CategoryHierarchyError(
                message=message,
                provider_name=self._provider.get_provider_name(),
            )
        )

    # -- Cache helpers --------------------------------------------------------

    def _cache_get(self, key: str) -> Any | None:
        """Read *key*, treating any store error as a miss."""
        try:
            return self._cache.get(key)
        except Exception as exc:
            self._logger.debug("cache_read_failed", key=key, error=str(exc))
            return None

    def _cache_set(self, key: str, value: Any, ttl: int) -> None:
        """Write *key*, ignoring store errors."""
        try:
            self._cache.set(key, value, ttl=ttl)
        except Exception as exc:
            self._logger.debug("cache_write_failed", key=key, error=str(exc))
