"""Composition root for the stock photo lookup service.

Loads configuration (``config/config.yaml`` layered under ``.env`` and the
environment), configures structured logging, and wires the httpx client,
API client, cache and alias table into a ready-to-use
:class:`ImageLookupService`.  Callers that want their own collaborators (a
shared cache, a different alias source) can pass them in.
"""

from __future__ import annotations

import httpx

from src.config.loader import load_config
from src.config.settings import Settings, StockPhotoAPIConfig
from src.interfaces.cache_provider import ICacheProvider
from src.interfaces.category_alias_provider import ICategoryAliasProvider
from src.providers.alias.yaml_alias_provider import YamlCategoryAliasProvider
from src.providers.cache.memory_cache import MemoryCacheProvider
from src.providers.stock_photo.api_client import StockPhotoAPIClient
from src.services.image_lookup_service import ImageLookupService
from src.utils.logging import configure_logging, get_logger

logger = get_logger(__name__)

_CONFIG_PATH = "config/config.yaml"


def build_image_lookup_service(
    custom_settings: Settings | None = None,
    *,
    config_path: str = _CONFIG_PATH,
    cache: ICacheProvider | None = None,
    aliases: ICategoryAliasProvider | None = None,
    http_client: httpx.Client | None = None,
) -> ImageLookupService:
    """Construct an :class:`ImageLookupService` with injected dependencies.

    Parameters
    ----------
    custom_settings:
        Application settings.  A fresh ``Settings()`` if not provided.
    config_path:
        YAML file layered between built-in defaults and explicit settings.
    cache:
        Cache store.  Defaults to a :class:`MemoryCacheProvider`.
    aliases:
        Alias table.  Defaults to the industries YAML named in the config.
    http_client:
        Pre-built ``httpx.Client``.  The service closes it on ``close()``.
    """
    s = custom_settings or Settings()
    config = load_config(config_path, settings=s)
    configure_logging(log_level=config["logging"]["level"], app_env=config["app"]["env"])

    api_config = StockPhotoAPIConfig.from_config(config["stock_photo"], token=s.stock_photo_token)
    if not api_config.token:
        logger.warning("stock_photo_token_missing", base_url=api_config.base_url)

    http_client = http_client or httpx.Client(timeout=api_config.timeout)
    provider = StockPhotoAPIClient(http_client=http_client, config=api_config)

    cache_config = config["cache"]
    lookup_config = config["lookup"]
    cache = cache or MemoryCacheProvider(
        max_size=cache_config["max_size"],
        ttl=cache_config["image_ttl"],
    )
    aliases = aliases or YamlCategoryAliasProvider(lookup_config["category_aliases_path"])

    service = ImageLookupService(
        provider=provider,
        cache=cache,
        aliases=aliases,
        image_cache_prefix=cache_config["image_prefix"],
        category_cache_key=cache_config["category_key"],
        image_cache_ttl=cache_config["image_ttl"],
        category_cache_ttl=cache_config["category_ttl"],
        max_parent_hops=lookup_config["max_parent_hops"],
    )
    logger.info(
        "image_lookup_service_built",
        base_url=api_config.base_url,
        config_path=config_path,
        max_parent_hops=lookup_config["max_parent_hops"],
    )
    return service
