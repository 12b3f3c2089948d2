"""Application settings loaded from environment variables via pydantic-settings.

Values are read from, in priority order:

  1. Environment variables, e.g. ``STOCK_PHOTO_TOKEN=abc123``
  2. A ``.env`` file in the working directory (local development)
  3. The defaults below

Field ``stock_photo_token`` maps to env var ``STOCK_PHOTO_TOKEN``; the
mapping is case-insensitive.  The ``.env`` file is never committed.
"""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import quote

from pydantic_settings import BaseSettings, SettingsConfigDict


@dataclass(frozen=True)
class StockPhotoAPIConfig:
    """Endpoint and credential details handed to the API client.

    Attributes
    ----------
    base_url:
        API root, with a trailing slash.
    image_endpoint:
        Path of the image listing resource, relative to ``base_url``.
    category_endpoint:
        Path of the category list resource, relative to ``base_url``.
    token:
        Static secret sent as ``Authorization: Token <token>``.
    timeout:
        Per-request timeout in seconds.
    """

    base_url: str
    image_endpoint: str
    category_endpoint: str
    token: str
    timeout: float = 30.0

    @classmethod
    def from_config(cls, section: dict, token: str) -> StockPhotoAPIConfig:
        """Build from the ``stock_photo`` section returned by ``load_config``."""
        return cls(
            base_url=section["base_url"],
            image_endpoint=section["image_endpoint"],
            category_endpoint=section["category_endpoint"],
            token=token,
            timeout=float(section["timeout"]),
        )

    @property
    def category_url(self) -> str:
        return self.base_url + self.category_endpoint

    def image_category_url(self, category_id: str) -> str:
        # Ids come from the provider (parent_category) as well as from us;
        # quote everything so an id can only ever name one path segment.
        segment = quote(category_id, safe="")
        return f"{self.base_url}{self.image_endpoint}category/{segment}/"


class Settings(BaseSettings):
    """Stock photo lookup settings.

    Environment variables override defaults. Loaded from .env file when present.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # === Stock photo API ===
    stock_photo_base_url: str = "https://d3.godaddy.com/api/v1/"
    stock_photo_image_endpoint: str = "stock_photos/"
    stock_photo_category_endpoint: str = "categories/"
    # Empty string = "not configured"; requests are still sent, unauthenticated.
    stock_photo_token: str = ""
    stock_photo_timeout: float = 30.0

    # === Caching ===
    image_cache_prefix: str = "wpem_image_api_"
    category_cache_key: str = "wpem_image_api_d3_categories"
    image_cache_ttl: int = 3600  # 1 hour
    category_cache_ttl: int = 86400  # 1 day; the category list changes rarely
    cache_max_size: int = 1000

    # === Lookup ===
    max_parent_hops: int = 10
    category_aliases_path: str = "config/industries.yaml"

    # === App Config ===
    app_env: str = "development"
    log_level: str = "INFO"

