"""Shared pytest fixtures for the stock photo lookup test suite."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from src.config.settings import StockPhotoAPIConfig
from src.providers.alias.static_alias_provider import StaticCategoryAliasProvider
from src.providers.cache.memory_cache import MemoryCacheProvider
from tests.fakes import FakeClock


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def api_config() -> StockPhotoAPIConfig:
    return StockPhotoAPIConfig(
        base_url="https://photos.example/api/v1/",
        image_endpoint="stock_photos/",
        category_endpoint="categories/",
        token="s3cret",
        timeout=5.0,
    )


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def cache(clock: FakeClock) -> MemoryCacheProvider:
    return MemoryCacheProvider(max_size=100, ttl=3600, timer=clock)


@pytest.fixture
def aliases() -> StaticCategoryAliasProvider:
    return StaticCategoryAliasProvider({"dentist": "health-teeth", "florist": "flowers"})


@pytest.fixture
def raw_categories() -> list[dict[str, Any]]:
    """Category list body as sent by the API."""
    return [
        {"str_id": "health-teeth", "display_name": "Teeth", "popularity": 12},
        {"str_id": "health", "display_name": "Health", "popularity": 80},
        {"str_id": "flowers", "display_name": "Flowers", "popularity": 40.5},
        {"str_id": "bakery", "display_name": "Bakery", "popularity": 7},
    ]
