"""Utility modules.

- **errors** -- Exception hierarchy rooted at StockPhotoError; failures
  travel inside FetchResult values rather than being raised to callers.
- **logging** -- structlog setup with a dual-renderer pattern: coloured
  console output in development, structured JSON in production.
"""

from src.utils.errors import (
    CategoryHierarchyError,
    ConfigurationError,
    MalformedResponseError,
    ProviderUnavailableError,
    StockPhotoError,
)
from src.utils.logging import configure_logging, get_logger

__all__ = [
    "CategoryHierarchyError",
    "ConfigurationError",
    "MalformedResponseError",
    "ProviderUnavailableError",
    "StockPhotoError",
    "configure_logging",
    "get_logger",
]
