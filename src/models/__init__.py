"""Domain models, re-exported for ``from src.models import ...``.

    - result.py       - FetchResult, the success-or-failure wrapper
    - stock_photo.py  - API payload models (ProviderCategory, ImageListingPage)
"""

from __future__ import annotations

from src.models.result import FetchResult
from src.models.stock_photo import ImageListingPage, ImageRecord, ProviderCategory

__all__ = [
    "FetchResult",
    "ImageListingPage",
    "ImageRecord",
    "ProviderCategory",
]
