"""Abstract base class for stock photo API providers.

Defines the two remote reads the lookup service needs: the full category
list and a single page of images for one category.  Implementations never
raise for remote problems; they return a failed
:class:`~src.models.result.FetchResult` instead.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from src.models.result import FetchResult
from src.models.stock_photo import ImageListingPage


class IStockPhotoProvider(ABC):
    """Contract for a remote stock photo catalogue."""

    @abstractmethod
    def fetch_categories(self) -> FetchResult[Any]:
        """Fetch the raw category list.

        Returns
        -------
        FetchResult
            On success, the decoded JSON body exactly as the API sent it
            (normally a list of category objects).
        """

    @abstractmethod
    def fetch_image_page(self, category_id: str) -> FetchResult[ImageListingPage]:
        """Fetch the image listing for *category_id*.

        Parameters
        ----------
        category_id:
            A provider category id (``str_id``).
        """

    @abstractmethod
    def get_provider_name(self) -> str:
        """Return a short identifier used in logs and errors."""

    def close(self) -> None:
        """Release any network resources held by the provider."""
