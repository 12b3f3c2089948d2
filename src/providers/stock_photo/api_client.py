"""Stock photo API client implementing IStockPhotoProvider.

Issues blocking GET requests through an injected ``httpx.Client``.  Every
request carries ``Accept: application/json`` and the static
``Authorization: Token <secret>`` header.  Nothing is retried: transport
errors, error statuses and undecodable bodies come back as failed
:class:`FetchResult` values rather than exceptions.
"""

from __future__ import annotations

from typing import Any

import httpx
from pydantic import ValidationError

from src.config.settings import StockPhotoAPIConfig
from src.interfaces.stock_photo_provider import IStockPhotoProvider
from src.models.result import FetchResult
from src.models.stock_photo import ImageListingPage
from src.utils.errors import MalformedResponseError, ProviderUnavailableError
from src.utils.logging import get_logger

_PROVIDER_NAME = "stock_photo_api"


class StockPhotoAPIClient(IStockPhotoProvider):
    """Thin reader for the category list and per-category image listings.

    Parameters
    ----------
    http_client:
        Injected ``httpx.Client`` for testability and connection pooling.
    config:
        Endpoints, token and timeout.
    """

    def __init__(self, http_client: httpx.Client, config: StockPhotoAPIConfig) -> None:
        self._http = http_client
        self._config = config
        self._logger = get_logger(__name__)

    # ------------------------------------------------------------------
    # IStockPhotoProvider implementation
    # ------------------------------------------------------------------

    def fetch_categories(self) -> FetchResult[Any]:
        """GET the category list and return its decoded body untouched."""
        return self._fetch_json(self._config.category_url)

    def fetch_image_page(self, category_id: str) -> FetchResult[ImageListingPage]:
        """GET ``stock_photos/category/<id>/`` and validate the listing."""
        url = self._config.image_category_url(category_id)
        result = self._fetch_json(url)
        if not result.ok:
            return FetchResult.failure(result.error)

        try:
            page = ImageListingPage.model_validate(result.value)
        except ValidationError as exc:
            self._logger.warning(
                "stock_photo_listing_invalid",
                category_id=category_id,
                errors=exc.error_count(),
            )
            return FetchResult.failure(
                MalformedResponseError(
                    message=f"Unexpected image listing for category '{category_id}'",
                    provider_name=_PROVIDER_NAME,
                )
            )

        self._logger.debug(
            "stock_photo_listing_fetched",
            category_id=category_id,
            count=page.count,
            parent_category=page.parent_category,
        )
        return FetchResult.success(page)

    def get_provider_name(self) -> str:
        return _PROVIDER_NAME

    def close(self) -> None:
        """Close the underlying ``httpx.Client``."""
        self._http.close()

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _headers(self) -> dict[str, str]:
        return {
            "Accept": "application/json",
            "Authorization": f"Token {self._config.token}",
        }

    def _fetch_json(self, url: str) -> FetchResult[Any]:
        try:
            response = self._http.get(url, headers=self._headers(), timeout=self._config.timeout)
            response.raise_for_status()
        except httpx.HTTPError as exc:
            self._logger.warning("stock_photo_request_failed", url=url, error=str(exc))
            return FetchResult.failure(
                ProviderUnavailableError(
                    message=f"GET {url} failed: {exc}",
                    provider_name=_PROVIDER_NAME,
                )
            )

        try:
            return FetchResult.success(response.json())
        except ValueError as exc:
            self._logger.warning(
                "stock_photo_response_not_json",
                url=url,
                status=response.status_code,
            )
            return FetchResult.failure(
                MalformedResponseError(
                    message=f"GET {url} returned a non-JSON body: {exc}",
                    provider_name=_PROVIDER_NAME,
                )
            )
