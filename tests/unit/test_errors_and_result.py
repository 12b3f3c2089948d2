"""Unit tests for the error hierarchy and FetchResult."""

from __future__ import annotations

import pytest

from src.models.result import FetchResult
from src.utils.errors import (
    CategoryHierarchyError,
    ConfigurationError,
    MalformedResponseError,
    ProviderUnavailableError,
    StockPhotoError,
)


class TestErrors:
    @pytest.mark.parametrize(
        "cls",
        [
            ProviderUnavailableError,
            MalformedResponseError,
            CategoryHierarchyError,
            ConfigurationError,
        ],
    )
    def test_subclasses_share_base(self, cls: type[StockPhotoError]) -> None:
        error = cls()
        assert isinstance(error, StockPhotoError)
        assert error.message
        assert error.provider_name is None

    def test_str_prefixes_provider(self) -> None:
        error = ProviderUnavailableError("timed out", provider_name="stock_photo_api")
        assert str(error) == "[stock_photo_api] timed out"

    def test_str_without_provider(self) -> None:
        assert str(MalformedResponseError("bad body")) == "bad body"


class TestFetchResult:
    def test_success_with_empty_value_is_ok(self) -> None:
        result: FetchResult[list[int]] = FetchResult.success([])
        assert result.ok
        assert result.value == []
        assert result.error is None

    def test_failure_carries_error(self) -> None:
        error = ProviderUnavailableError("down")
        result: FetchResult[list[int]] = FetchResult.failure(error)
        assert not result.ok
        assert result.error is error
        assert result.value is None
