"""Exception hierarchy for the stock photo lookup service.

All application exceptions inherit from :class:`StockPhotoError`, which
carries an optional ``provider_name`` so log lines can identify which
external collaborator (e.g. "stock_photo_api", "industry_yaml") failed.

    StockPhotoError  (base)
    +-- ProviderUnavailableError  (transport failure, non-2xx status)
    +-- MalformedResponseError    (non-JSON body, unexpected payload shape)
    +-- CategoryHierarchyError    (parent-category chain too deep or cyclic)
    +-- ConfigurationError        (startup / missing or unreadable config)

Only :class:`ConfigurationError` is raised out of constructors.  The others
travel inside a failed :class:`~src.models.result.FetchResult` so that the
lookup service can degrade to an empty image list instead of raising.
"""


class StockPhotoError(Exception):
    """Base exception for all stock photo lookup errors.

    The ``__str__`` method prefixes the provider name in brackets for
    structured log output, e.g. ``[stock_photo_api] Request timed out``.
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        provider_name: str | None = None,
    ) -> None:
        self._message = message
        self._provider_name = provider_name
        super().__init__(self._message)

    @property
    def message(self) -> str:
        return self._message

    @property
    def provider_name(self) -> str | None:
        return self._provider_name

    def __str__(self) -> str:
        if self._provider_name:
            return f"[{self._provider_name}] {self._message}"
        return self._message


class ProviderUnavailableError(StockPhotoError):
    """The image API could not be reached or answered with an error status."""

    def __init__(
        self,
        message: str = "External service is unavailable",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)


class MalformedResponseError(StockPhotoError):
    """The image API answered, but the body was not the expected JSON."""

    def __init__(
        self,
        message: str = "Malformed response from external service",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)


class CategoryHierarchyError(StockPhotoError):
    """Walking up the parent categories exceeded the hop limit or hit a cycle."""

    def __init__(
        self,
        message: str = "Category hierarchy is too deep or cyclic",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)


class ConfigurationError(StockPhotoError):
    """Raised when configuration is invalid or missing at startup."""

    def __init__(
        self,
        message: str = "Invalid or missing configuration",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)
