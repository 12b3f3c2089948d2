"""Success-or-failure wrapper returned by every remote fetch.

A plain ``False`` cannot tell "the API is down" apart from "the API said
there is nothing here", so fetches return a :class:`FetchResult` instead.
A failed result carries the :class:`~src.utils.errors.StockPhotoError`
that explains why; a successful one carries the value, which may itself be
empty.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from src.utils.errors import StockPhotoError

T = TypeVar("T")


@dataclass(frozen=True)
class FetchResult(Generic[T]):
    """Outcome of one remote call.

    Attributes
    ----------
    value:
        The fetched value.  Only meaningful when ``ok`` is ``True``.
    error:
        The failure cause.  ``None`` on success.
    """

    value: T | None = None
    error: StockPhotoError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> FetchResult[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, error: StockPhotoError) -> FetchResult[T]:
        return cls(error=error)
