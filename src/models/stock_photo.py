"""Pydantic models for the stock photo API payloads.

Only the fields this service reads are modelled.  Image records themselves
are opaque values that pass straight through to the caller.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Image records are not interpreted, only shuffled, cached and returned.
ImageRecord = Any


class ProviderCategory(BaseModel):
    """One entry of the provider's category list.

    The wire format names the identifier ``str_id``; it is exposed here as
    ``id`` and accepted under either name.  Only the id is required: a
    category with a missing or garbled ``display_name`` or ``popularity``
    is still a category, and those fields come through as ``None``.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(alias="str_id", min_length=1)
    display_name: str | None = None
    popularity: float | None = None

    @field_validator("id", "display_name", mode="before")
    @classmethod
    def _stringify(cls, value: Any) -> Any:
        if value is None or isinstance(value, str):
            return value
        return str(value)

    @field_validator("popularity", mode="before")
    @classmethod
    def _lenient_number(cls, value: Any) -> float | None:
        try:
            return float(value)
        except (TypeError, ValueError):
            return None


class ImageListingPage(BaseModel):
    """Body of ``stock_photos/category/<id>/``.

    ``parent_category`` is the id to fall back to when ``count`` is zero.
    Empty strings are normalised to ``None`` so callers only need a single
    truthiness check.
    """

    model_config = ConfigDict(frozen=True)

    count: int
    results: list[ImageRecord] = Field(default_factory=list)
    parent_category: str | None = None

    @field_validator("parent_category", mode="before")
    @classmethod
    def _normalise_parent(cls, value: Any) -> str | None:
        if value is None or value == "":
            return None
        return str(value)
