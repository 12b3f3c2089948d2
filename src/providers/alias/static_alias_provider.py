"""Alias provider backed by an in-memory mapping."""

from __future__ import annotations

from collections.abc import Mapping

from src.interfaces.category_alias_provider import ICategoryAliasProvider


class StaticCategoryAliasProvider(ICategoryAliasProvider):
    """Serve aliases from a fixed ``label -> provider id`` mapping.

    The mapping is copied on construction so later changes by the caller
    do not leak in.
    """

    def __init__(self, aliases: Mapping[str, str] | None = None) -> None:
        self._aliases: dict[str, str] = dict(aliases or {})

    def get_api_cat(self, label: str) -> str | None:
        return self._aliases.get(label)

    def __len__(self) -> int:
        return len(self._aliases)
