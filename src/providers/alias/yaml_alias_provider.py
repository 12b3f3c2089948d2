"""Alias provider reading the site industries table from YAML.

The site configuration lists industries keyed by slug, each with a set of
columns.  The ``api_cat`` column names the stock photo category to use for
that industry::

    industries:
      dentist:
        name: Dentist
        api_cat: health-teeth
      florist:
        name: Florist
        api_cat: flowers

Industries without an ``api_cat`` are simply not aliased; lookups for them
fall through to the provider category list.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from src.interfaces.category_alias_provider import ICategoryAliasProvider
from src.utils.errors import ConfigurationError
from src.utils.logging import get_logger

_PROVIDER_NAME = "industry_yaml"
_ALIAS_COLUMN = "api_cat"


class YamlCategoryAliasProvider(ICategoryAliasProvider):
    """Load ``industry slug -> api_cat`` aliases from a YAML file.

    Parameters
    ----------
    path:
        Location of the industries file.  A missing file yields an empty
        alias table; a file that cannot be parsed raises
        :class:`ConfigurationError`.
    column:
        Which per-industry column holds the provider category id.
    """

    def __init__(self, path: str | Path, column: str = _ALIAS_COLUMN) -> None:
        self._path = Path(path)
        self._column = column
        self._logger = get_logger(__name__)
        self._aliases = self._load()

    def get_api_cat(self, label: str) -> str | None:
        return self._aliases.get(label)

    def __len__(self) -> int:
        return len(self._aliases)

    # -- Private helpers -------------------------------------------------------

    def _load(self) -> dict[str, str]:
        if not self._path.exists():
            self._logger.warning("industry_aliases_missing", path=str(self._path))
            return {}

        try:
            with open(self._path, encoding="utf-8") as f:
                raw = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigurationError(
                message=f"Could not read industry aliases from {self._path}: {exc}",
                provider_name=_PROVIDER_NAME,
            ) from exc

        industries = raw.get("industries", {}) if isinstance(raw, dict) else None
        if not isinstance(industries, dict):
            raise ConfigurationError(
                message=f"{self._path} has no 'industries' mapping",
                provider_name=_PROVIDER_NAME,
            )

        aliases = self._extract_column(industries)
        self._logger.info(
            "industry_aliases_loaded",
            path=str(self._path),
            industries=len(industries),
            aliases=len(aliases),
        )
        return aliases

    def _extract_column(self, industries: dict[str, Any]) -> dict[str, str]:
        aliases: dict[str, str] = {}
        for slug, columns in industries.items():
            if not isinstance(columns, dict):
                continue
            value = columns.get(self._column)
            if value:
                aliases[str(slug)] = str(value)
        return aliases
