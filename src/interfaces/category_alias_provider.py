"""Abstract base class for category alias lookups.

A site knows its categories by its own labels (industry slugs such as
``"dentist"``); the stock photo API knows them by its own ids (such as
``"health-teeth"``).  An alias provider maps the former to the latter.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class ICategoryAliasProvider(ABC):
    """Read-only mapping from a local category label to a provider id."""

    @abstractmethod
    def get_api_cat(self, label: str) -> str | None:
        """Return the provider category id aliased to *label*.

        Parameters
        ----------
        label:
            The site-specific category label.

        Returns
        -------
        str or None
            The provider category id, or ``None`` when *label* has no alias.
        """
