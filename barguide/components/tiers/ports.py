"""
Bar tier component ports.

External interfaces for looking up bar records.
"""

from __future__ import annotations

from typing import Protocol

from barguide.domain.entities import BarContent


class BarCatalogPort(Protocol):
    """
    Port for bar record lookup.

    Implementations:
    - InMemoryBarCatalog: records held in a dict (tests, seeded data)
    - YamlBarCatalog: records loaded from a YAML file
    """

    def get_bar(self, bar_id: str) -> BarContent | None:
        """
        Look up a bar by id.

        Args:
            bar_id: Bar identifier

        Returns:
            The bar record, or None if unknown
        """
        ...

    def list_ids(self) -> list[str]:
        """Return all known bar ids."""
        ...
