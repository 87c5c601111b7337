"""
Bar catalog adapters.

Implementations of BarCatalogPort: an in-memory catalog for tests and
seeded data, and a YAML-file catalog that validates every record on load.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from barguide.domain.entities import BarContent

logger = logging.getLogger(__name__)


class InMemoryBarCatalog:
    """Bar catalog backed by a dict keyed by bar id."""

    def __init__(self, bars: Iterable[BarContent] = ()) -> None:
        self._bars: dict[str, BarContent] = {}
        for bar in bars:
            self.add(bar)

    def add(self, bar: BarContent) -> None:
        """Add a bar. Raises ValueError on a duplicate id."""
        if bar.id in self._bars:
            raise ValueError(f"Duplicate bar id: {bar.id}")
        self._bars[bar.id] = bar

    def get_bar(self, bar_id: str) -> BarContent | None:
        return self._bars.get(bar_id)

    def list_ids(self) -> list[str]:
        return list(self._bars)

    def __len__(self) -> int:
        return len(self._bars)


class YamlBarCatalog(InMemoryBarCatalog):
    """
    Bar catalog loaded from a YAML file.

    Expected shape:

        bars:
          - id: the_alchemist
            name: The Alchemist
            hero: {image: ...}
            quickInfo: {...}

    Field names may be camelCase (as stored) or snake_case.
    """

    @classmethod
    def from_records(cls, records: list[dict[str, Any]]) -> YamlBarCatalog:
        """
        Validate raw records into a catalog.

        Raises:
            ValueError: If a record is invalid or an id repeats
        """
        catalog = cls()
        for index, record in enumerate(records):
            try:
                bar = BarContent.model_validate(record)
            except ValidationError as e:
                raise ValueError(f"Invalid bar record at index {index}:\n{e}") from e
            catalog.add(bar)
        return catalog

    @classmethod
    def from_path(cls, path: Path) -> YamlBarCatalog:
        """
        Load bars from a YAML file.

        Raises:
            FileNotFoundError: If the file is missing
            ValueError: If the YAML or any record is invalid
        """
        if not path.exists():
            raise FileNotFoundError(f"Bar catalog not found at: {path}")

        with open(path) as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML syntax in bar catalog: {e}") from e

        if not isinstance(data, dict):
            raise ValueError(f"Bar catalog {path} must contain a 'bars' list")

        records = data.get("bars")
        if not isinstance(records, list):
            raise ValueError(f"Bar catalog {path} must contain a 'bars' list")

        catalog = cls.from_records(records)
        logger.info("Loaded %d bars from %s", len(catalog), path)
        return catalog
