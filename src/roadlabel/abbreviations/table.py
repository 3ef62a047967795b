"""
Read-only abbreviation table with case-insensitive lookup.
"""

import logging
from collections.abc import Mapping
from importlib import resources
from pathlib import Path
from types import MappingProxyType
from typing import Any

import yaml
from pydantic import ValidationError

from .models import AbbreviationCategory, AbbreviationTableData

logger = logging.getLogger("roadlabel")

DEFAULT_TABLE_RESOURCE = "abbreviations.yaml"


class AbbreviationTableError(Exception):
    """Raised when an abbreviation table source cannot be loaded."""


class AbbreviationTable:
    """Immutable category -> word -> abbreviation lookup.

    A table is built once, typically at process startup, and then shared by
    reference with everything that abbreviates labels. It exposes no way to
    change its contents, so concurrent readers need no locking.

    Example:
        >>> table = AbbreviationTable.from_mapping({
        ...     "abbreviations": {"saint": "St"},
        ...     "directions": {"northwest": "NW"},
        ...     "classifications": {"boulevard": "Blvd"},
        ... })
        >>> table.lookup(AbbreviationCategory.CLASSIFICATION, "Boulevard")
        'Blvd'
        >>> table.lookup(AbbreviationCategory.DIRECTION, "Boulevard") is None
        True
    """

    __slots__ = ("_entries",)

    def __init__(self, data: AbbreviationTableData) -> None:
        entries = {
            category: MappingProxyType(dict(data.entries(category)))
            for category in AbbreviationCategory
        }
        object.__setattr__(self, "_entries", MappingProxyType(entries))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("AbbreviationTable is read-only")

    def __len__(self) -> int:
        return sum(len(words) for words in self._entries.values())

    def __repr__(self) -> str:
        counts = ", ".join(
            f"{category.value}={len(words)}" for category, words in self._entries.items()
        )
        return f"AbbreviationTable({counts})"

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "AbbreviationTable":
        """Build a table from a mapping with the three category keys.

        Unknown top-level keys are ignored with a warning.

        Raises:
            AbbreviationTableError: If a category is missing or holds
                anything other than word -> string entries
        """
        if not isinstance(mapping, Mapping):
            raise AbbreviationTableError(
                f"Abbreviation source must be a mapping, got {type(mapping).__name__}"
            )

        known = {category.value for category in AbbreviationCategory}
        extra = sorted(str(key) for key in mapping if key not in known)
        if extra:
            logger.warning(f"Ignoring unknown abbreviation categories: {', '.join(extra)}")

        try:
            data = AbbreviationTableData(**{key: mapping[key] for key in known if key in mapping})
        except ValidationError as exc:
            raise AbbreviationTableError(f"Invalid abbreviation table: {exc}") from exc

        return cls(data)

    @classmethod
    def load_yaml(cls, path: Path) -> "AbbreviationTable":
        """Load a table from a YAML file.

        Expected YAML format:
            abbreviations:
              saint: St
            directions:
              north: N
            classifications:
              street: St

        Raises:
            AbbreviationTableError: If the file cannot be read or parsed, or
                its contents are not a valid table
        """
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except OSError as exc:
            raise AbbreviationTableError(f"Cannot read abbreviation table {path}: {exc}") from exc
        except yaml.YAMLError as exc:
            raise AbbreviationTableError(f"Malformed abbreviation table {path}: {exc}") from exc

        if data is None:
            raise AbbreviationTableError(f"Abbreviation table {path} is empty")

        table = cls.from_mapping(data)
        logger.info(f"Loaded abbreviation table from {path} ({len(table)} entries)")
        return table

    def lookup(self, category: AbbreviationCategory, word: str) -> str | None:
        """Return the abbreviation for ``word`` in ``category``, or None.

        The word is lowercased before lookup; a miss is a normal outcome.
        """
        return self._entries[category].get(word.lower())

    def has(self, category: AbbreviationCategory, word: str) -> bool:
        """Return whether ``word`` has an entry in ``category``, ignoring case."""
        return word.lower() in self._entries[category]

    def entries(self, category: AbbreviationCategory) -> Mapping[str, str]:
        """Return a read-only view of one category's entries."""
        return self._entries[category]

    def categories(self) -> tuple[AbbreviationCategory, ...]:
        """Return the categories held by the table."""
        return tuple(self._entries)


def load_default_table(path: Path | None = None) -> AbbreviationTable:
    """Load the table at ``path``, or the table bundled with the package.

    Meant to be called once at startup; the result should be shared.

    Raises:
        AbbreviationTableError: If the table cannot be loaded
    """
    if path is not None:
        return AbbreviationTable.load_yaml(path)

    resource = resources.files("roadlabel.abbreviations") / "data" / DEFAULT_TABLE_RESOURCE
    with resources.as_file(resource) as bundled:
        return AbbreviationTable.load_yaml(bundled)
