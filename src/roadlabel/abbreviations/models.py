"""
Data models for abbreviation tables.
"""

from enum import Enum

from pydantic import BaseModel, Field, field_validator


class AbbreviationCategory(Enum):
    """Kinds of words that can be abbreviated.

    The value is the category's key in the table source.
    """

    ABBREVIATION = "abbreviations"
    DIRECTION = "directions"
    CLASSIFICATION = "classifications"


# Order in which categories are consulted for a single word; first hit wins.
CATEGORY_PRECEDENCE: tuple[AbbreviationCategory, ...] = (
    AbbreviationCategory.ABBREVIATION,
    AbbreviationCategory.DIRECTION,
    AbbreviationCategory.CLASSIFICATION,
)


class AbbreviationTableData(BaseModel):
    """Validated contents of an abbreviation table source.

    Expected source format (YAML or any mapping):
        abbreviations:
          saint: St
        directions:
          northwest: NW
        classifications:
          boulevard: Blvd

    Attributes:
        abbreviations: Ordinary words with common abbreviations
        directions: Directional words (north, southeast, ...)
        classifications: Road name suffixes (street, boulevard, ...)
    """
    abbreviations: dict[str, str] = Field(..., description="Common word abbreviations")
    directions: dict[str, str] = Field(..., description="Direction abbreviations")
    classifications: dict[str, str] = Field(..., description="Road classification abbreviations")

    @field_validator("abbreviations", "directions", "classifications", mode="after")
    @classmethod
    def _lowercase_keys(cls, value: dict[str, str]) -> dict[str, str]:
        normalized: dict[str, str] = {}
        for word, abbreviation in value.items():
            key = word.strip().lower()
            if not key:
                raise ValueError("abbreviation keys must be non-empty words")
            if any(c.isspace() for c in key):
                raise ValueError(f"abbreviation key '{word}' must be a single word")
            if key in normalized:
                raise ValueError(f"duplicate abbreviation key '{word}' (differs only in case or spacing)")
            normalized[key] = abbreviation
        return normalized

    def entries(self, category: AbbreviationCategory) -> dict[str, str]:
        """Return the word -> abbreviation mapping for a category."""
        return getattr(self, category.value)
