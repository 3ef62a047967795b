"""
Category-based word abbreviation for road and place labels.

Provides a read-only abbreviation table loaded once per process and a
substitution engine that rewrites plain or styled labels word by word.
"""

from .engine import Word, abbreviate, abbreviate_in_place, split_words
from .models import CATEGORY_PRECEDENCE, AbbreviationCategory, AbbreviationTableData
from .table import AbbreviationTable, AbbreviationTableError, load_default_table

__all__ = [
    "AbbreviationCategory",
    "AbbreviationTable",
    "AbbreviationTableData",
    "AbbreviationTableError",
    "CATEGORY_PRECEDENCE",
    "Word",
    "abbreviate",
    "abbreviate_in_place",
    "load_default_table",
    "split_words",
]
