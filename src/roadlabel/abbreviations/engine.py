"""
Word-by-word abbreviation of plain and styled labels.
"""

import logging
import re
from dataclasses import dataclass
from typing import Iterable, Iterator

from ..styled import StyledTextLike
from .models import CATEGORY_PRECEDENCE, AbbreviationCategory
from .table import AbbreviationTable

logger = logging.getLogger("roadlabel")

_WORD_RE = re.compile(r"\S+")


@dataclass(frozen=True)
class Word:
    """A maximal run of non-whitespace characters and its span in the source.

    Attributes:
        text: The word as it appears in the source
        start: Offset of the first character
        end: Offset one past the last character
    """
    text: str
    start: int
    end: int


def split_words(text: object) -> Iterator[Word]:
    """Yield the whitespace-delimited words of ``text`` in document order.

    Anything other than a string has no words.
    """
    if not isinstance(text, str):
        return
    for match in _WORD_RE.finditer(text):
        yield Word(match.group(), match.start(), match.end())


def _enabled(categories: Iterable[AbbreviationCategory]) -> tuple[AbbreviationCategory, ...]:
    wanted = frozenset(categories)
    return tuple(category for category in CATEGORY_PRECEDENCE if category in wanted)


def _replacement(
    word: str,
    enabled: tuple[AbbreviationCategory, ...],
    table: AbbreviationTable,
) -> str | None:
    lowercase_word = word.lower()
    for category in enabled:
        abbreviation = table.lookup(category, lowercase_word)
        if abbreviation is not None:
            return abbreviation
    return None


def abbreviate(
    text: str | None,
    categories: Iterable[AbbreviationCategory],
    table: AbbreviationTable,
) -> str:
    """Return a copy of ``text`` with words abbreviated by ``categories``.

    Each word is looked up in the enabled categories in the fixed order
    abbreviations, directions, classifications; the first hit replaces it.
    Unmatched words are kept exactly as written. Words are rejoined with
    single spaces.

    Args:
        text: Label to abbreviate; None, blank or non-string input yields ""
        categories: Categories enabled for this pass
        table: Abbreviation table to consult

    Returns:
        The abbreviated label

    Example:
        >>> abbreviate("Northwest Boulevard", {AbbreviationCategory.CLASSIFICATION}, table)
        'Northwest Blvd'
    """
    enabled = _enabled(categories)
    words = [word.text for word in split_words(text)]
    if not words:
        return ""

    result: list[str] = []
    for word in words:
        replacement = _replacement(word, enabled, table) if enabled else None
        result.append(word if replacement is None else replacement)
    return " ".join(result)


def abbreviate_in_place(
    styled: StyledTextLike,
    categories: Iterable[AbbreviationCategory],
    table: AbbreviationTable,
) -> int:
    """Abbreviate the words of a styled label in place.

    Only the ranges of matched words are replaced, so whitespace and the
    styling of every other character are preserved. Words are replaced from
    last to first so that spans computed up front remain valid.

    Args:
        styled: Styled label to mutate; None or a value without text is left alone
        categories: Categories enabled for this pass
        table: Abbreviation table to consult

    Returns:
        Number of words replaced
    """
    enabled = _enabled(categories)
    if not enabled:
        return 0

    replacements: list[tuple[Word, str]] = []
    for word in split_words(getattr(styled, "text", None)):
        replacement = _replacement(word.text, enabled, table)
        if replacement is not None:
            replacements.append((word, replacement))

    for word, replacement in reversed(replacements):
        styled.replace(word.start, word.end, replacement)

    if replacements:
        logger.debug(
            f"Abbreviated {len(replacements)} word(s) in styled label "
            f"({', '.join(category.value for category in enabled)})"
        )
    return len(replacements)
