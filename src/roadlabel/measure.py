"""
Text measurement interface used when fitting labels to bounds.

Rendering backends know how wide a string is in a given font; the fitting
controller only needs the rendered size, so measurement is injected through
the ``TextMeasurer`` protocol. ``MonospaceMeasurer`` is a font-free
implementation for tests and for callers without a rendering backend.
"""

from __future__ import annotations

from typing import NamedTuple, Protocol

from .abbreviations.engine import split_words
from .styled import StyledTextLike


class Size(NamedTuple):
    """Rendered size of a label."""

    width: float
    height: float


class TextMeasurer(Protocol):
    """Protocol for text measurement, enabling platform backends and fakes in tests."""

    def measure(self, text: str | StyledTextLike, max_width: float) -> Size:
        """Measure ``text`` laid out within ``max_width``.

        Height is unconstrained: text wider than ``max_width`` wraps onto
        additional lines. The font and style are the measurer's own state.

        Args:
            text: Plain or styled label
            max_width: Available width

        Returns:
            Width of the widest line and total height
        """
        ...


def plain_text(text: str | StyledTextLike | None) -> str:
    """Return the plain characters of a plain or styled label."""
    if isinstance(text, str):
        return text
    content = getattr(text, "text", None)
    return content if isinstance(content, str) else ""


class MonospaceMeasurer:
    """Measures text as if every character had the same advance.

    Words are wrapped greedily at the available width; a single word wider
    than the available width occupies a line of its own.

    Example:
        >>> measurer = MonospaceMeasurer(char_width=1.0, line_height=1.0)
        >>> measurer.measure("Northwest Boulevard", max_width=15)
        Size(width=9.0, height=2.0)
    """

    def __init__(self, char_width: float = 8.0, line_height: float = 16.0) -> None:
        if char_width <= 0 or line_height <= 0:
            raise ValueError("char_width and line_height must be positive")
        self.char_width = char_width
        self.line_height = line_height

    def __repr__(self) -> str:
        return f"MonospaceMeasurer(char_width={self.char_width}, line_height={self.line_height})"

    def measure(self, text: str | StyledTextLike, max_width: float) -> Size:
        lines: list[int] = []
        current = 0
        for word in split_words(plain_text(text)):
            length = len(word.text)
            if current and (current + 1 + length) * self.char_width <= max_width:
                current += 1 + length
                continue
            if current:
                lines.append(current)
            current = length
        if current:
            lines.append(current)

        if not lines:
            return Size(0.0, 0.0)
        return Size(max(lines) * self.char_width, len(lines) * self.line_height)
