"""
Minimal attributed text for abbreviating styled labels in place.

A styled label is a run-length list of text segments, each carrying a
dictionary of display attributes (font, color, ...). The abbreviation engine
only needs to read the plain text and replace character ranges, which is
captured by the ``StyledTextLike`` protocol so that a UI layer can plug in its
own representation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Protocol


class StyledTextLike(Protocol):
    """Protocol for mutable styled text, enabling other backends and fakes in tests."""

    @property
    def text(self) -> str:
        """Current plain text content."""
        ...

    def replace(self, start: int, end: int, value: str) -> None:
        """Replace characters in ``[start, end)`` with ``value``.

        Styling of characters outside the range must be left untouched.
        """
        ...


@dataclass(frozen=True)
class StyledRun:
    """A segment of text sharing one set of attributes.

    Attributes:
        text: Characters of the run
        attributes: Display attributes applied to every character in the run
    """
    text: str
    attributes: dict[str, Any] = field(default_factory=dict)


class StyledText:
    """Mutable text made of styled runs.

    Example:
        >>> label = StyledText([
        ...     StyledRun("Northwest ", {"weight": "bold"}),
        ...     StyledRun("Boulevard", {"weight": "regular"}),
        ... ])
        >>> label.replace(10, 19, "Blvd")
        >>> label.text
        'Northwest Blvd'
        >>> label.attributes_at(0)
        {'weight': 'bold'}
    """

    def __init__(self, runs: Iterable[StyledRun] = ()) -> None:
        self._runs: list[StyledRun] = _normalize(runs)

    @classmethod
    def plain(cls, text: str, **attributes: Any) -> StyledText:
        """Create styled text with a single run."""
        return cls([StyledRun(text, dict(attributes))])

    @property
    def text(self) -> str:
        return "".join(run.text for run in self._runs)

    @property
    def runs(self) -> list[StyledRun]:
        """Return copies of the runs; changing them does not restyle the label."""
        return [StyledRun(run.text, dict(run.attributes)) for run in self._runs]

    def __len__(self) -> int:
        return sum(len(run.text) for run in self._runs)

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return f"StyledText({self._runs!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StyledText):
            return NotImplemented
        return self._runs == other._runs

    def attributes_at(self, index: int) -> dict[str, Any]:
        """Return the attributes of the character at ``index``."""
        if index < 0:
            index += len(self)
        offset = 0
        for run in self._runs:
            if offset <= index < offset + len(run.text):
                return dict(run.attributes)
            offset += len(run.text)
        raise IndexError(f"character index {index} out of range")

    def replace(self, start: int, end: int, value: str) -> None:
        """Replace characters in ``[start, end)`` with ``value``.

        The inserted characters take the attributes of the character at
        ``start``; for an empty range they extend the preceding run.

        Raises:
            IndexError: If the range does not lie within the text
        """
        length = len(self)
        if not 0 <= start <= end <= length:
            raise IndexError(f"range [{start}, {end}) out of bounds for length {length}")

        inherited = self._inherited_attributes(start, end)
        before: list[StyledRun] = []
        after: list[StyledRun] = []
        offset = 0
        for run in self._runs:
            run_end = offset + len(run.text)
            if run_end <= start:
                before.append(run)
            elif offset >= end:
                after.append(run)
            else:
                if offset < start:
                    before.append(StyledRun(run.text[: start - offset], run.attributes))
                if run_end > end:
                    after.append(StyledRun(run.text[end - offset :], run.attributes))
            offset = run_end

        self._runs = _normalize([*before, StyledRun(value, inherited), *after])

    def _inherited_attributes(self, start: int, end: int) -> dict[str, Any]:
        if not self._runs:
            return {}
        if start < end:
            return self.attributes_at(start)
        if start > 0:
            return self.attributes_at(start - 1)
        return dict(self._runs[0].attributes)


def _normalize(runs: Iterable[StyledRun]) -> list[StyledRun]:
    # Drop empty runs, merge neighbours with equal attributes, own every attributes dict
    merged: list[StyledRun] = []
    for run in runs:
        if not run.text:
            continue
        if merged and merged[-1].attributes == run.attributes:
            merged[-1] = StyledRun(merged[-1].text + run.text, merged[-1].attributes)
        else:
            merged.append(StyledRun(run.text, dict(run.attributes)))
    return merged
