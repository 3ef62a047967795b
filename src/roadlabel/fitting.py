"""
Abbreviate labels only as much as needed to fit a display area.

The controller escalates through three cumulative tiers of abbreviation,
re-measuring after each one:

1. road classifications (Boulevard -> Blvd)
2. directions (Northwest -> NW)
3. common words (Saint -> St)

and stops at the first tier whose result fits. After the last tier the
label is returned as is, even if it still overflows.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Union

from .abbreviations.engine import abbreviate, abbreviate_in_place
from .abbreviations.models import AbbreviationCategory
from .abbreviations.table import AbbreviationTable
from .measure import Size, TextMeasurer
from .styled import StyledTextLike

logger = logging.getLogger("roadlabel")

# Escalation order; each tier adds to the abbreviations already applied.
FIT_TIERS: tuple[AbbreviationCategory, ...] = (
    AbbreviationCategory.CLASSIFICATION,
    AbbreviationCategory.DIRECTION,
    AbbreviationCategory.ABBREVIATION,
)

MeasureFn = Callable[..., tuple[float, float]]
Measure = Union[TextMeasurer, MeasureFn]


class FitMode(Enum):
    """How the controller decides whether an abbreviated label fits."""

    REMEASURE = "remeasure"
    # Compatibility mode: only the original label is measured, so once it
    # overflows every tier is applied.
    LEGACY = "legacy"


@dataclass(frozen=True)
class Bounds:
    """Display area a label must fit into.

    Attributes:
        width: Available width; the label must be strictly narrower
        height: Available height; the label may be exactly this tall
    """
    width: float
    height: float

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(f"bounds must not be negative, got {self.width}x{self.height}")


@dataclass(frozen=True)
class FitResult:
    """Outcome of fitting a label.

    Attributes:
        text: Label after the applied tiers
        fitted: Whether ``text`` satisfies the bounds
        tiers_applied: Abbreviation tiers applied, in order
        size: Measured size of ``text``
    """
    text: str
    fitted: bool
    tiers_applied: tuple[AbbreviationCategory, ...]
    size: Size


def fits(size: tuple[float, float], bounds: Bounds) -> bool:
    """Return whether a measured size satisfies the bounds."""
    width, height = size
    return width < bounds.width and height <= bounds.height


def _as_bounds(bounds: Bounds | tuple[float, float]) -> Bounds:
    if isinstance(bounds, Bounds):
        return bounds
    return Bounds(*bounds)


def _measure_with(measure: Measure, bounds: Bounds) -> Callable[[object], Size]:
    """Adapt a measurer or a plain ``measure(text)`` callable to one signature."""
    if hasattr(measure, "measure"):
        return lambda value: Size(*measure.measure(value, bounds.width))
    if callable(measure):
        return lambda value: Size(*measure(value))
    raise TypeError(f"measure must be a TextMeasurer or callable, got {type(measure).__name__}")


def _escalate(
    measure_current: Callable[[], Size],
    apply_tier: Callable[[AbbreviationCategory], None],
    bounds: Bounds,
    mode: FitMode,
) -> tuple[list[AbbreviationCategory], Size | None]:
    """Run the tier escalation over a working value.

    Returns:
        Tiers applied, and the size of the working value if it was measured
        after the last change (None when the final tier was applied blind)
    """
    size = measure_current()
    if fits(size, bounds):
        return [], size

    applied: list[AbbreviationCategory] = []
    last = len(FIT_TIERS) - 1
    for index, category in enumerate(FIT_TIERS):
        apply_tier(category)
        applied.append(category)
        if index == last:
            break
        if mode is FitMode.REMEASURE:
            size = measure_current()
        if fits(size, bounds):
            logger.debug(f"Label fits after {category.value} tier: {size.width}x{size.height}")
            return applied, size

    logger.debug("Label abbreviated by every tier")
    return applied, None


def fit_label(
    text: str | None,
    bounds: Bounds | tuple[float, float],
    measure: Measure,
    table: AbbreviationTable,
    *,
    mode: FitMode = FitMode.REMEASURE,
) -> FitResult:
    """Abbreviate ``text`` only as much as needed to fit ``bounds``.

    Args:
        text: Label to fit; None or non-string input is treated as ""
        bounds: Display area, as ``Bounds`` or ``(width, height)``
        measure: ``TextMeasurer`` or ``measure(text) -> (width, height)``
        table: Abbreviation table to consult
        mode: ``FitMode.LEGACY`` reproduces measuring the original label only

    Returns:
        FitResult with the fitted label, its size and whether it fits
    """
    bounds = _as_bounds(bounds)
    measure_text = _measure_with(measure, bounds)
    working = text if isinstance(text, str) else ""

    def apply_tier(category: AbbreviationCategory) -> None:
        nonlocal working
        working = abbreviate(working, {category}, table)

    applied, size = _escalate(lambda: measure_text(working), apply_tier, bounds, mode)
    if size is None:
        size = measure_text(working)
    return FitResult(working, fits(size, bounds), tuple(applied), size)


def fit_to_bounds(
    text: str | None,
    bounds: Bounds | tuple[float, float],
    measure: Measure,
    table: AbbreviationTable,
    *,
    mode: FitMode = FitMode.REMEASURE,
) -> str:
    """Return ``text`` abbreviated only as much as needed to fit ``bounds``.

    Example:
        >>> fit_to_bounds("Northwest Boulevard", Bounds(15, 1), MonospaceMeasurer(1, 1), table)
        'Northwest Blvd'
    """
    bounds = _as_bounds(bounds)
    measure_text = _measure_with(measure, bounds)
    working = text if isinstance(text, str) else ""

    def apply_tier(category: AbbreviationCategory) -> None:
        nonlocal working
        working = abbreviate(working, {category}, table)

    _escalate(lambda: measure_text(working), apply_tier, bounds, mode)
    return working


def fit_styled_to_bounds(
    styled: StyledTextLike,
    bounds: Bounds | tuple[float, float],
    measure: Measure,
    table: AbbreviationTable,
    *,
    mode: FitMode = FitMode.REMEASURE,
) -> int:
    """Abbreviate a styled label in place only as much as needed to fit ``bounds``.

    The styled value itself is passed to ``measure`` after each tier.

    Returns:
        Number of tiers applied (0 when the label already fits, or when
        ``styled`` is None or has no text)
    """
    bounds = _as_bounds(bounds)
    measure_styled = _measure_with(measure, bounds)
    if not isinstance(getattr(styled, "text", None), str):
        return 0

    def apply_tier(category: AbbreviationCategory) -> None:
        abbreviate_in_place(styled, {category}, table)

    applied, _ = _escalate(lambda: measure_styled(styled), apply_tier, bounds, mode)
    return len(applied)
