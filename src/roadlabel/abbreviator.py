"""
Label abbreviator bound to one shared abbreviation table.
"""

from __future__ import annotations

import logging
from typing import Iterable

from .abbreviations.engine import abbreviate, abbreviate_in_place
from .abbreviations.models import AbbreviationCategory
from .abbreviations.table import AbbreviationTable, load_default_table
from .config import RoadLabelConfig
from .fitting import Bounds, FitMode, FitResult, Measure, fit_label, fit_styled_to_bounds, fit_to_bounds
from .measure import MonospaceMeasurer
from .styled import StyledTextLike

logger = logging.getLogger("roadlabel")


class LabelAbbreviator:
    """Abbreviates and fits labels using an injected abbreviation table.

    Create one at startup and share it; the table it holds is read-only, so
    the abbreviator can be used from several threads at once.

    Usage:
        abbreviator = LabelAbbreviator.from_config(RoadLabelConfig.from_env())

        abbreviator.abbreviate("North Main Street", {AbbreviationCategory.DIRECTION})
        # 'N Main Street'

        abbreviator.fit("Northwest Boulevard", Bounds(120, 16))
    """

    def __init__(
        self,
        table: AbbreviationTable,
        measurer: Measure | None = None,
        mode: FitMode = FitMode.REMEASURE,
    ) -> None:
        self.table = table
        self.measurer = measurer if measurer is not None else MonospaceMeasurer()
        self.mode = mode

    @classmethod
    def from_config(cls, config: RoadLabelConfig | None = None) -> LabelAbbreviator:
        """Load the configured table once and build an abbreviator around it.

        Raises:
            AbbreviationTableError: If the table cannot be loaded
        """
        config = config or RoadLabelConfig()
        table = load_default_table(config.table_path)
        measurer = MonospaceMeasurer(config.char_width, config.line_height)
        logger.info(f"Label abbreviator ready ({len(table)} abbreviations, {config.fit_mode.value} fitting)")
        return cls(table, measurer=measurer, mode=config.fit_mode)

    def abbreviate(self, text: str | None, categories: Iterable[AbbreviationCategory]) -> str:
        return abbreviate(text, categories, self.table)

    def abbreviate_in_place(
        self, styled: StyledTextLike, categories: Iterable[AbbreviationCategory]
    ) -> int:
        return abbreviate_in_place(styled, categories, self.table)

    def fit(
        self,
        text: str | None,
        bounds: Bounds | tuple[float, float],
        measure: Measure | None = None,
    ) -> str:
        """Return ``text`` abbreviated only as much as needed to fit ``bounds``."""
        return fit_to_bounds(text, bounds, measure or self.measurer, self.table, mode=self.mode)

    def fit_label(
        self,
        text: str | None,
        bounds: Bounds | tuple[float, float],
        measure: Measure | None = None,
    ) -> FitResult:
        return fit_label(text, bounds, measure or self.measurer, self.table, mode=self.mode)

    def fit_styled(
        self,
        styled: StyledTextLike,
        bounds: Bounds | tuple[float, float],
        measure: Measure | None = None,
    ) -> int:
        """Abbreviate ``styled`` in place to fit ``bounds``; returns tiers applied."""
        return fit_styled_to_bounds(styled, bounds, measure or self.measurer, self.table, mode=self.mode)
