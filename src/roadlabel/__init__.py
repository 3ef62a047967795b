"""
roadlabel - Abbreviate road and place labels to fit fixed-size display areas.
"""

from .abbreviations import (
    AbbreviationCategory,
    AbbreviationTable,
    AbbreviationTableError,
    abbreviate,
    abbreviate_in_place,
    load_default_table,
)
from .abbreviator import LabelAbbreviator
from .config import RoadLabelConfig
from .fitting import Bounds, FitMode, FitResult, fit_label, fit_styled_to_bounds, fit_to_bounds, fits
from .measure import MonospaceMeasurer, Size, TextMeasurer
from .styled import StyledRun, StyledText, StyledTextLike

try:
    from importlib.metadata import version as _get_version
    __version__ = _get_version("roadlabel")
except Exception:
    __version__ = "0.1.0"  # Fallback if metadata unavailable

__all__ = [
    "AbbreviationCategory",
    "AbbreviationTable",
    "AbbreviationTableError",
    "Bounds",
    "FitMode",
    "FitResult",
    "LabelAbbreviator",
    "MonospaceMeasurer",
    "RoadLabelConfig",
    "Size",
    "StyledRun",
    "StyledText",
    "StyledTextLike",
    "TextMeasurer",
    "abbreviate",
    "abbreviate_in_place",
    "fit_label",
    "fit_styled_to_bounds",
    "fit_to_bounds",
    "fits",
    "load_default_table",
]
