"""
Configuration model for label abbreviation.
"""

import logging
import os
from pathlib import Path

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field, field_validator

from .fitting import FitMode

logger = logging.getLogger("roadlabel")

ENV_TABLE_PATH = "ROADLABEL_TABLE_PATH"
ENV_FIT_MODE = "ROADLABEL_FIT_MODE"
ENV_CHAR_WIDTH = "ROADLABEL_CHAR_WIDTH"
ENV_LINE_HEIGHT = "ROADLABEL_LINE_HEIGHT"


class RoadLabelConfig(BaseModel):
    """Settings for loading the abbreviation table and fitting labels.

    Values come from keyword arguments or, through ``from_env``, from
    ``ROADLABEL_*`` environment variables (a ``.env`` file is honoured).
    """

    table_path: Path | None = Field(
        default=None,
        description="YAML abbreviation table; the bundled English table when unset"
    )
    fit_mode: FitMode = Field(
        default=FitMode.REMEASURE,
        description="'remeasure' checks fit after every tier; 'legacy' measures the original label only"
    )
    char_width: float = Field(
        default=8.0,
        gt=0.0,
        description="Character advance for the default monospace measurer"
    )
    line_height: float = Field(
        default=16.0,
        gt=0.0,
        description="Line height for the default monospace measurer"
    )

    @field_validator("fit_mode", mode="before")
    @classmethod
    def _parse_fit_mode(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("table_path", mode="before")
    @classmethod
    def _empty_path_is_unset(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @classmethod
    def from_env(cls, load_env_file: bool = True) -> "RoadLabelConfig":
        """Build a configuration from ``ROADLABEL_*`` environment variables.

        Args:
            load_env_file: Whether to read a ``.env`` file first

        Raises:
            pydantic.ValidationError: If a variable holds an invalid value
        """
        if load_env_file and load_dotenv(find_dotenv(usecwd=True)):
            logger.debug("Loaded environment from .env file")

        values: dict[str, str] = {}
        for field_name, env_name in (
            ("table_path", ENV_TABLE_PATH),
            ("fit_mode", ENV_FIT_MODE),
            ("char_width", ENV_CHAR_WIDTH),
            ("line_height", ENV_LINE_HEIGHT),
        ):
            value = os.environ.get(env_name)
            if value is not None:
                values[field_name] = value
        return cls(**values)
