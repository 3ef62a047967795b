"""
Tests for RoadLabelConfig.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from roadlabel.config import RoadLabelConfig
from roadlabel.fitting import FitMode

ENV_VARS = (
    "ROADLABEL_TABLE_PATH",
    "ROADLABEL_FIT_MODE",
    "ROADLABEL_CHAR_WIDTH",
    "ROADLABEL_LINE_HEIGHT",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        # setenv first so monkeypatch also undoes values a .env file loads
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


class TestRoadLabelConfig:
    """Test configuration defaults and validation."""

    def test_defaults(self):
        config = RoadLabelConfig()
        assert config.table_path is None
        assert config.fit_mode is FitMode.REMEASURE
        assert config.char_width == 8.0
        assert config.line_height == 16.0

    def test_fit_mode_from_string(self):
        assert RoadLabelConfig(fit_mode="Legacy").fit_mode is FitMode.LEGACY

    def test_invalid_fit_mode(self):
        with pytest.raises(ValidationError):
            RoadLabelConfig(fit_mode="shrink")

    def test_metrics_must_be_positive(self):
        with pytest.raises(ValidationError):
            RoadLabelConfig(char_width=0)
        with pytest.raises(ValidationError):
            RoadLabelConfig(line_height=-2)

    def test_blank_table_path_is_unset(self):
        assert RoadLabelConfig(table_path="  ").table_path is None


class TestFromEnv:
    """Test reading configuration from the environment."""

    def test_no_variables(self):
        assert RoadLabelConfig.from_env(load_env_file=False) == RoadLabelConfig()

    def test_reads_variables(self, monkeypatch, tmp_path):
        monkeypatch.setenv("ROADLABEL_TABLE_PATH", str(tmp_path / "table.yaml"))
        monkeypatch.setenv("ROADLABEL_FIT_MODE", "LEGACY")
        monkeypatch.setenv("ROADLABEL_CHAR_WIDTH", "6.5")
        monkeypatch.setenv("ROADLABEL_LINE_HEIGHT", "12")

        config = RoadLabelConfig.from_env(load_env_file=False)

        assert config.table_path == Path(tmp_path / "table.yaml")
        assert config.fit_mode is FitMode.LEGACY
        assert config.char_width == 6.5
        assert config.line_height == 12.0

    def test_invalid_variable(self, monkeypatch):
        monkeypatch.setenv("ROADLABEL_CHAR_WIDTH", "wide")
        with pytest.raises(ValidationError):
            RoadLabelConfig.from_env(load_env_file=False)

    def test_reads_env_file(self, monkeypatch, tmp_path):
        """Test a .env file in the working directory is honoured."""
        (tmp_path / ".env").write_text("ROADLABEL_FIT_MODE=legacy\n", encoding="utf-8")
        monkeypatch.chdir(tmp_path)

        config = RoadLabelConfig.from_env()

        assert config.fit_mode is FitMode.LEGACY
