"""
Pytest configuration and fixtures for roadlabel tests.
"""

import sys
from pathlib import Path

import pytest
import yaml

# Add src directory to Python path to allow importing roadlabel
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from roadlabel.abbreviations import AbbreviationTable  # noqa: E402


TEST_TABLE = {
    "abbreviations": {
        "saint": "St",
        "mount": "Mt",
        "north": "No",
        "international": "Intl",
        "the": "",
    },
    "directions": {
        "north": "N",
        "south": "S",
        "east": "E",
        "west": "W",
        "northwest": "NW",
        "southeast": "SE",
    },
    "classifications": {
        "street": "St",
        "boulevard": "Blvd",
        "avenue": "Ave",
        "road": "Rd",
        "west": "Wst",
    },
}


@pytest.fixture
def table_data() -> dict:
    """Raw table source used across tests."""
    return {category: dict(words) for category, words in TEST_TABLE.items()}


@pytest.fixture
def table(table_data: dict) -> AbbreviationTable:
    """An abbreviation table built from the test data."""
    return AbbreviationTable.from_mapping(table_data)


@pytest.fixture
def table_yaml_file(tmp_path: Path, table_data: dict) -> Path:
    """Write the test table to a temporary YAML file."""
    path = tmp_path / "abbreviations.yaml"
    with open(path, "w", encoding="utf-8") as f:
        yaml.dump(table_data, f, allow_unicode=True)
    return path
