"""
Pytest configuration and shared fixtures.
"""

import json

import pytest

from hollowcore.models.inputs import UnitSystem
from hollowcore.models.records import ConfigurationRecord


@pytest.fixture
def two_record_catalog() -> list[ConfigurationRecord]:
    """Two 8'' configurations: 5 strands / 20 ft / 100 psf and 7 strands / 24 ft / 130 psf."""
    return [
        ConfigurationRecord(thickness="8''", span=20, capacity=100, strands=5),
        ConfigurationRecord(thickness="8''", span=24, capacity=130, strands=7),
    ]


@pytest.fixture
def mixed_catalog() -> list[ConfigurationRecord]:
    """Imperial catalog covering two thicknesses with unnormalized labels."""
    return [
        ConfigurationRecord(thickness=" 8'' ", span=16, capacity=180, strands=4),
        ConfigurationRecord(thickness="8''", span=20, capacity=115, strands=4),
        ConfigurationRecord(thickness="8''", span=24, capacity=80, strands=4),
        ConfigurationRecord(thickness="8''", span=20, capacity=173, strands=6),
        ConfigurationRecord(thickness="8''", span=24, capacity=120, strands=6),
        ConfigurationRecord(thickness="8''", span=28, capacity=88, strands=6),
        ConfigurationRecord(thickness="10''", span=20, capacity=324, strands=9),
        ConfigurationRecord(thickness="10''", span=28, capacity=165, strands=9),
    ]


@pytest.fixture
def catalog_file(tmp_path, mixed_catalog):
    """The mixed catalog written as a catalog JSON file with its capitalized keys."""
    path = tmp_path / "imperial_data.json"
    path.write_text(json.dumps([
        {
            "Thickness": r.thickness,
            "Span": r.span,
            "Capacity": r.capacity,
            "Strands": r.strands,
        }
        for r in mixed_catalog
    ]))
    return path


@pytest.fixture
def imperial() -> UnitSystem:
    return UnitSystem.IMPERIAL
