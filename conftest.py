"""
Shared test fixtures.

Provides:
- The bundled neighborhood directory
- make_record(): factory for small hand-built NeighborhoodRecord objects
"""
from typing import Any

import pytest

from locale_engine.utils.directory_utils import load_directory, record_from_dict


def make_record(**overrides: Any):
    """Factory for a minimal NeighborhoodRecord; override any JSON key."""
    base = {
        "name": "Test Neighborhood",
        "aliases": [],
        "zip_codes": [],
        "bounds": {"north": 32.9, "south": 32.8, "east": -79.8, "west": -79.9},
        "description": "A quiet test neighborhood.",
        "typical_amenities": ["Fenced Yard"],
        "vocabulary": {
            "architectural_style": "Lowcountry cottage",
            "neighborhood_vibe_phrase": "tucked under the live oaks",
            "proximity_terms": ["near the marsh"],
        },
    }
    base.update(overrides)
    return record_from_dict(base)


@pytest.fixture
def directory():
    return load_directory()


@pytest.fixture
def by_name(directory):
    """Bundled records keyed by canonical name."""
    return {record.name: record for record in directory}
