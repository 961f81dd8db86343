"""
Shared pytest fixtures for country_explorer tests.

Import fixtures from here instead of defining them in individual test files.
"""
from __future__ import annotations

import os
from typing import Any, Dict, List

import pytest

from country_explorer.tests.utils import FakeRemoteStore, wire_country

# Keep a developer's .env / shell settings out of the tests
for _key in ("OFFLINE", "COUNTRIES_API_URL", "COUNTRY_API_BASE_URL", "LOG_LEVEL"):
    os.environ.pop(_key, None)


# ============================================================================
# Data Fixtures
# ============================================================================

@pytest.fixture
def sample_wire_countries() -> List[Dict[str, Any]]:
    """A small dataset in the countries API shape."""
    return [
        wire_country("FRA", "France", "Europe", ["BEL", "DEU", "ESP", "CHE"], 67391582, "Paris"),
        wire_country("BEL", "Belgium", "Europe", ["FRA", "DEU", "LUX", "NLD"], 11555997, "Brussels"),
        wire_country("DEU", "Germany", "Europe", ["BEL", "FRA", "POL"], 83240525, "Berlin"),
        wire_country("CAN", "Canada", "Americas", ["USA"], 38005238, "Ottawa"),
        wire_country("USA", "United States", "Americas", ["CAN", "MEX"], 329484123, "Washington, D.C."),
        wire_country("JPN", "Japan", "Asia", [], 125836021, "Tokyo"),
        wire_country("ATA", "Antarctica", "Antarctic", [], 1000),
        wire_country("XKX", "Nowhere", None, [], 0),
    ]


@pytest.fixture
def sample_countries(sample_wire_countries):
    from country_explorer.models import parse_countries
    return parse_countries(sample_wire_countries)


@pytest.fixture
def sample_index(sample_countries):
    from country_explorer.services.country_index import build_index
    return build_index(sample_countries)


# ============================================================================
# Service Fakes
# ============================================================================

@pytest.fixture
def fake_store(sample_wire_countries) -> FakeRemoteStore:
    """Countries API and saved-countries store backed by memory."""
    return FakeRemoteStore(countries=sample_wire_countries, saved=["Belgium"])
