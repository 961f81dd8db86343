from __future__ import annotations

import pytest
from pydantic import ValidationError

from country_explorer.models import Country, UserProfile, parse_countries
from country_explorer.tests.utils import wire_country


def test_country_parses_wire_shape():
    country = Country.model_validate(
        wire_country("fra", "France", "Europe", ["bel", "DEU"], 67391582, "Paris")
    )

    assert country.code == "FRA"
    assert country.name == "France"
    assert country.flag == "https://flags.test/fra.png"
    assert country.population == 67391582
    assert country.capital == "Paris"
    assert country.region == "Europe"
    assert country.borders == ("BEL", "DEU")


def test_country_takes_first_capital_and_tolerates_missing_fields():
    raw = {
        "name": {"common": "South Africa"},
        "flags": {"png": "za.png"},
        "population": 59308690,
        "capital": ["Pretoria", "Bloemfontein", "Cape Town"],
        "region": "",
        "cca3": "ZAF",
    }
    country = Country.model_validate(raw)

    assert country.capital == "Pretoria"
    assert country.region is None
    assert country.borders == ()


def test_country_without_capital_has_none():
    country = Country.model_validate(wire_country("ATA", "Antarctica", "Antarctic"))
    assert country.capital is None


def test_country_is_immutable():
    country = Country.model_validate(wire_country("JPN", "Japan", "Asia"))
    with pytest.raises(ValidationError):
        country.population = 1


def test_negative_population_rejected():
    with pytest.raises(ValidationError):
        Country.model_validate(wire_country("JPN", "Japan", "Asia", population=-1))


def test_to_wire_matches_api_shape():
    raw = wire_country("CAN", "Canada", "Americas", ["USA"], 38005238, "Ottawa")
    assert Country.model_validate(raw).to_wire() == raw


def test_parse_countries_rejects_duplicate_codes():
    payload = [wire_country("FRA", "France"), wire_country("FRA", "France again")]
    with pytest.raises(ValueError, match="Duplicate"):
        parse_countries(payload)


def test_parse_countries_rejects_non_list():
    with pytest.raises(ValueError):
        parse_countries({"status": 404, "message": "Not Found"})


class TestUserProfileFromResponse:
    def test_object(self):
        profile = UserProfile.from_response(
            {"name": "Ada", "email": "ada@example.com", "country_name": "France", "bio": "hi"}
        )
        assert profile.name == "Ada"
        assert profile.country_name == "France"

    def test_single_element_list(self):
        profile = UserProfile.from_response([{"name": "Ada", "email": "ada@example.com"}])
        assert profile.name == "Ada"
        assert profile.bio == ""

    @pytest.mark.parametrize("payload", [None, [], {}, [{}], {"name": ""}])
    def test_no_user(self, payload):
        assert UserProfile.from_response(payload) is None
