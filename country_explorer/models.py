from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

# Fields requested from the countries API; the fallback dataset carries the same shape.
COUNTRY_FIELDS: Tuple[str, ...] = ("name", "flags", "population", "capital", "region", "cca3", "borders")


class Country(BaseModel):
    """One immutable country record, keyed by its three-letter code.

    Accepts the countries API wire shape::

        {"name": {"common": "France"}, "flags": {"png": "..."}, "population": 1,
         "capital": ["Paris"], "region": "Europe", "cca3": "FRA", "borders": [...]}

    as well as the flat field names used in this package.
    """

    model_config = ConfigDict(frozen=True)

    code: str = Field(min_length=3, max_length=3)
    name: str = Field(min_length=1)
    flag: Optional[str] = None
    population: int = Field(default=0, ge=0)
    region: Optional[str] = None
    capital: Optional[str] = None
    borders: Tuple[str, ...] = ()

    @model_validator(mode="before")
    @classmethod
    def from_wire(cls, data: Any) -> Any:
        if not isinstance(data, dict) or "cca3" not in data:
            return data

        name = data.get("name")
        if isinstance(name, dict):
            name = name.get("common")
        flags = data.get("flags")
        if isinstance(flags, dict):
            flags = flags.get("png") or flags.get("svg")
        capital = data.get("capital")
        if isinstance(capital, list):
            capital = capital[0] if capital else None

        return {
            "code": data.get("cca3"),
            "name": name,
            "flag": flags,
            "population": data.get("population", 0),
            "region": data.get("region"),
            "capital": capital,
            "borders": data.get("borders") or (),
        }

    @field_validator("code")
    @classmethod
    def upper_code(cls, v: str) -> str:
        return v.strip().upper()

    @field_validator("region", "capital", "flag")
    @classmethod
    def empty_to_none(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        v = v.strip()
        return v or None

    @field_validator("borders", mode="before")
    @classmethod
    def upper_borders(cls, v: Any) -> Any:
        if isinstance(v, (list, tuple)):
            return tuple(str(code).strip().upper() for code in v if code)
        return v

    def to_wire(self) -> Dict[str, Any]:
        """Render the record back into the countries API shape."""
        return {
            "name": {"common": self.name},
            "flags": {"png": self.flag},
            "population": self.population,
            "capital": [self.capital] if self.capital else [],
            "region": self.region or "",
            "cca3": self.code,
            "borders": list(self.borders),
        }


class SavedCountry(BaseModel):
    """Entry returned by the saved-countries list endpoint."""

    model_config = ConfigDict(extra="ignore")

    country_name: str


class ViewCount(BaseModel):
    """Authoritative view count returned by the store after an increment."""

    model_config = ConfigDict(extra="ignore")

    count: int = Field(ge=0)


class UserProfile(BaseModel):
    """Profile record exchanged with the store's user endpoints."""

    model_config = ConfigDict(extra="ignore")

    name: str
    email: str = ""
    country_name: str = ""
    bio: Optional[str] = ""

    @classmethod
    def from_response(cls, data: Any) -> Optional[UserProfile]:
        """Parse the newest-user payload.

        The store answers with an object, a one-element list, or nothing at
        all; an entry without a name counts as "no user yet".
        """
        if isinstance(data, list):
            data = data[0] if data else None
        if not isinstance(data, dict) or not data.get("name"):
            return None
        return cls.model_validate(data)


def parse_countries(payload: Any) -> Tuple[Country, ...]:
    """Validate a countries payload into an immutable tuple.

    Raises:
        ValueError: If the payload isn't a list or codes aren't unique
        pydantic.ValidationError: If any record is malformed
    """
    if not isinstance(payload, list):
        raise ValueError(f"Expected a list of countries, got {type(payload).__name__}")

    countries: List[Country] = [Country.model_validate(item) for item in payload]
    seen = set()
    for country in countries:
        if country.code in seen:
            raise ValueError(f"Duplicate country code {country.code}")
        seen.add(country.code)
    return tuple(countries)
