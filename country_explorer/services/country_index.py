"""Read-only lookup structures derived from a country tuple."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Sequence, Tuple

from ..models import Country

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CountryIndex:
    """Lookups by code and by display name, plus the region list.

    Built once per country tuple. A new tuple means a new index; nothing here
    is ever patched in place.
    """
    countries: Tuple[Country, ...]
    by_code: Mapping[str, Country]
    by_name: Mapping[str, Country]
    regions: Tuple[str, ...]

    def get_by_code(self, code: Optional[str]) -> Optional[Country]:
        if not code:
            return None
        return self.by_code.get(code.strip().upper())

    def get_by_name(self, name: Optional[str]) -> Optional[Country]:
        if not name:
            return None
        return self.by_name.get(name)

    def for_countries(self, countries: Sequence[Country]) -> CountryIndex:
        """Return self when built from this exact tuple, otherwise rebuild."""
        if countries is self.countries:
            return self
        return build_index(countries)

    def __len__(self) -> int:
        return len(self.countries)


def build_index(countries: Sequence[Country]) -> CountryIndex:
    countries = countries if isinstance(countries, tuple) else tuple(countries)

    by_code: Dict[str, Country] = {}
    by_name: Dict[str, Country] = {}
    regions = set()

    for country in countries:
        by_code[country.code] = country
        if country.name in by_name:
            # Names aren't guaranteed unique; first record wins
            logger.warning(
                "Duplicate display name %r (%s, %s)",
                country.name, by_name[country.name].code, country.code,
            )
        else:
            by_name[country.name] = country
        if country.region:
            regions.add(country.region)

    return CountryIndex(
        countries=countries,
        by_code=MappingProxyType(by_code),
        by_name=MappingProxyType(by_name),
        regions=tuple(sorted(regions)),
    )


EMPTY_INDEX = build_index(())
