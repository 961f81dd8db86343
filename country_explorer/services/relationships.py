from __future__ import annotations

from typing import List, Mapping, Optional

from ..models import Country
from .country_index import CountryIndex


def resolve_neighbors(country: Country, by_code: Mapping[str, Country]) -> List[Country]:
    """Map a country's border codes to records, in border order.

    Codes missing from by_code are dropped without error.
    """
    return [by_code[code] for code in country.borders if code in by_code]


def resolve_neighbors_for_name(name: str, index: CountryIndex) -> Optional[List[Country]]:
    """Neighbors of the country called name.

    Returns None while the name doesn't resolve (dataset still loading or
    unknown name), and a possibly empty list once it does, so callers can
    tell "loading" apart from "no neighbors".
    """
    country = index.get_by_name(name)
    if country is None:
        return None
    return resolve_neighbors(country, index.by_code)
