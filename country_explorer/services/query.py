"""Search and region filtering over the country set."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from ..models import Country


@dataclass(frozen=True)
class QueryState:
    """The caller-owned pair of search text and selected region."""
    search_text: str = ""
    region: str = ""


def matches_search(country: Country, search_text: str) -> bool:
    needle = (search_text or "").strip().lower()
    if not needle:
        return True
    return needle in country.name.lower()


def matches_region(country: Country, region: str) -> bool:
    if not region:
        return True
    return country.region == region


def filter_countries(
    countries: Sequence[Country],
    search_text: str = "",
    region: str = "",
) -> List[Country]:
    """Return the countries passing both the search and region predicates.

    Search is a case-insensitive substring match on the display name after
    trimming the search text; region is an exact, case-sensitive match. The
    result keeps input order and is always a new list.
    """
    return [
        country for country in countries
        if matches_search(country, search_text) and matches_region(country, region)
    ]


class QueryEngine:
    """Memoised filter_countries for a UI that re-renders often.

    The filter runs again only when the country tuple, the search text or the
    region changes. Callers still get a fresh list each time.
    """

    def __init__(self) -> None:
        self._key: Optional[Tuple[int, str, str]] = None
        self._countries: Optional[Sequence[Country]] = None
        self._result: List[Country] = []
        self.computations = 0

    def filter(self, countries: Sequence[Country], state: QueryState) -> List[Country]:
        key = (id(countries), state.search_text, state.region)
        # Compare identity too: id() values can be reused after garbage collection
        if key != self._key or countries is not self._countries:
            self._result = filter_countries(countries, state.search_text, state.region)
            self._key = key
            self._countries = countries
            self.computations += 1
        return list(self._result)
