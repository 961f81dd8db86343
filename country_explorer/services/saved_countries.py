"""
Saved-country state, reconciled against the remote store.

The store owns the saved set. This module keeps a client-side snapshot of
it and never edits that snapshot directly: every save/unsave is followed by
a full re-read, and the new snapshot replaces the old one in a single
assignment. Concurrent refreshes can therefore only ever leave one complete
snapshot behind, never a half-merged one.
"""
from __future__ import annotations

import logging
from enum import Enum
from typing import FrozenSet, List, Optional, Set

from ..exceptions import (
    RemoteStoreError,
    SaveToggleError,
    ToggleInProgressError,
    UnknownCountryError,
)
from ..models import Country
from .country_index import CountryIndex
from .remote_store import RemoteStoreClient

logger = logging.getLogger(__name__)


class SaveState(str, Enum):
    """Saved membership of one country as seen by the client."""
    UNKNOWN = "unknown"  # saved set never fetched
    UNSAVED = "unsaved"
    SAVED = "saved"


class SavedCountriesSync:
    """Client view of the saved set, keyed by country display name."""

    def __init__(self, store: RemoteStoreClient):
        self.store = store
        self._saved: Optional[FrozenSet[str]] = None
        self._order: List[str] = []
        self._in_flight: Set[str] = set()

    @property
    def loaded(self) -> bool:
        """True once the saved set has been fetched successfully."""
        return self._saved is not None

    @property
    def saved_names(self) -> List[str]:
        """Saved names in the order the store returned them."""
        return list(self._order)

    def membership(self, country_name: str) -> SaveState:
        if self._saved is None:
            return SaveState.UNKNOWN
        return SaveState.SAVED if country_name in self._saved else SaveState.UNSAVED

    def is_saved(self, country_name: str) -> bool:
        return self.membership(country_name) is SaveState.SAVED

    def is_busy(self, country_name: str) -> bool:
        """True while a toggle for this country is awaiting the store."""
        return country_name in self._in_flight

    async def refresh(self) -> bool:
        """Replace the snapshot with the store's current saved set.

        Returns False and keeps the previous snapshot if the store can't be
        read.
        """
        try:
            names = await self.store.list_saved()
        except RemoteStoreError as e:
            logger.warning("Could not refresh saved countries, keeping %d cached: %s",
                           len(self._order), e.message)
            return False

        # Drop duplicates, keep store order
        order = list(dict.fromkeys(names))
        self._saved, self._order = frozenset(order), order
        logger.debug("Saved set refreshed: %d countries", len(order))
        return True

    async def toggle(self, country_name: str, index: CountryIndex) -> SaveState:
        """Save an unsaved country or unsave a saved one.

        The name must resolve in index; nothing is sent otherwise. Before the
        first successful refresh the direction is unknown, so the saved set
        is read first. The snapshot is only updated by the refresh that
        follows a confirmed store write. A failed write leaves it untouched
        and raises.

        Raises:
            UnknownCountryError: The dataset has no country with this name
            ToggleInProgressError: A toggle for this country is still in flight
            SaveToggleError: The saved set couldn't be read, or the store
                rejected or never answered the write
        """
        if index.get_by_name(country_name) is None:
            raise UnknownCountryError(country_name)
        if country_name in self._in_flight:
            raise ToggleInProgressError(country_name)

        self._in_flight.add(country_name)
        try:
            if not self.loaded and not await self.refresh():
                raise SaveToggleError(
                    f"Saved countries unavailable, not toggling {country_name}",
                    operation="list_saved",
                )
            if self.is_saved(country_name):
                logger.info("Unsaving %s", country_name)
                await self.store.unsave_one(country_name)
            else:
                logger.info("Saving %s", country_name)
                await self.store.save_one(country_name)
            await self.refresh()
        except SaveToggleError as e:
            logger.error("Toggle for %s failed: %s", country_name, e.message)
            raise
        finally:
            self._in_flight.discard(country_name)

        return self.membership(country_name)

    def saved_countries(self, index: CountryIndex) -> List[Country]:
        """Saved names joined to records; names the dataset lacks are skipped."""
        countries = []
        for name in self._order:
            country = index.get_by_name(name)
            if country is not None:
                countries.append(country)
        return countries

    def saved_codes(self, index: CountryIndex) -> List[str]:
        return [country.code for country in self.saved_countries(index)]
