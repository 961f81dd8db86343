"""
Session context for the country directory client.

A CountrySession owns all mutable state for one user session: the HTTP
client, the resolved dataset and its indexes, the saved-set snapshot, the
view-count states and the profile form. Create one at session start, pass
it to whatever renders, and close it at session end:

    async with CountrySession(settings) as session:
        europe = session.search(region="Europe")
        await session.toggle_saved("France")
"""
from __future__ import annotations

import logging
from typing import List, Optional, Tuple

import httpx

from .config import Settings, get_settings
from .models import Country
from .services.country_index import EMPTY_INDEX, CountryIndex
from .services.dataset_source import DatasetSource
from .services.http_pool import create_http_client
from .services.profile import ProfileService
from .services.query import QueryEngine, QueryState
from .services.relationships import resolve_neighbors_for_name
from .services.remote_store import RemoteStoreClient
from .services.saved_countries import SavedCountriesSync, SaveState
from .services.view_counts import ViewCountReporter, ViewCountState

logger = logging.getLogger(__name__)


class CountrySession:
    def __init__(
        self,
        settings: Optional[Settings] = None,
        client: Optional[httpx.AsyncClient] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Args:
            settings: Explicit settings; defaults to get_settings()
            client: Pre-built client. The session won't close a client it didn't create.
            transport: Transport for the client the session creates (tests)
        """
        self.settings = settings or get_settings()
        self._owns_client = client is None
        self.client = client or create_http_client(self.settings, transport=transport)

        self.store = RemoteStoreClient(self.client)
        self.dataset = DatasetSource(self.client, self.settings)
        self.saved = SavedCountriesSync(self.store)
        self.view_counts = ViewCountReporter(self.store)
        self.profile = ProfileService(self.store)
        self.query_engine = QueryEngine()
        self.index: CountryIndex = EMPTY_INDEX

    async def __aenter__(self) -> CountrySession:
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> bool:
        await self.close()
        return False

    async def start(self) -> None:
        """Resolve the dataset, build indexes, take the first saved-set snapshot."""
        await self.reload_countries()
        await self.saved.refresh()
        logger.info(
            "Session ready: %d countries (%s), saved set %s",
            len(self.index),
            self.dataset.origin,
            "loaded" if self.saved.loaded else "unavailable",
        )

    async def reload_countries(self) -> Tuple[Country, ...]:
        countries = await self.dataset.load()
        self.index = self.index.for_countries(countries)
        return countries

    async def close(self) -> None:
        if self._owns_client and not self.client.is_closed:
            await self.client.aclose()

    @property
    def countries(self) -> Tuple[Country, ...]:
        return self.index.countries

    @property
    def regions(self) -> Tuple[str, ...]:
        return self.index.regions

    def search(self, search_text: str = "", region: str = "") -> List[Country]:
        return self.query_engine.filter(self.countries, QueryState(search_text, region))

    def country(self, name: str) -> Optional[Country]:
        return self.index.get_by_name(name)

    def neighbors_of(self, name: str) -> Optional[List[Country]]:
        return resolve_neighbors_for_name(name, self.index)

    def membership(self, name: str) -> SaveState:
        return self.saved.membership(name)

    async def toggle_saved(self, name: str) -> SaveState:
        return await self.saved.toggle(name, self.index)

    async def refresh_saved(self) -> bool:
        return await self.saved.refresh()

    def saved_countries(self) -> List[Country]:
        return self.saved.saved_countries(self.index)

    def saved_codes(self) -> List[str]:
        return self.saved.saved_codes(self.index)

    async def view(self, name: str) -> ViewCountState:
        """Activate the detail view for name, reporting one view."""
        return await self.view_counts.activate(name, self.index)
