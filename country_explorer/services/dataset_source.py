"""Dataset source: resolve the session's country list, live or bundled."""
from __future__ import annotations

import logging
from typing import Optional, Tuple

import httpx
from pydantic import ValidationError

from ..config import Settings
from ..data import FALLBACK_COUNTRIES
from ..exceptions import DatasetUnavailableError
from ..models import COUNTRY_FIELDS, Country, parse_countries
from ..utils.retry import retry_async

logger = logging.getLogger(__name__)

ORIGIN_REMOTE = "remote"
ORIGIN_FALLBACK = "fallback"


def load_fallback() -> Tuple[Country, ...]:
    """Parse the bundled dataset. It is validated like live data."""
    return parse_countries(FALLBACK_COUNTRIES)


class DatasetSource:
    """Produces the immutable country tuple for a session.

    load() never raises: any failure of the countries API is logged and the
    bundled dataset is substituted. Each call is a full, independent
    resolution, so calling it again (manual refresh) is safe.
    """

    def __init__(self, client: httpx.AsyncClient, settings: Settings):
        self.client = client
        self.settings = settings
        self.countries: Tuple[Country, ...] = ()
        self.origin: Optional[str] = None

    @property
    def url(self) -> str:
        return self.settings.countries_api_url

    async def _fetch_remote(self) -> Tuple[Country, ...]:
        params = {"fields": ",".join(COUNTRY_FIELDS)}

        async def _get() -> httpx.Response:
            response = await self.client.get(self.url, params=params)
            response.raise_for_status()
            return response

        try:
            response = await retry_async(
                _get,
                max_attempts=self.settings.dataset_retry_attempts,
                initial_delay=self.settings.retry_initial_delay,
            )
        except httpx.HTTPStatusError as e:
            raise DatasetUnavailableError(
                f"Countries API returned {e.response.status_code}",
                source=self.url,
            ) from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise DatasetUnavailableError(f"Countries API unreachable: {e}", source=self.url) from e

        try:
            countries = parse_countries(response.json())
        except (ValueError, ValidationError) as e:
            # json.JSONDecodeError is a ValueError
            raise DatasetUnavailableError(f"Malformed countries payload: {e}", source=self.url) from e

        if not countries:
            raise DatasetUnavailableError("Countries API returned an empty list", source=self.url)
        return countries

    async def load(self) -> Tuple[Country, ...]:
        """Resolve the working dataset: live data if possible, else the fallback."""
        if self.settings.offline:
            countries = load_fallback()
            logger.info("Offline mode: using bundled dataset (%d countries)", len(countries))
            return self._resolve(countries, ORIGIN_FALLBACK)

        try:
            countries = await self._fetch_remote()
        except DatasetUnavailableError as e:
            logger.warning("Countries API failed, using bundled dataset: %s", e.message)
            return self._resolve(load_fallback(), ORIGIN_FALLBACK)

        logger.info("Loaded %d countries from %s", len(countries), self.url)
        return self._resolve(countries, ORIGIN_REMOTE)

    def _resolve(self, countries: Tuple[Country, ...], origin: str) -> Tuple[Country, ...]:
        self.countries = countries
        self.origin = origin
        return countries
