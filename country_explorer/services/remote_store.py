"""Client for the saved-countries / view-count / profile store."""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Type

import httpx
from pydantic import ValidationError

from ..exceptions import ProfileError, RemoteStoreError, SaveToggleError, ViewCountError
from ..models import SavedCountry, UserProfile, ViewCount

logger = logging.getLogger(__name__)


class RemoteStoreClient:
    """Thin async wrapper over the store's HTTP surface.

    Every identifier sent to the store is a country display name
    (``country_name``), which is what the store keys on. Nothing here
    retries: save, unsave and increment are not idempotent, and the reads
    are cheap enough to be re-triggered by the caller.
    """

    LIST_SAVED_PATH = "/api/get-all-saved-countries"
    SAVE_PATH = "/api/save-one-country"
    UNSAVE_PATH = "/api/unsave-one-country"
    INCREMENT_COUNT_PATH = "/api/update-one-country-count"
    NEWEST_USER_PATH = "/api/get-newest-user"
    ADD_USER_PATH = "/api/add-one-user"

    def __init__(self, client: httpx.AsyncClient):
        self.client = client

    async def _request(
        self,
        method: str,
        path: str,
        operation: str,
        error_cls: Type[RemoteStoreError] = RemoteStoreError,
        json: Optional[Dict[str, Any]] = None,
    ) -> httpx.Response:
        """Send one request and translate every failure into error_cls."""
        try:
            response = await self.client.request(method, path, json=json)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            raise error_cls(
                f"{operation} failed: HTTP {status}",
                operation=operation,
                status_code=status,
            ) from e
        except httpx.HTTPError as e:
            raise error_cls(f"{operation} failed: {e}", operation=operation) from e

        logger.debug("%s %s -> %s", method, path, response.status_code)
        return response

    @staticmethod
    def _json(response: httpx.Response, operation: str, error_cls: Type[RemoteStoreError]) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise error_cls(
                f"{operation} returned a non-JSON body",
                operation=operation,
                status_code=response.status_code,
            ) from e

    async def list_saved(self) -> List[str]:
        """Names of every saved country, in store order."""
        operation = "list_saved"
        response = await self._request("GET", self.LIST_SAVED_PATH, operation)
        data = self._json(response, operation, RemoteStoreError)
        if not isinstance(data, list):
            raise RemoteStoreError(f"{operation} returned {type(data).__name__}, expected list", operation=operation)
        try:
            return [SavedCountry.model_validate(item).country_name for item in data]
        except ValidationError as e:
            raise RemoteStoreError(f"{operation} returned malformed entries", operation=operation) from e

    async def save_one(self, country_name: str) -> None:
        await self._request(
            "POST", self.SAVE_PATH, "save_one", SaveToggleError,
            json={"country_name": country_name},
        )

    async def unsave_one(self, country_name: str) -> None:
        await self._request(
            "POST", self.UNSAVE_PATH, "unsave_one", SaveToggleError,
            json={"country_name": country_name},
        )

    async def increment_view_count(self, country_name: str) -> int:
        """Record one view and return the store's new count."""
        operation = "increment_view_count"
        response = await self._request(
            "POST", self.INCREMENT_COUNT_PATH, operation, ViewCountError,
            json={"country_name": country_name},
        )
        data = self._json(response, operation, ViewCountError)
        try:
            return ViewCount.model_validate(data).count
        except ValidationError as e:
            raise ViewCountError(f"{operation} returned no usable count", operation=operation) from e

    async def get_newest_user(self) -> Optional[UserProfile]:
        operation = "get_newest_user"
        response = await self._request("GET", self.NEWEST_USER_PATH, operation, ProfileError)
        if not response.content.strip():
            return None
        data = self._json(response, operation, ProfileError)
        try:
            return UserProfile.from_response(data)
        except ValidationError as e:
            raise ProfileError(f"{operation} returned a malformed profile", operation=operation) from e

    async def add_user(self, profile: UserProfile) -> str:
        """Submit a profile. The store acknowledges with plain text."""
        response = await self._request(
            "POST", self.ADD_USER_PATH, "add_user", ProfileError,
            json=profile.model_dump(),
        )
        return response.text
