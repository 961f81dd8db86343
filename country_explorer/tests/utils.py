from __future__ import annotations

import asyncio
import json
from typing import Any, Callable, Dict, List, Optional, Set, Tuple

import httpx

from country_explorer.config import Settings
from country_explorer.session import CountrySession

COUNTRIES_HOST = "restcountries.test"
STORE_URL = "http://store.test"


def make_settings(**overrides: Any) -> Settings:
    values = {
        "countries_api_url": f"https://{COUNTRIES_HOST}/v3.1/all",
        "api_base_url": STORE_URL,
        "dataset_retry_attempts": 1,
        "retry_initial_delay": 0.0,
        "offline": False,
    }
    values.update(overrides)
    return Settings(**values)


def wire_country(
    code: str,
    name: str,
    region: Optional[str] = "Europe",
    borders: Optional[List[str]] = None,
    population: int = 1000,
    capital: Optional[str] = None,
) -> Dict[str, Any]:
    return {
        "name": {"common": name},
        "flags": {"png": f"https://flags.test/{code.lower()}.png"},
        "population": population,
        "capital": [capital] if capital else [],
        "region": region,
        "cca3": code,
        "borders": borders or [],
    }


class FakeRemoteStore:
    """In-memory countries API plus saved-countries store.

    Serves as an httpx.MockTransport handler. Failures are injected per path
    (status code, transport error or a canned response), and a path can be held on an
    asyncio.Event to observe in-flight state.
    """

    def __init__(
        self,
        countries: Optional[List[Dict[str, Any]]] = None,
        saved: Optional[List[str]] = None,
    ) -> None:
        self.countries_payload: Any = countries if countries is not None else []
        self.saved: List[str] = list(saved or [])
        self.counts: Dict[str, int] = {}
        self.count_script: List[int] = []
        self.users: List[Dict[str, Any]] = []
        self.fail_status: Dict[str, int] = {}
        self.fail_transport: Set[str] = set()
        self.gates: Dict[str, asyncio.Event] = {}
        self.overrides: Dict[str, Callable[[], httpx.Response]] = {}
        self.calls: List[Tuple[str, str, Any]] = []

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def calls_to(self, path: str) -> List[Tuple[str, str, Any]]:
        return [call for call in self.calls if call[1] == path]

    async def handler(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path
        body = json.loads(request.content) if request.content else None
        self.calls.append((request.method, path, body))

        gate = self.gates.get(path)
        if gate is not None:
            await gate.wait()

        if path in self.fail_transport:
            raise httpx.ConnectError("connection refused", request=request)
        if path in self.fail_status:
            return httpx.Response(self.fail_status[path], text="boom")
        if path in self.overrides:
            return self.overrides[path]()

        if request.url.host == COUNTRIES_HOST:
            return httpx.Response(200, json=self.countries_payload)

        if path == "/api/get-all-saved-countries":
            return httpx.Response(
                200,
                json=[{"id": i + 1, "country_name": name} for i, name in enumerate(self.saved)],
            )
        if path == "/api/save-one-country":
            if body["country_name"] not in self.saved:
                self.saved.append(body["country_name"])
            return httpx.Response(200, text="Country saved")
        if path == "/api/unsave-one-country":
            if body["country_name"] in self.saved:
                self.saved.remove(body["country_name"])
            return httpx.Response(200, text="Country unsaved")
        if path == "/api/update-one-country-count":
            name = body["country_name"]
            if self.count_script:
                self.counts[name] = self.count_script.pop(0)
            else:
                self.counts[name] = self.counts.get(name, 0) + 1
            return httpx.Response(200, json={"country_name": name, "count": self.counts[name]})
        if path == "/api/get-newest-user":
            if not self.users:
                return httpx.Response(200, content=b"")
            return httpx.Response(200, json=[self.users[-1]])
        if path == "/api/add-one-user":
            self.users.append(body)
            return httpx.Response(200, text="Success! User added.")

        return httpx.Response(404, text="not found")


def make_session(store: FakeRemoteStore, **settings_overrides: Any) -> CountrySession:
    return CountrySession(make_settings(**settings_overrides), transport=store.transport())


def run(coro):
    """Helper to run async functions in synchronous tests."""
    return asyncio.run(coro)
