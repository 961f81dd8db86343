"""Per-activation view-count reporting."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional

from ..exceptions import ViewCountError
from .country_index import CountryIndex
from .remote_store import RemoteStoreClient

logger = logging.getLogger(__name__)

VIEW_COUNT_ERROR_MESSAGE = "Could not load view count."


class ViewCountStatus(str, Enum):
    PENDING = "pending"  # country not resolvable yet, nothing sent
    UNKNOWN = "unknown"  # increment sent, no answer yet
    LOADED = "loaded"
    ERROR = "error"


@dataclass(frozen=True)
class ViewCountState:
    status: ViewCountStatus
    count: Optional[int] = None
    error: Optional[str] = None
    activation: int = 0

    def display(self) -> str:
        if self.status is ViewCountStatus.LOADED:
            return f"{self.count:,}"
        if self.status is ViewCountStatus.ERROR:
            return self.error or VIEW_COUNT_ERROR_MESSAGE
        return "…"


class ViewCountReporter:
    """Sends one increment per detail-view activation.

    Every call to activate() is a new activation, including re-opening the
    same country, and costs exactly one increment. The displayed value is
    only ever the store's answer for the latest activation.
    """

    def __init__(self, store: RemoteStoreClient):
        self.store = store
        self._states: Dict[str, ViewCountState] = {}
        self._activations: Dict[str, int] = {}

    def state(self, country_name: str) -> ViewCountState:
        return self._states.get(country_name, ViewCountState(ViewCountStatus.PENDING))

    async def activate(self, country_name: str, index: CountryIndex) -> ViewCountState:
        # Any activation supersedes answers still in flight for older ones
        activation = self._activations.get(country_name, 0) + 1
        self._activations[country_name] = activation

        if index.get_by_name(country_name) is None:
            logger.debug("View of %s deferred: not in dataset yet", country_name)
            state = ViewCountState(ViewCountStatus.PENDING, activation=activation)
            self._states[country_name] = state
            return state

        self._states[country_name] = ViewCountState(ViewCountStatus.UNKNOWN, activation=activation)
        return await self._report(country_name, activation)

    async def _report(self, country_name: str, activation: int) -> ViewCountState:
        try:
            count = await self.store.increment_view_count(country_name)
        except ViewCountError as e:
            logger.warning("View count for %s unavailable: %s", country_name, e.message)
            state = ViewCountState(ViewCountStatus.ERROR, error=VIEW_COUNT_ERROR_MESSAGE, activation=activation)
        else:
            state = ViewCountState(ViewCountStatus.LOADED, count=count, activation=activation)

        if self._activations.get(country_name) != activation:
            # A newer activation started while this one was in flight
            logger.debug("Dropping stale view count for %s (activation %d)", country_name, activation)
            return self.state(country_name)

        self._states[country_name] = state
        return state
