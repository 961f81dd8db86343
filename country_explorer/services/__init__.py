"""Services making up the country data-synchronization core."""
from .country_index import CountryIndex, build_index
from .dataset_source import DatasetSource
from .profile import ProfileForm, ProfileService
from .query import QueryEngine, QueryState, filter_countries
from .relationships import resolve_neighbors, resolve_neighbors_for_name
from .remote_store import RemoteStoreClient
from .saved_countries import SavedCountriesSync, SaveState
from .view_counts import ViewCountReporter, ViewCountState, ViewCountStatus

__all__ = [
    "CountryIndex",
    "build_index",
    "DatasetSource",
    "ProfileForm",
    "ProfileService",
    "QueryEngine",
    "QueryState",
    "filter_countries",
    "resolve_neighbors",
    "resolve_neighbors_for_name",
    "RemoteStoreClient",
    "SavedCountriesSync",
    "SaveState",
    "ViewCountReporter",
    "ViewCountState",
    "ViewCountStatus",
]
