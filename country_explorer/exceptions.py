"""Custom exception hierarchy for country_explorer.

Exception Hierarchy:
    CountryExplorerError (base)
    ├── ConfigurationError
    ├── DatasetUnavailableError
    ├── RemoteStoreError
    │   ├── SaveToggleError
    │   ├── ViewCountError
    │   └── ProfileError
    ├── ToggleInProgressError
    └── UnknownCountryError

DatasetUnavailableError never reaches callers of the dataset source: it is
raised internally and recovered by substituting the bundled dataset. The
RemoteStoreError family is what the session surfaces to the UI layer.
"""
from __future__ import annotations

from typing import Optional, Dict, Any


class CountryExplorerError(Exception):
    """Base exception for all country_explorer errors.

    Attributes:
        message: Human-readable error message
        code: Error code for programmatic handling
        details: Additional error context
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to a dictionary for display or logging."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class ConfigurationError(CountryExplorerError):
    """Raised when settings are missing or inconsistent."""
    pass


class DatasetUnavailableError(CountryExplorerError):
    """Raised when the countries API can't produce a usable dataset.

    This covers:
        - Network errors and timeouts
        - Non-success HTTP status
        - Payloads that are not a list of valid country records
    """

    def __init__(
        self,
        message: str,
        source: Optional[str] = None,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.source = source
        details = details or {}
        if source:
            details["source"] = source
        super().__init__(message, code, details)


class RemoteStoreError(CountryExplorerError):
    """Raised when a call to the saved-countries store fails.

    Attributes:
        operation: Name of the store operation (e.g. "save_one")
        status_code: HTTP status when the store answered, None on transport errors
    """

    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
        status_code: Optional[int] = None,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.operation = operation
        self.status_code = status_code
        details = details or {}
        if operation:
            details["operation"] = operation
        if status_code is not None:
            details["status_code"] = status_code
        super().__init__(message, code, details)


class SaveToggleError(RemoteStoreError):
    """Raised when a save or unsave call is rejected or never answered."""
    pass


class ViewCountError(RemoteStoreError):
    """Raised when the view-count increment fails."""
    pass


class ProfileError(RemoteStoreError):
    """Raised when fetching or submitting the user profile fails."""
    pass


class ToggleInProgressError(CountryExplorerError):
    """Raised when a toggle is requested for a country whose previous toggle
    hasn't resolved yet.

    Attributes:
        country_name: The busy identifier
    """

    def __init__(
        self,
        country_name: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.country_name = country_name
        details = details or {}
        details["country_name"] = country_name
        super().__init__(
            f"A save/unsave for '{country_name}' is already in flight",
            code,
            details,
        )


class UnknownCountryError(CountryExplorerError):
    """Raised when an action names a country the current dataset doesn't have.

    Attributes:
        country_name: The unresolved display name
    """

    def __init__(
        self,
        country_name: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.country_name = country_name
        details = details or {}
        details["country_name"] = country_name
        super().__init__(f"No country named '{country_name}'", code, details)
