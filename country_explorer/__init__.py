"""Data-synchronization core for a country directory client."""
from .config import Settings, get_settings
from .models import Country, UserProfile
from .session import CountrySession

__all__ = [
    "Settings",
    "get_settings",
    "Country",
    "UserProfile",
    "CountrySession",
]

__version__ = "0.1.0"
