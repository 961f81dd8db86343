"""Static data bundled with the client."""
from .fallback_countries import FALLBACK_COUNTRIES

__all__ = ["FALLBACK_COUNTRIES"]
