"""Utility functions shared by the services."""
from .retry import retry_async, is_transient

__all__ = [
    'retry_async',
    'is_transient',
]
