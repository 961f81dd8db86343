"""
HTTP client factory for a country session.

Each session owns exactly one httpx.AsyncClient, shared by the dataset
source and the remote store client, with:
- Connection pooling (HTTP/1.1 and HTTP/2)
- Keep-alive configuration
- Timeouts taken from Settings

There is deliberately no module-level client; the session creates it on
start and closes it on exit.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

from ..config import Settings

logger = logging.getLogger(__name__)

DEFAULT_HEADERS = {
    "Accept": "application/json",
    "User-Agent": "country-explorer/0.1",
}


def create_http_client(
    settings: Settings,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.AsyncClient:
    """Create the session's AsyncClient.

    Args:
        settings: Session settings (timeout, store base URL)
        transport: Optional transport override, e.g. httpx.MockTransport in tests

    Returns:
        A new httpx.AsyncClient; the caller owns it and must close it
    """
    limits = httpx.Limits(
        max_connections=20,
        max_keepalive_connections=10,
        keepalive_expiry=5.0,
    )

    timeout = httpx.Timeout(
        timeout=settings.http_timeout,
        connect=min(settings.http_timeout, 10.0),
    )

    kwargs: Dict[str, Any] = {
        "base_url": settings.api_base_url,
        "limits": limits,
        "timeout": timeout,
        "headers": DEFAULT_HEADERS,
        "follow_redirects": True,
    }
    if transport is not None:
        kwargs["transport"] = transport
    else:
        kwargs["http2"] = True

    client = httpx.AsyncClient(**kwargs)
    logger.debug(
        "HTTP client created: base_url=%s timeout=%ss",
        settings.api_base_url,
        settings.http_timeout,
    )
    return client
