"""Retry utility for idempotent reads with exponential backoff."""
from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable, TypeVar

import httpx


logger = logging.getLogger(__name__)

T = TypeVar('T')

# Status codes worth a second attempt; anything else in 4xx is final.
RETRYABLE_STATUS = frozenset({429, 500, 502, 503, 504})


def is_transient(exc: BaseException) -> bool:
    """Connect errors, timeouts and retryable statuses are transient."""
    if isinstance(exc, httpx.HTTPStatusError):
        return exc.response.status_code in RETRYABLE_STATUS
    return isinstance(exc, (httpx.TransportError, asyncio.TimeoutError))


async def retry_async(
    func: Callable[[], Awaitable[T]],
    max_attempts: int = 3,
    initial_delay: float = 1.0,
    backoff_factor: float = 2.0,
) -> T:
    """
    Retry an async function with exponential backoff.

    Only transient failures are retried; everything else propagates on the
    first attempt. Never wrap non-idempotent calls (save, unsave, count
    increments) in this helper.

    Args:
        func: The async function to retry
        max_attempts: Maximum number of attempts (default: 3)
        initial_delay: Initial delay in seconds (default: 1.0)
        backoff_factor: Multiplier for delay between retries (default: 2.0)

    Returns:
        The result of the function call

    Raises:
        The last exception if all retries fail
    """
    delay = initial_delay

    for attempt in range(1, max_attempts + 1):
        try:
            return await func()
        except Exception as exc:
            if not is_transient(exc) or attempt >= max_attempts:
                if attempt > 1:
                    logger.error(f"All {attempt} attempts failed. Last error: {exc}")
                raise

            logger.warning(
                f"Attempt {attempt}/{max_attempts} failed: {exc}. "
                f"Retrying in {delay:.1f}s..."
            )
            if delay > 0:
                await asyncio.sleep(delay)
            delay *= backoff_factor

    raise RuntimeError("retry_async called with max_attempts < 1")
