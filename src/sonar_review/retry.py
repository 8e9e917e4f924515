# src/sonar_review/retry.py
import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import TypeVar

import httpx
import openai


logger = logging.getLogger(__name__)

T = TypeVar("T")

# Fallback for exception types we have no structured knowledge of
TRANSIENT_MARKERS = (
    "apiconnectionerror",
    "connection refused",
    "connection reset",
    "timed out",
    "name or service not known",
    "temporary failure in name resolution",
    "fetch failed",
    "enotfound",
    "etimedout",
    "econnrefused",
)


def is_transient_error(exc: BaseException) -> bool:
    """Return True for connectivity failures worth retrying."""
    # APIConnectionError covers APITimeoutError
    if isinstance(exc, (openai.APIConnectionError, httpx.TransportError)):
        return True
    if isinstance(exc, (openai.APIStatusError, httpx.HTTPStatusError)):
        return False

    # Wrapped transport errors, e.g. raise NetworkError(...) from httpx.ConnectError
    if exc.__cause__ is not None and exc.__cause__ is not exc:
        if is_transient_error(exc.__cause__):
            return True

    message = f"{type(exc).__name__}: {exc}".lower()
    return any(marker in message for marker in TRANSIENT_MARKERS)


async def with_retry(
    operation: Callable[[], Awaitable[T]],
    retries: int = 2,
    base_delay_ms: int = 500,
    is_transient: Callable[[BaseException], bool] = is_transient_error,
) -> T:
    """Await operation(), retrying transient failures with exponential backoff.

    Waits base_delay_ms * 2**attempt between attempts, so retries=2 allows
    three attempts in total. Non-transient failures are raised immediately.
    """
    attempt = 0
    while True:
        try:
            return await operation()
        except Exception as e:
            if not is_transient(e) or attempt >= retries:
                raise
            delay = base_delay_ms * 2 ** attempt / 1000
            logger.warning(f"Transient failure (attempt {attempt + 1}/{retries + 1}), retrying in {delay:.1f}s: {e}")
            await asyncio.sleep(delay)
            attempt += 1
