"""Fetch remote HTML fragments with retries on transient failures."""

from __future__ import annotations

import asyncio
import logging
from typing import Final

import httpx

from sectionize.config import (
    SECTIONIZE_FETCH_BACKOFF_S,
    SECTIONIZE_FETCH_MAX_RETRIES,
    SECTIONIZE_FETCH_TIMEOUT_S,
    SECTIONIZE_USER_AGENT,
)
from sectionize.exceptions import FetchError

logger = logging.getLogger(__name__)

RETRY_STATUS_CODES: Final[frozenset[int]] = frozenset({429, 500, 502, 503, 504})

_MAX_REDIRECTS: Final[int] = 5


async def fetch_html(
    url: str,
    *,
    client: httpx.AsyncClient | None = None,
    max_retries: int = SECTIONIZE_FETCH_MAX_RETRIES,
    backoff_s: float = SECTIONIZE_FETCH_BACKOFF_S,
) -> str:
    """Fetch HTML from ``url``.

    Args:
        url: The URL to fetch.
        client: Optional shared client. A short-lived one is created if None.
        max_retries: Retries after the first attempt for 429/5xx responses
            and network errors.
        backoff_s: Base delay, doubled after every failed attempt.

    Returns:
        The decoded response body.

    Raises:
        FetchError: On 404, other client errors, or when retries run out.
    """
    if client is not None:
        return await _fetch(client, url, max_retries=max_retries, backoff_s=backoff_s)

    async with httpx.AsyncClient(
        timeout=httpx.Timeout(SECTIONIZE_FETCH_TIMEOUT_S),
        headers={"User-Agent": SECTIONIZE_USER_AGENT},
        follow_redirects=True,
        max_redirects=_MAX_REDIRECTS,
    ) as new_client:
        return await _fetch(new_client, url, max_retries=max_retries, backoff_s=backoff_s)


async def _fetch(
    client: httpx.AsyncClient, url: str, *, max_retries: int, backoff_s: float
) -> str:
    last_error: str | None = None

    for attempt in range(max_retries + 1):
        try:
            response = await client.get(url)
        except httpx.RequestError as exc:
            last_error = str(exc) or type(exc).__name__
        else:
            if response.status_code == 404:
                raise FetchError(f"Resource not found at {url}")
            if response.status_code not in RETRY_STATUS_CODES:
                try:
                    response.raise_for_status()
                except httpx.HTTPStatusError as exc:
                    raise FetchError(f"HTTP {response.status_code} from {url}") from exc
                return response.text
            last_error = f"HTTP {response.status_code}"

        if attempt < max_retries:
            delay = backoff_s * (2**attempt)
            logger.debug("Retrying %s in %.2fs after %s", url, delay, last_error)
            await asyncio.sleep(delay)

    raise FetchError(f"Failed to fetch {url}: {last_error}")
