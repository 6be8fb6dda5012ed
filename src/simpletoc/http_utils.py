"""HTTP utilities for loading documents with retry logic."""

from __future__ import annotations

import logging
import time
from typing import Final

import httpx

from simpletoc.config import (
    SIMPLETOC_FETCH_BACKOFF_S,
    SIMPLETOC_FETCH_MAX_RETRIES,
    SIMPLETOC_FETCH_TIMEOUT_S,
    SIMPLETOC_USER_AGENT,
)
from simpletoc.exceptions import FetchError

logger = logging.getLogger(__name__)

RETRY_STATUS_CODES: Final[frozenset[int]] = frozenset({429, 500, 502, 503, 504})

_MAX_REDIRECTS: Final[int] = 5


def fetch_text(url: str, *, client: httpx.Client | None = None) -> str:
    """Fetch a document from a URL, retrying transient failures.

    Args:
        url: The URL to fetch.
        client: Optional httpx.Client to reuse. If not provided, a new client
            is created for this request.

    Returns:
        The decoded response body.

    Raises:
        FetchError: If the URL returns 404, or the fetch still fails after all
            retries.
    """
    if client is not None:
        return _fetch(client, url)

    with httpx.Client(
        timeout=httpx.Timeout(SIMPLETOC_FETCH_TIMEOUT_S),
        headers={"User-Agent": SIMPLETOC_USER_AGENT},
        follow_redirects=True,
        max_redirects=_MAX_REDIRECTS,
    ) as new_client:
        return _fetch(new_client, url)


def _fetch(client: httpx.Client, url: str) -> str:
    last_exc: Exception | None = None

    for attempt in range(SIMPLETOC_FETCH_MAX_RETRIES + 1):
        try:
            response = client.get(url)

            if response.status_code == 404:
                raise FetchError(f"Document not found at {url}")

            if response.status_code in RETRY_STATUS_CODES:
                last_exc = FetchError(f"HTTP {response.status_code} from {url}")
            else:
                response.raise_for_status()
                return response.text
        except (httpx.RequestError, httpx.HTTPStatusError) as exc:
            last_exc = exc

        if attempt < SIMPLETOC_FETCH_MAX_RETRIES:
            backoff = SIMPLETOC_FETCH_BACKOFF_S * (2**attempt)
            logger.debug("Retrying %s in %.2fs after: %s", url, backoff, last_exc)
            time.sleep(backoff)

    raise FetchError(f"Failed to fetch {url}: {last_exc}")
