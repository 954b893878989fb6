# Path: core/datasource/http_source.py
# Purpose: Load user records from a remote JSON endpoint.
# Layer: core/datasource.
# Details: Uses httpx; transport, status, and decode failures are raised as FetchError.

from __future__ import annotations

import logging
from typing import List, Optional

import httpx

from core.models.domain import RawUser
from .base import DataSource, FetchError

logger = logging.getLogger(__name__)


class HttpUserSource(DataSource):
    """DataSource backed by an HTTP GET returning a JSON array."""

    name = "http"

    def __init__(self, url: str, timeout: float = 10.0, client: Optional[httpx.Client] = None) -> None:
        self.url = url
        self.timeout = timeout
        self._client = client

    def load_all(self) -> List[RawUser]:
        logger.debug("Fetching users from %s", self.url)
        try:
            if self._client is not None:
                response = self._client.get(self.url, timeout=self.timeout)
                response.raise_for_status()
                payload = response.json()
            else:
                with httpx.Client(timeout=self.timeout, follow_redirects=True) as client:
                    response = client.get(self.url)
                    response.raise_for_status()
                    payload = response.json()
        except httpx.HTTPStatusError as exc:
            raise FetchError(f"User source returned HTTP {exc.response.status_code}") from exc
        except (httpx.RequestError, httpx.InvalidURL) as exc:
            raise FetchError(f"User source unavailable: {exc}") from exc
        except ValueError as exc:
            raise FetchError("User source returned invalid JSON") from exc
        return self._parse_users(payload)


def fetch_bytes(url: str, timeout: float = 10.0, client: Optional[httpx.Client] = None) -> Optional[bytes]:
    """Download ``url`` and return its body, or None when it cannot be fetched.

    Image URLs come straight from user records, so malformed ones are expected.
    """

    try:
        if client is not None:
            response = client.get(url, timeout=timeout)
        else:
            response = httpx.get(url, timeout=timeout, follow_redirects=True)
        response.raise_for_status()
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        logger.debug("Could not fetch %s: %s", url, exc)
        return None
    return response.content
