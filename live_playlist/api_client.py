"""
HTTP client for the match API.
Unauthenticated JSON GETs, one attempt per call, no caching.
"""
import logging
from typing import Any, Optional

import requests

from live_playlist.errors import HttpError

logger = logging.getLogger("api_client")


class ApiClient:
    """
    Thin wrapper around a requests.Session bound to one API base URL.

    Usage:
        with ApiClient(settings.api_base_url) as client:
            payload = client.fetch_data(client.fixture_url("20240101"))
    """

    def __init__(
        self,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ):
        """
        Args:
            base_url: API root, e.g. "https://api.vebo.xyz/api"
            session: HTTP session to use (a new one is created if omitted)
            timeout: Per-request timeout in seconds; None leaves it unset
        """
        self.base_url = base_url.rstrip("/")
        self._session = session or requests.Session()
        self._timeout = timeout

    @property
    def match_api_url(self) -> str:
        return f"{self.base_url}/match"

    def fixture_url(self, date: str) -> str:
        """Fixture-by-date endpoint; date is YYYYMMDD."""
        return f"{self.match_api_url}/fixture/home/{date}"

    def meta_url(self, match_id: str) -> str:
        """Per-match metadata endpoint."""
        return f"{self.match_api_url}/{match_id}/meta"

    def fetch_data(self, url: str) -> Any:
        """
        GET a URL and return its parsed JSON body.

        Raises:
            HttpError: on a non-2xx status
            requests.RequestException: on network failure
            ValueError: if the body is not valid JSON
        """
        logger.debug(f"GET {url}")
        response = self._session.get(url, timeout=self._timeout)

        if not response.ok:
            raise HttpError(response.status_code)

        return response.json()

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> "ApiClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
