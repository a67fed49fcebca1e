"""
Shared test doubles: a fake HTTP session serving canned API responses.
"""
import json
from typing import Any, Dict, List, Optional

import pytest
import requests

from live_playlist.api_client import ApiClient

BASE_URL = "https://api.test/api"


def _make_response(status_code: int = 200, payload: Any = None, body: Optional[str] = None) -> requests.Response:
    """Build a real requests.Response with a JSON (or raw) body."""
    response = requests.Response()
    response.status_code = status_code
    response.encoding = "utf-8"
    text = body if body is not None else json.dumps(payload)
    response._content = text.encode("utf-8")
    return response


class FakeSession:
    """Stands in for requests.Session; routes GETs to canned responses by URL."""

    def __init__(self):
        self.routes: Dict[str, Any] = {}
        self.calls: List[Dict[str, Any]] = []
        self.closed = False

    def route(self, url: str, payload: Any = None, status_code: int = 200, body: Optional[str] = None) -> None:
        self.routes[url] = _make_response(status_code, payload, body)

    def fail(self, url: str, error: Exception) -> None:
        self.routes[url] = error

    def get(self, url: str, timeout: Optional[float] = None) -> requests.Response:
        self.calls.append({"url": url, "timeout": timeout})
        route = self.routes.get(url)
        if route is None:
            return _make_response(404, {"error": "not found"})
        if isinstance(route, Exception):
            raise route
        return route

    def close(self) -> None:
        self.closed = True

    @property
    def requested_urls(self) -> List[str]:
        return [c["url"] for c in self.calls]


# =============================================================================
# URL / payload builders
# =============================================================================

def fixture_url(date: str) -> str:
    return f"{BASE_URL}/match/fixture/home/{date}"


def meta_url(match_id: str) -> str:
    return f"{BASE_URL}/match/{match_id}/meta"


def match_payload(
    match_id: str,
    is_live: bool = True,
    name: str = "Arsenal vs Chelsea",
    tournament: str = "Premier League",
    commentators: Optional[List[str]] = None,
) -> Dict[str, Any]:
    """A fixture entry as the API returns it (with an extra unused field)."""
    return {
        "id": match_id,
        "name": name,
        "is_live": is_live,
        "tournament": {"name": tournament, "logo": f"https://img.test/{match_id}.png"},
        "commentators": [{"name": n} for n in (commentators or [])],
        "home": {"name": "ignored"},
    }


def meta_payload(match_id: str, play_urls: List[Dict[str, str]]) -> Dict[str, Any]:
    return {"data": {"id": match_id, "play_urls": play_urls}}


class Api:
    """Namespace handed to tests through the `api` fixture."""
    base_url = BASE_URL
    fixture_url = staticmethod(fixture_url)
    meta_url = staticmethod(meta_url)
    match = staticmethod(match_payload)
    meta = staticmethod(meta_payload)


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def api():
    """URL and payload builders for the fake upstream API."""
    return Api


@pytest.fixture
def fake_session():
    return FakeSession()


@pytest.fixture
def client(fake_session):
    return ApiClient(BASE_URL, session=fake_session)
