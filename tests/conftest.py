import json
import pytest
import requests
from typing import Any, List, Optional


def make_response(status_code: int, payload: Any = None, body: Optional[bytes] = None) -> requests.Response:
    resp = requests.Response()
    resp.status_code = status_code
    resp.reason = "Stubbed"
    resp.url = "https://api.themoviedb.org/3/movie/stub"
    resp.headers["Content-Type"] = "application/json"
    if body is not None:
        resp._content = body
    else:
        resp._content = json.dumps(payload if payload is not None else {}).encode()

    return resp


class StubSession(requests.Session):
    """A session that answers every GET with a canned response."""

    def __init__(self, response: Optional[requests.Response] = None, error: Optional[Exception] = None):
        super().__init__()
        self.response = response
        self.error = error
        self.calls: List[dict] = []

    def get(self, url, **kwargs):
        self.calls.append({"url": url, "headers": dict(self.headers), **kwargs})
        if self.error is not None:
            raise self.error

        return self.response


@pytest.fixture
def movie_payload():
    return {
        "dates": {"maximum": "2024-06-12", "minimum": "2024-05-01"},
        "page": 1,
        "results": [
            {
                "id": 603,
                "title": "The Matrix",
                "release_date": "1999-03-31",
                "vote_average": 8.7,
                "vote_count": 20000,
            },
            {
                "id": 27205,
                "title": "Inception",
                "release_date": "2010-07-16",
                "vote_average": 8.4,
                "vote_count": 35123,
            },
        ],
        "total_pages": 42,
        "total_results": 830,
    }


@pytest.fixture
def stub_session():
    def factory(status_code: int = 200, payload: Any = None, body: Optional[bytes] = None, error: Optional[Exception] = None):
        return StubSession(make_response(status_code, payload, body), error)

    return factory


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Run with no token in the environment, from an empty directory."""
    monkeypatch.delenv("TMDB_ACCESS_TOKEN", raising=False)
    monkeypatch.chdir(tmp_path)

    return tmp_path
