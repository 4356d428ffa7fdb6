"""Shared fixtures for the addon test-suite."""
from __future__ import annotations

import os

# Configuration is read at import time; set it before any app module loads.
os.environ["TMDB_API_KEY"] = "test-tmdb-key"
os.environ["DEBRID_API_KEY"] = ""
os.environ["TMDB_LANGUAGE"] = "ar-AE"
os.environ.pop("SOURCES_FILE", None)

import pytest  # noqa: E402
import requests  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from debrid.realdebrid import TorrentInfo  # noqa: E402
from main import create_app  # noqa: E402
from streams.models import FileEntry  # noqa: E402

VALID_HASH = "a" * 40
OTHER_HASH = "0123456789abcdef0123456789abcdef01234567"


def magnet(info_hash: str, name: str = "Movie.2023.1080p") -> str:
    return f"magnet:?xt=urn:btih:{info_hash}&dn={name}"


class FakeResponse:
    """Minimal stand-in for a requests.Response."""

    def __init__(self, payload=None, status_code=200, invalid_json=False):
        self.payload = payload
        self.status_code = status_code
        self.invalid_json = invalid_json

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"{self.status_code} error")

    def json(self):
        if self.invalid_json:
            raise ValueError("not json")
        return self.payload


class FakeSession:
    """Replays queued responses (or raises queued exceptions) in order."""

    def __init__(self, responses):
        self.responses = list(responses)
        self.requests: list[dict] = []

    def request(self, method, url, **kwargs):
        self.requests.append({"method": method, "url": url, **kwargs})
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


class FakeUnlocker:
    """In-memory stand-in for the Real-Debrid client."""

    def __init__(self, files=None, links=None, stream_url="https://rd.example/stream.mp4",
                 fail_on=None):
        self.files = files if files is not None else [FileEntry("movie.mkv", 1000)]
        self.links = links if links is not None else ["https://real-debrid.com/d/abc"]
        self.stream_url = stream_url
        self.fail_on = fail_on
        self.calls: list[tuple[str, str]] = []

    def _check(self, step):
        from debrid.realdebrid import DebridError

        if self.fail_on == step:
            raise DebridError(f"{step} failed")

    def submit(self, magnet_uri: str) -> str:
        self.calls.append(("submit", magnet_uri))
        self._check("submit")
        return f"job-{len(self.calls)}"

    def inspect(self, job_id: str) -> TorrentInfo:
        self.calls.append(("inspect", job_id))
        self._check("inspect")
        return TorrentInfo(files=list(self.files), links=list(self.links))

    def unrestrict(self, link: str) -> str:
        self.calls.append(("unrestrict", link))
        self._check("unrestrict")
        return self.stream_url


@pytest.fixture()
def app():
    """Provide a fresh application with no candidate sources."""

    return create_app()


@pytest.fixture()
def client(app) -> TestClient:
    return TestClient(app)
