"""
Real-Debrid unlock client.

Wraps the three REST calls used to turn a magnet into a direct link:
addMagnet (submit), torrents/info (inspect), and unrestrict/link.
Every failure surfaces as DebridError so callers can fall back cleanly.
"""

from dataclasses import dataclass, field

import requests

from core.config import REAL_DEBRID_BASE_URL, REQUEST_TIMEOUT
from streams.models import FileEntry


class DebridError(Exception):
    """Network or service-reported failure from the unlock service."""


class NotResolvableError(DebridError):
    """The job exists but has no playable file or ready link yet."""


@dataclass
class TorrentInfo:
    files: list[FileEntry] = field(default_factory=list)
    links: list[str] = field(default_factory=list)


class RealDebridClient:
    def __init__(
        self,
        api_key: str,
        base_url: str = REAL_DEBRID_BASE_URL,
        timeout: float = REQUEST_TIMEOUT,
        session=None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.headers = {"Authorization": f"Bearer {api_key}"}

    def _request(self, method, path, data=None) -> dict:
        """
        Perform an authorized request and return parsed JSON.

        Transport errors, HTTP errors, non-JSON bodies, and payloads
        carrying an `error` field all raise DebridError.
        """
        try:
            resp = self.session.request(
                method,
                f"{self.base_url}{path}",
                headers=self.headers,
                data=data,
                timeout=self.timeout,
            )
            resp.raise_for_status()
            payload = resp.json()
        except requests.exceptions.RequestException as e:
            raise DebridError(f"{method} {path} failed: {e}") from e
        except ValueError as e:
            raise DebridError(f"{method} {path} returned invalid JSON") from e

        if not isinstance(payload, dict):
            raise DebridError(f"{method} {path} returned unexpected payload")

        if payload.get("error"):
            raise DebridError(f"{method} {path}: {payload['error']}")

        return payload

    def submit(self, magnet: str) -> str:
        """
        Register a magnet and return the Real-Debrid torrent id.
        """
        payload = self._request("POST", "/torrents/addMagnet", {"magnet": magnet})

        torrent_id = payload.get("id")
        if not torrent_id:
            raise DebridError("addMagnet returned no torrent id")
        return torrent_id

    def inspect(self, torrent_id: str) -> TorrentInfo:
        """
        Fetch the file listing and ready links for a torrent.

        Raises DebridError if the listing is not shaped as expected.
        """
        payload = self._request("GET", f"/torrents/info/{torrent_id}")

        raw_files = payload.get("files") or []
        raw_links = payload.get("links") or []
        if not isinstance(raw_files, list) or not isinstance(raw_links, list):
            raise DebridError(f"torrents/info/{torrent_id} returned malformed listing")

        try:
            files = [
                FileEntry(name=str(f.get("path") or ""), size=int(f.get("bytes") or 0))
                for f in raw_files
            ]
        except (TypeError, ValueError, AttributeError) as e:
            raise DebridError(f"torrents/info/{torrent_id} returned malformed file entry: {e}") from e

        return TorrentInfo(files=files, links=[str(link) for link in raw_links if link])

    def unrestrict(self, link: str) -> str:
        """
        Exchange a hoster link for a direct download URL.
        """
        payload = self._request("POST", "/unrestrict/link", {"link": link})

        url = payload.get("stream_link") or payload.get("download")
        if not url:
            raise DebridError("unrestrict returned no link")
        return url
