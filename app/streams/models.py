"""
Stream resolution data types.

Candidates come in as magnet references; each one resolves into at most
one stream descriptor, either a direct (unlocked) URL or a peer-to-peer
reference the player resolves itself.
"""

from dataclasses import dataclass, field
from urllib.parse import parse_qs
import re

# BitTorrent v1 info hash: 40 hex characters
INFO_HASH_PATTERN = re.compile(r"^[0-9a-fA-F]{40}$")

BTIH_PATTERN = re.compile(r"urn:btih:(?P<hash>[^&]+)", re.IGNORECASE)


@dataclass(frozen=True)
class FileEntry:
    name: str
    size: int

    @property
    def basename(self) -> str:
        return self.name.rstrip("/").split("/")[-1]


@dataclass(frozen=True)
class CandidateSource:
    reference: str
    info_hash: str
    label: str = ""
    files: tuple[FileEntry, ...] = ()

    @classmethod
    def from_magnet(cls, magnet: str) -> "CandidateSource":
        """
        Build a candidate from a magnet URI.

        The hash is taken verbatim from the `xt=urn:btih:` parameter; it is
        validated later, when a peer-to-peer stream is about to be emitted.
        """
        match = BTIH_PATTERN.search(magnet or "")
        info_hash = match.group("hash").lower() if match else ""

        query = magnet.split("?", 1)[1] if "?" in (magnet or "") else ""
        label = parse_qs(query).get("dn", [""])[0]

        return cls(reference=magnet, info_hash=info_hash, label=label)

    @property
    def has_valid_hash(self) -> bool:
        return bool(INFO_HASH_PATTERN.match(self.info_hash))


@dataclass(frozen=True)
class DirectStream:
    url: str
    title: str

    def to_stremio(self, provider_name: str) -> dict:
        return {
            "name": provider_name,
            "title": self.title,
            "url": self.url,
        }


@dataclass(frozen=True)
class PeerStream:
    info_hash: str
    sources: list[str] = field(default_factory=list)
    title: str = ""

    def to_stremio(self, provider_name: str) -> dict:
        return {
            "name": provider_name,
            "title": self.title,
            "infoHash": self.info_hash,
            "sources": list(self.sources),
        }


StreamDescriptor = DirectStream | PeerStream


# ---------------------------------------------------------------------------
# Per-candidate outcomes
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Direct:
    stream: DirectStream


@dataclass(frozen=True)
class PeerToPeer:
    stream: PeerStream


@dataclass(frozen=True)
class Dropped:
    reason: str


Outcome = Direct | PeerToPeer | Dropped
