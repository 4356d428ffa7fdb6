"""
Stream resolver.

Turns a content id plus a list of candidate sources into Stremio stream
descriptors. With an unlock credential each candidate is first pushed
through Real-Debrid; anything that fails there falls back to a plain
peer-to-peer stream. Per-candidate failures never abort the request.
"""

from concurrent.futures import ThreadPoolExecutor
from typing import Protocol

from core.ids import parse_content_id
from debrid.realdebrid import DebridError, NotResolvableError, RealDebridClient
from streams.models import (
    CandidateSource,
    Direct,
    DirectStream,
    Dropped,
    FileEntry,
    Outcome,
    PeerStream,
    PeerToPeer,
)

VIDEO_EXTENSIONS = (".mkv", ".mp4", ".avi", ".mov", ".webm")

DIRECT_TAG = "[RD+]"
PEER_TAG = "[P2P]"


class Unlocker(Protocol):
    def submit(self, magnet: str) -> str: ...

    def inspect(self, job_id: str): ...

    def unrestrict(self, link: str) -> str: ...


def is_video(name: str) -> bool:
    return name.lower().endswith(VIDEO_EXTENSIONS)


def select_main_file(files) -> FileEntry | None:
    """
    Pick the largest video file; on equal size the first one seen wins.
    """
    best = None
    for entry in files:
        if not is_video(entry.name):
            continue
        if best is None or entry.size > best.size:
            best = entry
    return best


def unlock(candidate: CandidateSource, unlocker: Unlocker) -> DirectStream:
    """
    Run submit -> inspect -> unrestrict for one candidate.

    Raises DebridError (or NotResolvableError) on any failed step.
    """
    job_id = unlocker.submit(candidate.reference)
    info = unlocker.inspect(job_id)

    main_file = select_main_file(info.files)
    if main_file is None:
        raise NotResolvableError("no video file in torrent")
    if not info.links:
        raise NotResolvableError("no ready link yet")

    url = unlocker.unrestrict(info.links[0])
    return DirectStream(url=url, title=f"{DIRECT_TAG} {main_file.basename}")


def peer_outcome(candidate: CandidateSource, title: str) -> Outcome:
    if not candidate.has_valid_hash:
        print(f"[WARN] Invalid magnet link format: {candidate.reference}")
        return Dropped(reason="invalid info hash")

    return PeerToPeer(
        PeerStream(
            info_hash=candidate.info_hash,
            sources=[candidate.reference],
            title=f"{PEER_TAG} {title} (Torrent)",
        )
    )


def decide(candidate: CandidateSource, title: str, unlocker: Unlocker | None = None) -> Outcome:
    """
    Resolve a single candidate into a Direct, PeerToPeer, or Dropped outcome.
    """
    if unlocker is not None:
        try:
            return Direct(unlock(candidate, unlocker))
        except NotResolvableError as e:
            print(f"[WARN] No streamable files found on debrid for magnet: {candidate.reference} ({e})")
        except DebridError as e:
            print(f"[WARN] Debrid service failed for magnet {candidate.reference}: {e}")

    return peer_outcome(candidate, title)


def resolve(
    content_id: str,
    candidates,
    credential: str | None = None,
    title: str | None = None,
    unlocker_factory=RealDebridClient,
    max_workers: int = 1,
):
    """
    Resolve candidates into stream descriptors, preserving input order.

    `credential` is a snapshot of the unlock token; without one every
    candidate goes straight to peer-to-peer. `title` is the display label
    for peer-to-peer streams and defaults to the raw content id.

    Raises InvalidContentIdError for a malformed content id; never raises
    for individual candidate failures.
    """
    parse_content_id(content_id)

    candidates = list(candidates)
    if not candidates:
        return []

    title = title or f"Content ID: {content_id}"

    def _unlocker():
        return unlocker_factory(credential) if credential else None

    if max_workers > 1 and len(candidates) > 1:
        # One client per task; a requests.Session must not be shared across threads.
        # map() yields in submission order regardless of completion order.
        with ThreadPoolExecutor(max_workers=min(max_workers, len(candidates))) as pool:
            outcomes = list(pool.map(lambda c: decide(c, title, _unlocker()), candidates))
    else:
        unlocker = _unlocker()
        outcomes = [decide(c, title, unlocker) for c in candidates]

    return [o.stream for o in outcomes if not isinstance(o, Dropped)]
