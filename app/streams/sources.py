"""
Candidate source providers.

How candidates are discovered (search index, scraper, fixed list) is not
decided here. The stream endpoint asks the provider stored on
`app.state.source_provider`; by default it finds nothing, unless a static
sources file is configured.
"""

import json
from pathlib import Path
from typing import Callable

from fastapi import Request

from streams.models import CandidateSource

SourceProvider = Callable[[str, str], list[CandidateSource]]


def no_sources(media_type: str, content_id: str) -> list[CandidateSource]:
    return []


class StaticSources:
    """
    Fixed mapping of content id -> magnet URIs.

    Episode ids (`tt123:1:2`) are looked up as given.
    """

    def __init__(self, magnets_by_id: dict[str, list[str]]):
        self.magnets_by_id = magnets_by_id

    @classmethod
    def from_file(cls, path) -> "StaticSources":
        """
        Load a JSON object such as {"tt0111161": ["magnet:?xt=..."]}.

        Raises RuntimeError if the file is unreadable or not shaped that way.
        """
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise RuntimeError(f"Could not load sources file {path}: {e}") from e

        if not isinstance(data, dict) or not all(
            isinstance(magnets, list) and all(isinstance(m, str) for m in magnets)
            for magnets in data.values()
        ):
            raise RuntimeError(
                f"Sources file {path} must map content ids to lists of magnet URIs"
            )

        return cls(data)

    def __call__(self, media_type: str, content_id: str) -> list[CandidateSource]:
        return [
            CandidateSource.from_magnet(magnet)
            for magnet in self.magnets_by_id.get(content_id, [])
        ]


def load_source_provider(sources_file: str | None) -> SourceProvider:
    """
    Build the provider for the configured sources file, if any.
    """
    if not sources_file:
        return no_sources

    provider = StaticSources.from_file(Path(sources_file))
    print(f"[INFO] Loaded static sources for {len(provider.magnets_by_id)} titles")
    return provider


def get_source_provider(request: Request) -> SourceProvider:
    return getattr(request.app.state, "source_provider", no_sources)
