"""Tests for candidate source providers."""
from __future__ import annotations

import json
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from conftest import VALID_HASH, magnet
from main import create_app
from streams.sources import StaticSources, load_source_provider, no_sources


def write_sources(tmp_path: Path, data) -> Path:
    path = tmp_path / "sources.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_no_sources_file_means_no_candidates() -> None:
    assert load_source_provider(None) is no_sources
    assert load_source_provider("") is no_sources


def test_sources_file_maps_ids_to_candidates(tmp_path: Path) -> None:
    path = write_sources(tmp_path, {"tt0111161": [magnet(VALID_HASH, "Film")]})

    provider = load_source_provider(str(path))
    (source,) = provider("movie", "tt0111161")

    assert source.info_hash == VALID_HASH
    assert source.label == "Film"
    assert provider("movie", "tt0000001") == []


@pytest.mark.parametrize(
    "data",
    [
        ["magnet:?xt=urn:btih:x"],
        {"tt0111161": "magnet:?xt=urn:btih:x"},
        {"tt0111161": [1, 2]},
    ],
)
def test_badly_shaped_sources_file_fails_fast(tmp_path: Path, data) -> None:
    with pytest.raises(RuntimeError):
        StaticSources.from_file(write_sources(tmp_path, data))


def test_missing_or_invalid_sources_file_fails_fast(tmp_path: Path) -> None:
    with pytest.raises(RuntimeError):
        StaticSources.from_file(tmp_path / "missing.json")

    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")
    with pytest.raises(RuntimeError):
        StaticSources.from_file(broken)


def test_app_serves_streams_from_sources_file(tmp_path: Path, monkeypatch) -> None:
    from metadata import tmdb

    monkeypatch.setattr(tmdb, "lookup_title", lambda content_id, media_kind: None)
    path = write_sources(tmp_path, {"tt0111161": [magnet(VALID_HASH)]})

    client = TestClient(create_app(source_provider=load_source_provider(str(path))))
    streams = client.get("/stream/movie/tt0111161.json").json()["streams"]

    assert [s["infoHash"] for s in streams] == [VALID_HASH]
