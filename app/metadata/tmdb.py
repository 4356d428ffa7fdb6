"""
TMDB metadata lookup helpers.

This module provides thin wrappers around the TMDB API for listing
popular titles in the configured language and for resolving a content id
into the display title used by stream labels.
"""

import requests

from core.config import TMDB_API_KEY, TMDB_BASE, TMDB_LANGUAGE, REQUEST_TIMEOUT
from core.ids import InvalidContentIdError, parse_content_id

# Stremio media types mapped to TMDB path segments
TMDB_KINDS = {
    "movie": "movie",
    "series": "tv",
}


def _tmdb_get(path, params=None):
    """
    Perform a GET request against the TMDB API and return parsed JSON.
    """
    if params is None:
        params = {}

    params["api_key"] = TMDB_API_KEY
    params.setdefault("language", TMDB_LANGUAGE)

    try:
        resp = requests.get(
            f"{TMDB_BASE}{path}",
            params=params,
            timeout=REQUEST_TIMEOUT,
        )
        resp.raise_for_status()
        return resp.json()
    except requests.exceptions.RequestException as e:
        print(f"[ERROR] TMDB request failed: {e}")
        return None


def discover(media_kind: str, page: int = 1, genre_id: int | None = None):
    """
    List popular titles for a Stremio media kind ("movie" or "series").

    Returns the raw TMDB result dicts, or None if TMDB could not be reached.
    """
    params = {
        "sort_by": "popularity.desc",
        "page": page,
    }
    if genre_id:
        params["with_genres"] = genre_id

    data = _tmdb_get(f"/discover/{TMDB_KINDS[media_kind]}", params)
    if data is None:
        return None

    return data.get("results", [])


def _find_by_imdb(imdb_id: str, media_kind: str):
    found = _tmdb_get(f"/find/{imdb_id}", {"external_source": "imdb_id"})
    if not found:
        return None

    key = "movie_results" if media_kind == "movie" else "tv_results"
    results = found.get(key) or []
    return results[0] if results else None


def lookup_title(content_id: str, media_kind: str):
    """
    Lookup the display title and year for a content id.

    Accepts IMDb ids (resolved through /find) and `tmdb:` ids. Episode
    suffixes are ignored; the series title is returned.

    Returns {"title", "year"} or None if no match is found.
    """
    try:
        cid = parse_content_id(content_id)
    except InvalidContentIdError:
        return None

    if media_kind not in TMDB_KINDS:
        return None

    if cid.is_imdb:
        details = _find_by_imdb(cid.base, media_kind)
    else:
        details = _tmdb_get(f"/{TMDB_KINDS[media_kind]}/{cid.tmdb_id}")

    if not details:
        return None

    title = details.get("title") or details.get("name")
    if not title:
        return None

    date = details.get("release_date") or details.get("first_air_date") or ""

    return {
        "title": title,
        "year": date[:4],
    }


def display_title(content_id: str, media_kind: str) -> str:
    """
    Human-readable label for stream titles, with a raw-id fallback.
    """
    meta = lookup_title(content_id, media_kind)

    if not meta:
        print(f"[WARN] Could not get TMDB details for {content_id}")
        return f"Content ID: {content_id}"

    if meta["year"]:
        return f"{meta['title']} ({meta['year']})"
    return meta["title"]
