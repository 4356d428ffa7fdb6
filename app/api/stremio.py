"""
Public Stremio addon endpoints.

This module exposes:
- the addon manifest
- catalogs (latest Arabic movies and series, via TMDB)
- stream lookup for movies and episodes

Stream lookups never error towards Stremio: malformed ids and upstream
failures produce an empty stream list.
"""

from fastapi import APIRouter, Depends, HTTPException, Request

from core.config import RESOLVE_WORKERS, STREAM_PROVIDER_NAME
from core.ids import InvalidContentIdError, parse_content_id
from debrid.realdebrid import RealDebridClient
from metadata.catalog import (
    CATALOGS,
    CatalogUnavailableError,
    UnsupportedCatalogError,
    get_catalog,
    parse_extra,
)
from metadata.genres import genre_options
from metadata.tmdb import TMDB_KINDS, display_title
from streams.resolver import resolve
from streams.sources import SourceProvider, get_source_provider

ADDON_VERSION = "1.0.0"

router = APIRouter()


# ------------------------------------------------------------
# MANIFEST
# ------------------------------------------------------------

@router.get("/manifest.json")
def manifest():
    return {
        "id": "com.youraddon.arabiccontent",
        "version": ADDON_VERSION,
        "name": "Arabic Stream Hub",
        "description": (
            "Find and stream the latest Arabic movies, series, and shows "
            "with optional debrid integration."
        ),
        "behaviorHints": {
            "configurable": True,
            "configurationRequired": False,
        },
        "resources": [
            "catalog",
            {
                "name": "stream",
                "types": ["movie", "series"],
                "idPrefixes": ["tt", "tmdb:"],
            },
        ],
        "types": ["movie", "series"],
        "catalogs": [
            {
                "type": media_type,
                "id": catalog_id,
                "name": name,
                "extra": [
                    {"name": "genre", "options": genre_options(), "isRequired": False},
                    {"name": "skip", "isRequired": False},
                ],
            }
            for (media_type, catalog_id), name in CATALOGS.items()
        ],
        "idPrefixes": ["tt", "tmdb:"],
    }


# ------------------------------------------------------------
# CATALOGS
# extra format: skip=20&genre=Drama
# ------------------------------------------------------------

@router.get("/catalog/{media_type}/{catalog_id}.json")
@router.get("/catalog/{media_type}/{catalog_id}/{extra}.json")
def catalog(media_type: str, catalog_id: str, extra: str | None = None):
    try:
        metas = get_catalog(media_type, catalog_id, parse_extra(extra))
    except UnsupportedCatalogError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except CatalogUnavailableError as e:
        print(f"[ERROR] Error fetching catalog: {media_type}/{catalog_id}")
        raise HTTPException(status_code=502, detail=str(e))

    return {"metas": metas}


# ------------------------------------------------------------
# STREAMS
# content_id format: ttXXXXXX, tmdb:XXXX, optionally :S:E
# ------------------------------------------------------------

@router.get("/stream/{media_type}/{content_id}.json")
def stream(
    media_type: str,
    content_id: str,
    request: Request,
    sources: SourceProvider = Depends(get_source_provider),
):
    if media_type not in TMDB_KINDS:
        return {"streams": []}

    try:
        parse_content_id(content_id)
    except InvalidContentIdError:
        return {"streams": []}

    candidates = sources(media_type, content_id)
    if not candidates:
        return {"streams": []}

    # One snapshot per request; later configure updates do not affect it
    credential = request.app.state.credentials.get()
    unlocker_factory = getattr(request.app.state, "unlocker_factory", RealDebridClient)

    streams = resolve(
        content_id,
        candidates,
        credential=credential,
        title=display_title(content_id, media_type),
        unlocker_factory=unlocker_factory,
        max_workers=RESOLVE_WORKERS,
    )

    return {"streams": [s.to_stremio(STREAM_PROVIDER_NAME) for s in streams]}


@router.get("/health")
def health():
    return {"status": "ok", "version": ADDON_VERSION}
