"""
Catalog helpers.

This module maps TMDB discover results into Stremio catalog entries for
the latest Arabic movies and series.
"""

from urllib.parse import parse_qs

from core.config import TMDB_IMAGE_BASE, TMDB_PAGE_SIZE
from metadata.genres import genre_id, genre_name
from metadata.tmdb import discover

# (Stremio type, catalog id) pairs served by this addon
CATALOGS = {
    ("movie", "arabic_movies_latest"): "أفلام عربية حديثة",
    ("series", "arabic_series_latest"): "مسلسلات عربية حديثة",
}


class UnsupportedCatalogError(LookupError):
    pass


class CatalogUnavailableError(RuntimeError):
    pass


def parse_extra(extra: str | None) -> dict:
    """
    Parse a Stremio extras path segment such as `skip=40&genre=Drama`.
    """
    if not extra:
        return {}

    return {key: values[0] for key, values in parse_qs(extra).items() if values}


def page_for_skip(skip) -> int:
    """
    Convert a Stremio `skip` offset into a 1-based TMDB page number.
    """
    try:
        skip = int(skip)
    except (TypeError, ValueError):
        return 1

    if skip < 0:
        return 1
    return skip // TMDB_PAGE_SIZE + 1


def _image(size, path):
    return f"{TMDB_IMAGE_BASE}/{size}{path}" if path else None


def to_meta(item: dict, media_type: str) -> dict:
    """
    Map a single TMDB result into a Stremio meta preview.
    """
    return {
        "id": f"tmdb:{item['id']}",
        "type": media_type,
        "name": item.get("title") or item.get("name"),
        "poster": _image("w500", item.get("poster_path")),
        "background": _image("original", item.get("backdrop_path")),
        "description": item.get("overview"),
        "releaseInfo": item.get("release_date") or item.get("first_air_date"),
        "genres": [genre_name(gid) for gid in item.get("genre_ids") or []],
    }


def get_catalog(media_type: str, catalog_id: str, extra: dict | None = None):
    """
    Return the Stremio metas for one catalog page.

    Raises UnsupportedCatalogError for unknown type/id pairs and
    CatalogUnavailableError if TMDB could not be reached.
    """
    if (media_type, catalog_id) not in CATALOGS:
        raise UnsupportedCatalogError(
            f"Unsupported catalog type or ID: {media_type}/{catalog_id}"
        )

    extra = extra or {}
    page = page_for_skip(extra.get("skip"))

    results = discover(media_type, page=page, genre_id=genre_id(extra.get("genre")))
    if results is None:
        raise CatalogUnavailableError(
            "Could not fetch catalog from TMDB. Please check your TMDB API Key."
        )

    return [to_meta(item, media_type) for item in results]
