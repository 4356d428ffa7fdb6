"""
TMDB genre lookup table.

TMDB list endpoints only return numeric genre ids; this fixed table maps
them to the English labels shown in Stremio.
"""

GENRES = {
    28: "Action",
    12: "Adventure",
    16: "Animation",
    35: "Comedy",
    80: "Crime",
    99: "Documentary",
    18: "Drama",
    10751: "Family",
    14: "Fantasy",
    36: "History",
    27: "Horror",
    10402: "Music",
    9648: "Mystery",
    10749: "Romance",
    878: "Science Fiction",
    10770: "TV Movie",
    53: "Thriller",
    10752: "War",
    37: "Western",
}

UNKNOWN_GENRE = "Unknown"


def genre_name(genre_id) -> str:
    return GENRES.get(genre_id, UNKNOWN_GENRE)


def genre_id(name: str | None) -> int | None:
    """
    Reverse lookup used by the catalog `genre` extra (case-insensitive).
    """
    if not name:
        return None

    wanted = name.strip().lower()
    for gid, label in GENRES.items():
        if label.lower() == wanted:
            return gid
    return None


def genre_options() -> list[str]:
    """
    Genre labels advertised in the manifest, sorted alphabetically.
    """
    return sorted(GENRES.values())
