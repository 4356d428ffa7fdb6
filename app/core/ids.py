"""
Content identifier parsing.

Stremio addresses titles as IMDb ids (`tt1234567`) or, for items coming
from our own catalogs, `tmdb:<id>`. Series episodes append
`:<season>:<episode>`.
"""

from dataclasses import dataclass
import re

# Examples:
#   tt0111161
#   tt0944947:1:3
#   tmdb:1399:2:5
CONTENT_ID_PATTERN = re.compile(
    r"""
    ^(?P<base>tt\d+ | tmdb:\d+)       # IMDb or TMDB id
    (?::(?P<season>\d+):(?P<episode>\d+))?$   # Optional season/episode
    """,
    re.VERBOSE,
)


class InvalidContentIdError(ValueError):
    """Raised when a content id does not match any supported form."""


@dataclass(frozen=True)
class ContentId:
    raw: str
    base: str
    season: int | None = None
    episode: int | None = None

    @property
    def is_imdb(self) -> bool:
        return self.base.startswith("tt")

    @property
    def tmdb_id(self) -> str | None:
        if self.base.startswith("tmdb:"):
            return self.base.removeprefix("tmdb:")
        return None


def parse_content_id(raw: str) -> ContentId:
    match = CONTENT_ID_PATTERN.match(raw or "")
    if not match:
        raise InvalidContentIdError(f"Unsupported content id: {raw!r}")

    season = match.group("season")
    episode = match.group("episode")

    return ContentId(
        raw=raw,
        base=match.group("base"),
        season=int(season) if season is not None else None,
        episode=int(episode) if episode is not None else None,
    )
