"""Series entities."""

from mywaifu_client.models.base import Entity


class Studio(Entity):
    id: int
    name: str


class FilteredSeries(Entity):
    """Condensed series as returned by list, airing and search endpoints."""

    id: int
    name: str
    slug: str | None = None
    original_name: str | None = None
    romaji_name: str | None = None
    type: str | None = None
    url: str | None = None
    display_picture: str | None = None
    description: str | None = None
    relevance: int | None = None


class Series(Entity):
    """Full series record."""

    id: int
    name: str
    slug: str | None = None
    original_name: str | None = None
    romaji_name: str | None = None
    type: str | None = None
    url: str | None = None
    display_picture: str | None = None
    description: str | None = None
    studio: Studio | None = None
    release: str | None = None
    airing_start: str | None = None
    airing_end: str | None = None
    episode_count: int | None = None
