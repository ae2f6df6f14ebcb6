"""Waifu entities."""

from pydantic import Field

from mywaifu_client.models.base import Entity
from mywaifu_client.models.series import FilteredSeries


class Creator(Entity):
    """User who submitted a waifu."""

    id: int
    name: str


class Tag(Entity):
    id: int
    name: str
    slug: str | None = None


class FilteredWaifu(Entity):
    """Condensed waifu as returned by list and search endpoints."""

    id: int
    name: str
    slug: str | None = None
    original_name: str | None = None
    romaji_name: str | None = None
    romaji: str | None = None
    type: str | None = None
    url: str | None = None
    display_picture: str | None = None
    description: str | None = None
    likes: int | None = None
    trash: int | None = None
    relevance: int | None = None
    appearances: list[FilteredSeries] = Field(default_factory=list)


class Waifu(Entity):
    """Full waifu profile."""

    id: int
    name: str
    slug: str | None = None
    creator: Creator | None = None
    original_name: str | None = None
    romaji_name: str | None = None
    display_picture: str | None = None
    description: str | None = None
    weight: str | None = None
    height: str | None = None
    bust: str | None = None
    hip: str | None = None
    waist: str | None = None
    blood_type: str | None = None
    origin: str | None = None
    age: int | None = None
    birthday_month: str | None = None
    birthday_day: int | None = None
    birthday_year: str | None = None
    likes: int | None = None
    trash: int | None = None
    popularity_rank: int | None = None
    like_rank: int | None = None
    trash_rank: int | None = None
    husbando: bool | None = None
    nsfw: bool | None = None
    url: str | None = None
    tags: list[Tag] = Field(default_factory=list)
    appearances: list[FilteredSeries] = Field(default_factory=list)
    series: FilteredSeries | None = None


class WaifuImage(Entity):
    """Gallery image attached to a waifu."""

    id: int
    waifu_id: int | None = None
    thumbnail: str | None = None
    url: str | None = None
    width: int | None = None
    height: int | None = None
    is_nsfw: bool | None = None
