"""Decode shapes: how a response body is laid out and which entity it holds."""

from dataclasses import dataclass
from enum import StrEnum

from mywaifu_client.models.base import Entity
from mywaifu_client.models.series import FilteredSeries, Series
from mywaifu_client.models.user import User, UserList
from mywaifu_client.models.waifu import FilteredWaifu, Waifu, WaifuImage


class EntityKind(StrEnum):
    WAIFU = "waifu"
    FILTERED_WAIFU = "filtered-waifu"
    WAIFU_IMAGE = "waifu-image"
    SERIES = "series"
    FILTERED_SERIES = "filtered-series"
    USER = "user"
    USER_LIST = "user-list"

    @property
    def schema(self) -> type[Entity]:
        return ENTITY_SCHEMAS[self]


ENTITY_SCHEMAS: dict[EntityKind, type[Entity]] = {
    EntityKind.WAIFU: Waifu,
    EntityKind.FILTERED_WAIFU: FilteredWaifu,
    EntityKind.WAIFU_IMAGE: WaifuImage,
    EntityKind.SERIES: Series,
    EntityKind.FILTERED_SERIES: FilteredSeries,
    EntityKind.USER: User,
    EntityKind.USER_LIST: UserList,
}


@dataclass(frozen=True, slots=True)
class Single:
    """Body is one JSON object."""

    kind: EntityKind

    def __str__(self) -> str:
        return f"Single({self.kind})"


@dataclass(frozen=True, slots=True)
class ListOf:
    """Body is a JSON array of objects."""

    kind: EntityKind

    def __str__(self) -> str:
        return f"List({self.kind})"


@dataclass(frozen=True, slots=True)
class Paginated:
    """Body is a pagination envelope with the objects under ``data``."""

    kind: EntityKind

    def __str__(self) -> str:
        return f"Paginated({self.kind})"


DecodeShape = Single | ListOf | Paginated
