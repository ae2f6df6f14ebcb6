"""Entity models decoded from API responses."""

from mywaifu_client.models.enums import Season, WaifuListType
from mywaifu_client.models.pagination import PaginationEnvelope
from mywaifu_client.models.series import FilteredSeries, Series, Studio
from mywaifu_client.models.user import User, UserList
from mywaifu_client.models.waifu import Creator, FilteredWaifu, Tag, Waifu, WaifuImage

__all__ = [
    "Creator",
    "FilteredSeries",
    "FilteredWaifu",
    "PaginationEnvelope",
    "Season",
    "Series",
    "Studio",
    "Tag",
    "User",
    "UserList",
    "Waifu",
    "WaifuImage",
    "WaifuListType",
]
