"""Path parameters with a fixed set of values."""

from enum import StrEnum


class Season(StrEnum):
    """Anime airing season."""

    SPRING = "spring"
    SUMMER = "summer"
    FALL = "fall"
    WINTER = "winter"


class WaifuListType(StrEnum):
    """Per-user waifu list."""

    CREATED = "created"
    LIKED = "likes"
    TRASHED = "trash"
