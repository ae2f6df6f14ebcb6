"""User profiles and user-curated lists."""

from pydantic import Field

from mywaifu_client.models.base import Entity
from mywaifu_client.models.waifu import FilteredWaifu


class User(Entity):
    id: int
    name: str
    avatar: str | None = None
    bio: str | None = None
    url: str | None = None
    created_at: str | None = None
    waifus_created: int | None = None
    waifus_liked: int | None = None
    waifus_trashed: int | None = None


class UserList(Entity):
    """A list of waifus curated by a user."""

    id: int
    name: str
    user_id: int | None = None
    description: str | None = None
    created_at: str | None = None
    updated_at: str | None = None
    waifus: list[FilteredWaifu] = Field(default_factory=list)
