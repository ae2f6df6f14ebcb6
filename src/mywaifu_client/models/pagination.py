"""Paginated response envelope."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class PaginationEnvelope(BaseModel, Generic[T]):
    """One page of entities plus the API's page-position metadata.

    The API sends the entities under ``data``; they are exposed as ``items``.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    items: list[T] = Field(alias="data")
    current_page: int
    last_page: int
    total: int | None = None
    per_page: int | None = None
    from_: int | None = Field(default=None, alias="from")
    to: int | None = None
    path: str | None = None
    first_page_url: str | None = None
    last_page_url: str | None = None
    next_page_url: str | None = None
    prev_page_url: str | None = None

    @property
    def has_next_page(self) -> bool:
        return self.current_page < self.last_page
