"""Request and raw response values passed between transport and mapping."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RequestSpec:
    """A GET request relative to the API base URL.

    ``path`` already carries its query string, e.g. ``waifu/1/images?page=2``.
    """

    path: str

    def url(self, base_url: str) -> str:
        return base_url.rstrip("/") + "/" + self.path.lstrip("/")


@dataclass(frozen=True, slots=True)
class RawResult:
    """Status code and body of a completed HTTP exchange, whatever the status."""

    status_code: int
    body: str

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300
