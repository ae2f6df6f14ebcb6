"""MyWaifuList API client.

Every accessor returns a ``Result``: ``Success`` with the decoded entity, list
or page, or ``Failure`` with a transport, mapping or API error.

Example:
    ```python
    from mywaifu_client import MyWaifuClient, Success

    with MyWaifuClient.from_env() as client:
        result = client.get_waifu("rem")
        if isinstance(result, Success):
            print(result.value.name)
        else:
            print(result.error.message)
    ```
"""

from urllib.parse import quote

import httpx

from mywaifu_client.auth.credentials import ApiKeyResolver
from mywaifu_client.config import ClientBuilder, ClientConfig
from mywaifu_client.errors.exceptions import TransportFailedError
from mywaifu_client.mapping.decoder import decode
from mywaifu_client.mapping.shapes import DecodeShape, EntityKind, ListOf, Paginated, Single
from mywaifu_client.models.enums import Season, WaifuListType
from mywaifu_client.models.pagination import PaginationEnvelope
from mywaifu_client.models.series import FilteredSeries, Series
from mywaifu_client.models.user import User, UserList
from mywaifu_client.models.waifu import FilteredWaifu, Waifu, WaifuImage
from mywaifu_client.result import Failure, Result
from mywaifu_client.transport.executor import TransportExecutor


def _segment(value: int | str) -> str:
    return quote(str(value), safe="")


class MyWaifuClient:
    """Client for the MyWaifuList API.

    Args:
        api_key: API key sent with every request
        config: Transport options; defaults to ClientConfig()
        http_client: Preconfigured httpx client. Overrides the HTTP options
            in ``config`` and is not closed by ``close()``.
    """

    def __init__(
        self,
        api_key: str,
        *,
        config: ClientConfig | None = None,
        http_client: httpx.Client | None = None,
    ):
        if not api_key:
            raise ValueError("api_key must be a non-empty string")

        self.config = config or ClientConfig()
        self._owns_http_client = http_client is None
        self._http_client = http_client if http_client is not None else self.config.create_http_client()
        try:
            self._transport = TransportExecutor(
                api_key,
                base_url=self.config.base_url,
                http_client=self._http_client,
                executor=self.config.executor,
                max_workers=self.config.max_workers,
                request_timeout=self.config.timeout(),
            )
        except Exception:
            if self._owns_http_client:
                self._http_client.close()
            raise

    @classmethod
    def create_default(cls, api_key: str) -> "MyWaifuClient":
        """Create a client with HTTP/2, redirects followed and 20 second timeouts."""
        return cls(api_key)

    @classmethod
    def from_env(cls, *, config: ClientConfig | None = None, resolver: ApiKeyResolver | None = None) -> "MyWaifuClient":
        """Create a client whose API key comes from the environment, .env or a key file.

        Raises:
            MissingApiKeyError: If no API key is configured
        """
        resolver = resolver or ApiKeyResolver()
        return cls(resolver.resolve(), config=config)

    @staticmethod
    def builder(api_key: str) -> ClientBuilder:
        return ClientBuilder(api_key)

    def __enter__(self) -> "MyWaifuClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        """Shut down the worker pool and HTTP client owned by this client."""
        self._transport.close()
        if self._owns_http_client:
            self._http_client.close()

    def fetch(self, path: str, shape: DecodeShape) -> Result:
        """Run a GET for ``path`` and decode the body as ``shape``.

        Transport failures come back as a Failure, never as an exception.
        """
        try:
            raw = self._transport.execute(path)
        except TransportFailedError as e:
            return Failure(e.error)
        return decode(raw, shape)

    # Waifus

    def get_waifu(self, waifu: int | str) -> Result[Waifu]:
        """Retrieve a waifu by id or slug."""
        return self.fetch(f"waifu/{_segment(waifu)}", Single(EntityKind.WAIFU))

    def get_waifu_images(self, waifu_id: int, page: int = 1) -> Result[PaginationEnvelope[WaifuImage]]:
        """Retrieve one page of a waifu's gallery (10 images per page)."""
        return self.fetch(f"waifu/{_segment(waifu_id)}/images?page={page}", Paginated(EntityKind.WAIFU_IMAGE))

    def get_waifus_by_page(self, page: int = 1) -> Result[PaginationEnvelope[FilteredWaifu]]:
        return self.fetch(f"waifu?page={page}", Paginated(EntityKind.FILTERED_WAIFU))

    def get_daily_waifu(self) -> Result[FilteredWaifu]:
        return self.fetch("meta/daily", Single(EntityKind.FILTERED_WAIFU))

    def get_random_waifu(self) -> Result[FilteredWaifu]:
        return self.fetch("meta/random", Single(EntityKind.FILTERED_WAIFU))

    def get_best_waifus(self) -> Result[list[FilteredWaifu]]:
        """Best waifus of the currently airing season."""
        return self.fetch("airing/best", ListOf(EntityKind.FILTERED_WAIFU))

    def get_popular_waifus(self) -> Result[list[FilteredWaifu]]:
        """Most popular waifus of the currently airing season."""
        return self.fetch("airing/popular", ListOf(EntityKind.FILTERED_WAIFU))

    def get_trash_waifus(self) -> Result[list[FilteredWaifu]]:
        """Most trashed waifus of the currently airing season."""
        return self.fetch("airing/trash", ListOf(EntityKind.FILTERED_WAIFU))

    # Series

    def get_seasonal_anime(self) -> Result[list[FilteredSeries]]:
        """Series airing this season."""
        return self.fetch("airing", ListOf(EntityKind.FILTERED_SERIES))

    def get_series(self, series: int | str) -> Result[Series]:
        """Retrieve a series by id or slug."""
        return self.fetch(f"series/{_segment(series)}", Single(EntityKind.SERIES))

    def get_series_by_page(self, page: int = 1) -> Result[PaginationEnvelope[FilteredSeries]]:
        return self.fetch(f"series?page={page}", Paginated(EntityKind.FILTERED_SERIES))

    def get_all_series(self, season: Season, year: int) -> Result[list[FilteredSeries]]:
        """Series that aired in the given season and year."""
        return self.fetch(f"airing/{Season(season).value}/{year}", ListOf(EntityKind.FILTERED_SERIES))

    def get_series_waifus(self, series: int | str) -> Result[list[FilteredWaifu]]:
        return self.fetch(f"series/{_segment(series)}/waifus", ListOf(EntityKind.FILTERED_WAIFU))

    # Users

    def get_user_profile(self, user_id: int) -> Result[User]:
        return self.fetch(f"user/{_segment(user_id)}", Single(EntityKind.USER))

    def get_user_waifus(
        self, user_id: int, list_type: WaifuListType, page: int = 1
    ) -> Result[PaginationEnvelope[FilteredWaifu]]:
        """One page of the waifus a user created, liked or trashed."""
        return self.fetch(
            f"user/{_segment(user_id)}/{WaifuListType(list_type).value}?page={page}",
            Paginated(EntityKind.FILTERED_WAIFU),
        )

    def get_user_lists(self, user_id: int) -> Result[list[UserList]]:
        return self.fetch(f"user/{_segment(user_id)}/lists", ListOf(EntityKind.USER_LIST))

    def get_user_list(self, user_id: int, list_id: int) -> Result[UserList]:
        return self.fetch(f"user/{_segment(user_id)}/lists/{_segment(list_id)}", Single(EntityKind.USER_LIST))
