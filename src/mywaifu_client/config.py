"""Client configuration and its fluent builder.

Example:
    ```python
    from mywaifu_client.config import ClientBuilder

    client = (
        ClientBuilder("my-api-key")
        .with_connect_timeout(5)
        .with_proxy("http://proxy.internal:3128")
        .with_max_workers(4)
        .build()
    )
    ```
"""

import ssl
from concurrent.futures import Executor
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any

import httpx

from mywaifu_client.transport.executor import DEFAULT_BASE_URL, DEFAULT_MAX_WORKERS, DEFAULT_REQUEST_TIMEOUT

if TYPE_CHECKING:
    from mywaifu_client.client import MyWaifuClient

DEFAULT_CONNECT_TIMEOUT = 20.0


@dataclass(frozen=True)
class ClientConfig:
    """Transport options for a MyWaifuClient.

    ``executor`` and ``transport`` are borrowed: the client never shuts them down.
    """

    base_url: str = DEFAULT_BASE_URL
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    connect_timeout: float = DEFAULT_CONNECT_TIMEOUT
    http2: bool = True
    follow_redirects: bool = True
    verify: ssl.SSLContext | str | bool = True
    cert: str | tuple[str, str] | None = None
    proxy: str | httpx.Proxy | None = None
    auth: httpx.Auth | None = None
    cookies: dict[str, str] | httpx.Cookies | None = None
    max_workers: int = DEFAULT_MAX_WORKERS
    executor: Executor | None = None
    transport: httpx.BaseTransport | None = None

    def __post_init__(self) -> None:
        if self.max_workers < 1:
            raise ValueError("max_workers must be at least 1")

    def timeout(self) -> httpx.Timeout:
        return httpx.Timeout(self.request_timeout, connect=self.connect_timeout)

    def create_http_client(self) -> httpx.Client:
        """Build the httpx client described by this configuration."""
        kwargs: dict[str, Any] = {
            "http2": self.http2,
            "follow_redirects": self.follow_redirects,
            "timeout": self.timeout(),
            "verify": self.verify,
        }
        if self.cert is not None:
            kwargs["cert"] = self.cert
        if self.proxy is not None:
            kwargs["proxy"] = self.proxy
        if self.auth is not None:
            kwargs["auth"] = self.auth
        if self.cookies is not None:
            kwargs["cookies"] = self.cookies
        if self.transport is not None:
            kwargs["transport"] = self.transport
        return httpx.Client(**kwargs)


class ClientBuilder:
    """Fluent builder for MyWaifuClient."""

    def __init__(self, api_key: str):
        self._api_key = api_key
        self._config = ClientConfig()

    @property
    def config(self) -> ClientConfig:
        return self._config

    def _with(self, **changes: Any) -> "ClientBuilder":
        self._config = replace(self._config, **changes)
        return self

    def with_base_url(self, base_url: str) -> "ClientBuilder":
        return self._with(base_url=base_url)

    def with_request_timeout(self, seconds: float) -> "ClientBuilder":
        return self._with(request_timeout=seconds)

    def with_connect_timeout(self, seconds: float) -> "ClientBuilder":
        return self._with(connect_timeout=seconds)

    def with_http2(self, enabled: bool = True) -> "ClientBuilder":
        """Negotiate HTTP/2 (True) or stay on HTTP/1.1 (False)."""
        return self._with(http2=enabled)

    def with_follow_redirects(self, follow: bool) -> "ClientBuilder":
        return self._with(follow_redirects=follow)

    def with_ssl_context(self, context: ssl.SSLContext) -> "ClientBuilder":
        return self._with(verify=context)

    def with_verify(self, verify: str | bool) -> "ClientBuilder":
        """Verify against a CA bundle path, the default store (True), or not at all (False)."""
        return self._with(verify=verify)

    def with_client_cert(self, cert: str | tuple[str, str]) -> "ClientBuilder":
        return self._with(cert=cert)

    def with_proxy(self, proxy: str | httpx.Proxy) -> "ClientBuilder":
        return self._with(proxy=proxy)

    def with_authenticator(self, auth: httpx.Auth) -> "ClientBuilder":
        return self._with(auth=auth)

    def with_cookies(self, cookies: dict[str, str] | httpx.Cookies) -> "ClientBuilder":
        return self._with(cookies=cookies)

    def with_max_workers(self, max_workers: int) -> "ClientBuilder":
        return self._with(max_workers=max_workers)

    def with_executor(self, executor: Executor) -> "ClientBuilder":
        return self._with(executor=executor)

    def with_transport(self, transport: httpx.BaseTransport) -> "ClientBuilder":
        """Route requests through a custom httpx transport, e.g. httpx.MockTransport in tests."""
        return self._with(transport=transport)

    def build(self) -> "MyWaifuClient":
        from mywaifu_client.client import MyWaifuClient

        return MyWaifuClient(self._api_key, config=self._config)
