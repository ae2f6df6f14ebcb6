"""Transport executor: runs authenticated GET requests on a worker pool.

Request construction, network I/O and body buffering happen on a worker
thread. The calling thread waits on exactly one future per call.

Pool saturation: requests beyond the pool size wait in the executor's
unbounded FIFO work queue. Nothing is rejected and nothing is retried.

Example:
    ```python
    with TransportExecutor(api_key) as transport:
        raw = transport.execute("waifu/1")
        print(raw.status_code, raw.body)
    ```
"""

import logging
from concurrent.futures import CancelledError, Executor, Future, ThreadPoolExecutor

import httpx

from mywaifu_client.errors.exceptions import TransportFailedError
from mywaifu_client.errors.models import TransportError
from mywaifu_client.transport.models import RawResult, RequestSpec

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://mywaifulist.moe/api/v1/"
DEFAULT_REQUEST_TIMEOUT = 20.0
DEFAULT_MAX_WORKERS = 10


class TransportExecutor:
    """Execute GET requests against the API off the caller's thread.

    The executor and HTTP client may be supplied by the embedding application.
    Whatever is not supplied is created here and released by ``close()``;
    supplied resources are never shut down by this class.

    Args:
        api_key: Value sent in the ``apikey`` header
        base_url: API root that request paths are appended to
        http_client: Preconfigured ``httpx.Client`` (HTTP/2, proxy, TLS, ...)
        executor: Worker pool to run requests on
        max_workers: Size of the pool created when ``executor`` is not given
        request_timeout: Per-request timeout in seconds, or an httpx.Timeout
    """

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        http_client: httpx.Client | None = None,
        executor: Executor | None = None,
        max_workers: int = DEFAULT_MAX_WORKERS,
        request_timeout: float | httpx.Timeout = DEFAULT_REQUEST_TIMEOUT,
    ) -> None:
        if not api_key:
            raise ValueError("api_key must be a non-empty string")
        if max_workers < 1:
            raise ValueError("max_workers must be at least 1")

        self.base_url = base_url
        self.request_timeout = request_timeout
        self._headers = {"apikey": api_key, "Content-Type": "application/json"}

        self._owns_http_client = http_client is None
        self._http_client = http_client if http_client is not None else httpx.Client(http2=True, follow_redirects=True)

        self._owns_executor = executor is None
        self._executor = (
            executor
            if executor is not None
            else ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="mywaifu-transport")
        )
        self._closed = False

    def __enter__(self) -> "TransportExecutor":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    @property
    def closed(self) -> bool:
        return self._closed

    def submit(self, path: str) -> "Future[RawResult]":
        """Schedule a GET for ``path`` and return its future.

        The future resolves to a RawResult for any HTTP status, or fails with
        TransportFailedError.

        Raises:
            TransportFailedError: If the executor is closed or refuses new work
        """
        request_spec = RequestSpec(path)
        if self._closed:
            raise TransportFailedError(
                TransportError(message="Transport executor is closed", url=request_spec.url(self.base_url))
            )

        try:
            return self._executor.submit(self._send, request_spec)
        except RuntimeError as e:
            # Executors raise RuntimeError once shut down
            raise TransportFailedError(
                TransportError(message=f"Cannot schedule request: {e}", url=request_spec.url(self.base_url), cause=e)
            ) from e

    def execute(self, path: str) -> RawResult:
        """Run a GET for ``path`` and wait for its result.

        Args:
            path: Path relative to the base URL, query string included

        Returns:
            RawResult with the status code and body, whatever the status

        Raises:
            TransportFailedError: If the connection fails, times out, or the
                request is cancelled before completing
        """
        future = self.submit(path)
        try:
            return future.result()
        except CancelledError as e:
            raise TransportFailedError(
                TransportError(message="Request was cancelled", url=RequestSpec(path).url(self.base_url), cause=e)
            ) from e

    def close(self) -> None:
        """Release the worker pool and HTTP client created by this executor."""
        if self._closed:
            return
        self._closed = True

        if self._owns_executor:
            self._executor.shutdown(wait=True)
        if self._owns_http_client:
            self._http_client.close()
        logger.debug("Transport executor closed")

    def _send(self, request_spec: RequestSpec) -> RawResult:
        url = request_spec.url(self.base_url)
        try:
            request = self._http_client.build_request(
                "GET",
                url,
                headers=self._headers,
                timeout=self.request_timeout,
            )
            response = self._http_client.send(request)
        except Exception as e:
            # Auth flows and transports can raise outside the httpx hierarchy
            logger.debug(f"GET {url} failed: {e!r}")
            raise TransportFailedError(
                TransportError(message=f"GET {url} failed: {type(e).__name__}: {e}", url=url, cause=e)
            ) from e

        logger.debug(f"GET {url} -> {response.status_code} ({response.http_version})")
        return RawResult(status_code=response.status_code, body=response.text)
