"""Transport layer: authenticated GET requests executed on a worker pool.

Example:
    ```python
    from mywaifu_client.transport import TransportExecutor

    with TransportExecutor(api_key="my-key", max_workers=4) as transport:
        futures = [transport.submit(f"waifu/{waifu_id}") for waifu_id in (1, 2, 3)]
        bodies = [future.result().body for future in futures]
    ```
"""

from mywaifu_client.transport.executor import (
    DEFAULT_BASE_URL,
    DEFAULT_MAX_WORKERS,
    DEFAULT_REQUEST_TIMEOUT,
    TransportExecutor,
)
from mywaifu_client.transport.models import RawResult, RequestSpec

__all__ = [
    "DEFAULT_BASE_URL",
    "DEFAULT_MAX_WORKERS",
    "DEFAULT_REQUEST_TIMEOUT",
    "RawResult",
    "RequestSpec",
    "TransportExecutor",
]
