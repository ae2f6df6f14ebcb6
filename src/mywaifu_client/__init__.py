"""mywaifu-client - Typed client for the MyWaifuList API.

Calls run on a worker pool and come back as a typed result:
- ``Success`` holding a decoded entity, list or pagination envelope
- ``Failure`` holding a ``TransportError``, ``MappingError`` or ``ApiError``

Example:
    ```python
    from mywaifu_client import ApiError, Failure, MyWaifuClient, Success

    with MyWaifuClient.create_default("my-api-key") as client:
        match client.get_waifus_by_page(2):
            case Success(value=page):
                for waifu in page.items:
                    print(waifu.name)
            case Failure(error=ApiError(http_status=status, message=message)):
                print(f"API said {status}: {message}")
            case Failure(error=error):
                print(f"{error.kind} failure: {error.message}")
    ```
"""

from mywaifu_client.client import MyWaifuClient
from mywaifu_client.config import ClientBuilder, ClientConfig
from mywaifu_client.errors import ApiError, ErrorKind, MappingError, MyWaifuError, TransportError
from mywaifu_client.mapping import EntityKind, ListOf, Paginated, Single, decode
from mywaifu_client.models import PaginationEnvelope, Season, WaifuListType
from mywaifu_client.result import Failure, Result, Success
from mywaifu_client.transport import RawResult, TransportExecutor

__version__ = "0.1.0"

__all__ = [
    "ApiError",
    "ClientBuilder",
    "ClientConfig",
    "EntityKind",
    "ErrorKind",
    "Failure",
    "ListOf",
    "MappingError",
    "MyWaifuClient",
    "MyWaifuError",
    "PaginationEnvelope",
    "Paginated",
    "RawResult",
    "Result",
    "Season",
    "Single",
    "Success",
    "TransportError",
    "TransportExecutor",
    "WaifuListType",
    "__version__",
    "decode",
]
