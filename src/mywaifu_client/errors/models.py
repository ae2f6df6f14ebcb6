"""Failure payloads carried by a ``Failure`` result.

Every failed call ends in exactly one of three error kinds:

- ``TransportError``: the request never produced an HTTP response.
- ``MappingError``: the server answered 2xx but the body did not fit the expected shape.
- ``ApiError``: the server answered with a non-2xx status.
"""

import json
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any, ClassVar


class ErrorKind(StrEnum):
    """Closed set of failure tags."""

    TRANSPORT = "transport"
    MAPPING = "mapping"
    API = "api"


@dataclass(frozen=True)
class ErrorEnvelope:
    """Error body returned by the API alongside a non-2xx status.

    MyWaifuList answers with ``{"status": 404, "message": "..."}``; some
    gateways use ``code`` or ``error`` instead, so those are accepted too.
    """

    message: str
    status: int | None = None

    # Any other members of the error object
    extensions: dict[str, Any] | None = None

    MESSAGE_FIELDS: ClassVar[tuple[str, ...]] = ("message", "error", "detail", "title")
    STATUS_FIELDS: ClassVar[tuple[str, ...]] = ("status", "code", "status_code")

    @classmethod
    def from_body(cls, body: str) -> "ErrorEnvelope | None":
        """Parse an error envelope from a raw response body.

        Args:
            body: Raw response text

        Returns:
            ErrorEnvelope, or None if the body is not a JSON object carrying a message
        """
        try:
            data = json.loads(body)
        except (ValueError, TypeError, RecursionError):
            return None

        if not isinstance(data, dict):
            return None

        message = None
        for name in cls.MESSAGE_FIELDS:
            value = data.get(name)
            if isinstance(value, str) and value.strip():
                message = value
                break
        if message is None:
            return None

        status = None
        for name in cls.STATUS_FIELDS:
            value = data.get(name)
            if isinstance(value, int) and not isinstance(value, bool):
                status = value
                break

        known = set(cls.MESSAGE_FIELDS) | set(cls.STATUS_FIELDS)
        extensions = {k: v for k, v in data.items() if k not in known}

        return cls(message=message, status=status, extensions=extensions or None)


@dataclass(frozen=True)
class TransportError:
    """The request could not be completed (connect failure, timeout, shutdown)."""

    message: str
    url: str | None = None
    cause: BaseException | None = field(default=None, compare=False, repr=False)

    kind: ClassVar[ErrorKind] = ErrorKind.TRANSPORT


@dataclass(frozen=True)
class MappingError:
    """A 2xx body could not be decoded into the requested shape."""

    message: str
    shape: str
    field_path: str | None = None

    kind: ClassVar[ErrorKind] = ErrorKind.MAPPING


@dataclass(frozen=True)
class ApiError:
    """The API declared a failure through its status code."""

    http_status: int
    message: str
    envelope: ErrorEnvelope | None = field(default=None, compare=False)

    kind: ClassVar[ErrorKind] = ErrorKind.API


ResponseError = TransportError | MappingError | ApiError
