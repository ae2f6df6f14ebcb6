"""Failure payloads, the API error envelope and unwrap exceptions."""

from mywaifu_client.errors.exceptions import (
    APIResponseError,
    BadRequestError,
    ClientError,
    ForbiddenError,
    InvalidPayloadError,
    MyWaifuError,
    NotFoundError,
    RateLimitError,
    ResultAccessError,
    ServerError,
    TransportFailedError,
    UnauthorizedError,
)
from mywaifu_client.errors.handler import exception_for, parse_error_response
from mywaifu_client.errors.models import (
    ApiError,
    ErrorEnvelope,
    ErrorKind,
    MappingError,
    ResponseError,
    TransportError,
)

__all__ = [
    "APIResponseError",
    "ApiError",
    "BadRequestError",
    "ClientError",
    "ErrorEnvelope",
    "ErrorKind",
    "ForbiddenError",
    "InvalidPayloadError",
    "MappingError",
    "MyWaifuError",
    "NotFoundError",
    "RateLimitError",
    "ResponseError",
    "ResultAccessError",
    "ServerError",
    "TransportError",
    "TransportFailedError",
    "UnauthorizedError",
    "exception_for",
    "parse_error_response",
]
