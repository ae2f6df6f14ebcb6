"""Exceptions raised when a failed result is unwrapped."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mywaifu_client.errors.models import ApiError, MappingError, ResponseError, TransportError


class MyWaifuError(Exception):
    """Base exception for all client errors."""

    def __init__(self, message: str, error: "ResponseError | None" = None):
        super().__init__(message)
        self.error = error


class ResultAccessError(MyWaifuError):
    """Raised when the unpopulated side of a result is read."""

    pass


class TransportFailedError(MyWaifuError):
    """The request never produced an HTTP response."""

    error: "TransportError"

    def __init__(self, error: "TransportError"):
        super().__init__(error.message, error)


class InvalidPayloadError(MyWaifuError):
    """A 2xx response body did not match the expected shape."""

    error: "MappingError"

    def __init__(self, error: "MappingError"):
        super().__init__(error.message, error)
        self.field_path = error.field_path


class APIResponseError(MyWaifuError):
    """Base exception for non-2xx API responses."""

    error: "ApiError"

    def __init__(self, error: "ApiError"):
        super().__init__(f"HTTP {error.http_status}: {error.message}", error)
        self.status_code = error.http_status


class ClientError(APIResponseError):
    """4xx client errors."""

    pass


class BadRequestError(ClientError):
    """400 Bad Request."""

    pass


class UnauthorizedError(ClientError):
    """401 Unauthorized (missing or invalid API key)."""

    pass


class ForbiddenError(ClientError):
    """403 Forbidden."""

    pass


class NotFoundError(ClientError):
    """404 Not Found."""

    pass


class RateLimitError(ClientError):
    """429 Too Many Requests."""

    def __init__(self, error: "ApiError", retry_after: int | None = None):
        super().__init__(error)
        self.retry_after = retry_after


class ServerError(APIResponseError):
    """5xx server errors."""

    pass
