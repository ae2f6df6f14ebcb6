"""Error handling utilities for API responses."""

from mywaifu_client.errors.exceptions import (
    APIResponseError,
    BadRequestError,
    ClientError,
    ForbiddenError,
    InvalidPayloadError,
    MyWaifuError,
    NotFoundError,
    RateLimitError,
    ServerError,
    TransportFailedError,
    UnauthorizedError,
)
from mywaifu_client.errors.models import ApiError, ErrorEnvelope, MappingError, ResponseError, TransportError

BODY_EXCERPT_LENGTH = 200

_EXCEPTION_MAP: dict[int, type[APIResponseError]] = {
    400: BadRequestError,
    401: UnauthorizedError,
    403: ForbiddenError,
    404: NotFoundError,
    429: RateLimitError,
}


def parse_error_response(status_code: int, body: str) -> ApiError:
    """Build an ApiError from a non-2xx status and its body.

    Uses the API's error envelope when the body carries one, otherwise falls
    back to a message built from the status code and a body excerpt.

    Args:
        status_code: HTTP status code of the response
        body: Raw response text

    Returns:
        ApiError whose message is never empty
    """
    envelope = ErrorEnvelope.from_body(body)
    if envelope is not None:
        return ApiError(http_status=status_code, message=envelope.message, envelope=envelope)

    excerpt = body.strip()[:BODY_EXCERPT_LENGTH]
    message = f"HTTP {status_code}: {excerpt}" if excerpt else f"HTTP {status_code}"
    return ApiError(http_status=status_code, message=message)


def exception_for(error: ResponseError) -> MyWaifuError:
    """Map a failure payload onto the exception raised when it is unwrapped.

    Args:
        error: Failure payload from a result

    Returns:
        MyWaifuError subclass instance (not raised)
    """
    if isinstance(error, TransportError):
        return TransportFailedError(error)
    if isinstance(error, MappingError):
        return InvalidPayloadError(error)

    status_code = error.http_status
    if status_code in _EXCEPTION_MAP:
        exc_class = _EXCEPTION_MAP[status_code]
    elif 400 <= status_code < 500:
        exc_class = ClientError
    elif 500 <= status_code < 600:
        exc_class = ServerError
    else:
        exc_class = APIResponseError

    if exc_class is RateLimitError:
        return RateLimitError(error, retry_after=_retry_after(error))
    return exc_class(error)


def _retry_after(error: ApiError) -> int | None:
    if error.envelope is None or not error.envelope.extensions:
        return None
    value = error.envelope.extensions.get("retry_after")
    try:
        return int(value) if value is not None else None
    except (ValueError, TypeError):
        return None
