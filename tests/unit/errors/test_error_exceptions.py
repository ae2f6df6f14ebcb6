"""Tests for the unwrap exception hierarchy."""

import pytest

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
from mywaifu_client.errors.models import ApiError, MappingError, TransportError


@pytest.mark.unit
def test_api_response_error_instantiation():
    """Test APIResponseError exposes the payload and status code."""
    error = ApiError(http_status=500, message="Server exploded")

    exc = APIResponseError(error)

    assert str(exc) == "HTTP 500: Server exploded"
    assert exc.status_code == 500
    assert exc.error is error


@pytest.mark.unit
def test_exception_inheritance():
    """Test exception inheritance chain."""
    assert issubclass(TransportFailedError, MyWaifuError)
    assert issubclass(InvalidPayloadError, MyWaifuError)
    assert issubclass(ResultAccessError, MyWaifuError)
    assert issubclass(APIResponseError, MyWaifuError)

    assert issubclass(ClientError, APIResponseError)
    assert issubclass(BadRequestError, ClientError)
    assert issubclass(UnauthorizedError, ClientError)
    assert issubclass(ForbiddenError, ClientError)
    assert issubclass(NotFoundError, ClientError)
    assert issubclass(RateLimitError, ClientError)

    assert issubclass(ServerError, APIResponseError)


@pytest.mark.unit
def test_transport_failed_error():
    error = TransportError(message="GET https://example.com failed", url="https://example.com")

    exc = TransportFailedError(error)

    assert str(exc) == "GET https://example.com failed"
    assert exc.error is error


@pytest.mark.unit
def test_invalid_payload_error():
    error = MappingError(message="Cannot decode", shape="List(series)", field_path="0.id")

    exc = InvalidPayloadError(error)

    assert str(exc) == "Cannot decode"
    assert exc.field_path == "0.id"


@pytest.mark.unit
def test_rate_limit_error_with_retry_after():
    exc = RateLimitError(ApiError(http_status=429, message="Too many requests"), retry_after=60)

    assert exc.retry_after == 60
    assert exc.status_code == 429


@pytest.mark.unit
def test_result_access_error_has_no_payload():
    exc = ResultAccessError("wrong side")

    assert str(exc) == "wrong side"
    assert exc.error is None
