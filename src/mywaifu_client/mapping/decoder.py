"""Response mapping: turn a raw transport result into a typed result."""

from functools import cache
from typing import Any

from pydantic import TypeAdapter, ValidationError

from mywaifu_client.errors.handler import parse_error_response
from mywaifu_client.errors.models import MappingError
from mywaifu_client.mapping.shapes import DecodeShape, ListOf, Paginated, Single
from mywaifu_client.models.pagination import PaginationEnvelope
from mywaifu_client.result import Failure, Result, Success
from mywaifu_client.transport.models import RawResult


def decode(raw: RawResult, shape: DecodeShape) -> Result[Any]:
    """Decode a raw result into the value described by ``shape``.

    Non-2xx statuses are decoded as the API's error envelope regardless of
    ``shape``. A 2xx body that does not match ``shape`` is a mapping failure.

    Args:
        raw: Status code and body from the transport executor
        shape: Expected layout and entity kind of a successful body

    Returns:
        Success with the decoded entity, list or PaginationEnvelope, or a
        Failure carrying an ApiError or MappingError
    """
    if not raw.is_success:
        return Failure(parse_error_response(raw.status_code, raw.body))

    try:
        value = _adapter(shape).validate_json(raw.body)
    except ValidationError as e:
        return Failure(_mapping_error(e, shape))

    return Success(value)


@cache
def _adapter(shape: DecodeShape) -> TypeAdapter[Any]:
    schema = shape.kind.schema
    match shape:
        case Single():
            return TypeAdapter(schema)
        case ListOf():
            return TypeAdapter(list[schema])
        case Paginated():
            return TypeAdapter(PaginationEnvelope[schema])
    raise TypeError(f"Unsupported decode shape: {shape!r}")


def _mapping_error(error: ValidationError, shape: DecodeShape) -> MappingError:
    first = error.errors(include_url=False)[0]
    field_path = ".".join(str(part) for part in first["loc"]) or None

    message = f"Cannot decode {shape}: {first['msg']}"
    if field_path:
        message += f" (at '{field_path}')"
    if error.error_count() > 1:
        message += f" and {error.error_count() - 1} more error(s)"

    return MappingError(message=message, shape=str(shape), field_path=field_path)
