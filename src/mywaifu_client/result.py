"""Typed result envelope returned by every client call.

A call either fully succeeds with a decoded value or fully fails with exactly
one error payload. Branch on the variant before reading the payload:

    ```python
    result = client.get_waifu(1)
    match result:
        case Success(value=waifu):
            print(waifu.name)
        case Failure(error=ApiError(http_status=404)):
            print("no such waifu")
        case Failure(error=error):
            print(f"{error.kind}: {error.message}")
    ```

Reading the wrong side fails fast: ``Success.error`` raises
``ResultAccessError`` and ``Failure.value`` raises the exception mapped from the
error payload (see ``mywaifu_client.errors.handler.exception_for``).
"""

from dataclasses import dataclass
from typing import Generic, NoReturn, TypeVar

from mywaifu_client.errors.exceptions import ResultAccessError
from mywaifu_client.errors.handler import exception_for
from mywaifu_client.errors.models import ResponseError

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Success(Generic[T]):
    """A fully decoded value."""

    value: T

    @property
    def is_success(self) -> bool:
        return True

    @property
    def is_failure(self) -> bool:
        return False

    @property
    def error(self) -> NoReturn:
        raise ResultAccessError("Result is a Success and carries no error")

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True, slots=True)
class Failure:
    """A transport, mapping or API error."""

    error: ResponseError

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_failure(self) -> bool:
        return True

    @property
    def value(self) -> NoReturn:
        raise exception_for(self.error)

    def unwrap(self) -> NoReturn:
        raise exception_for(self.error)


Result = Success[T] | Failure
