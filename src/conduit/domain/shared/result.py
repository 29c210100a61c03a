"""Result type for fallible domain operations.

Expected failures (invalid input, duplicate accounts, bad credentials,
rejected tokens) are returned as values instead of raised. A ``Result`` is
either ``Success(value)`` or ``Failure(error)``; the combinators short-circuit
on the first failure so chained steps never run after an error.

Examples
--------
>>> parse = lambda s: Success(int(s)) if s.isdigit() else Failure("not a number")
>>> parse("41").map(lambda n: n + 1)
Success(value=42)
>>> parse("x").map(lambda n: n + 1)
Failure(error='not a number')
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar, Union

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")
F = TypeVar("F")


class UnwrapFailureError(RuntimeError):
    """Raised when ``unwrap`` is called on a ``Failure``."""


@dataclass(frozen=True)
class Success(Generic[T]):
    """Successful outcome carrying a value."""

    value: T

    def is_success(self) -> bool:
        return True

    def is_failure(self) -> bool:
        return False

    def map(self, fn: Callable[[T], U]) -> Success[U]:
        return Success(fn(self.value))

    def bind(self, fn: Callable[[T], Result[U, Any]]) -> Result[U, Any]:
        return fn(self.value)

    def map_failure(self, fn: Callable[[Any], Any]) -> Success[T]:
        return self

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: Any) -> T:
        return self.value


@dataclass(frozen=True)
class Failure(Generic[E]):
    """Failed outcome carrying an error value."""

    error: E

    def is_success(self) -> bool:
        return False

    def is_failure(self) -> bool:
        return True

    def map(self, fn: Callable[[Any], Any]) -> Failure[E]:
        return self

    def bind(self, fn: Callable[[Any], Any]) -> Failure[E]:
        return self

    def map_failure(self, fn: Callable[[E], F]) -> Failure[F]:
        return Failure(fn(self.error))

    def unwrap(self) -> Any:
        msg = f"Called unwrap on a failure: {self.error!r}"
        raise UnwrapFailureError(msg)

    def unwrap_or(self, default: U) -> U:
        return default


Result = Union[Success[T], Failure[E]]


def from_optional(value: T | None, error: E) -> Result[T, E]:
    """Lift an optional value into a Result, failing with ``error`` on None."""
    if value is None:
        return Failure(error)
    return Success(value)
