"""Ok / Err result primitives.

A ``Result`` is exactly one of two frozen variants. Failures travel as
values: combinators on ``Err`` return the same ``Err`` without invoking
the supplied callable, so a chain stops at its first failing stage.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, NoReturn, TypeVar

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
F = TypeVar("F")


class UnwrapError(Exception):
    """Raised when a value is pulled out of the wrong variant."""

    def __init__(self, message: str, *, error: Any = None) -> None:
        super().__init__(message)
        self.error = error


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """A successful result carrying *value*."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def map(self, fn: Callable[[T], U]) -> Ok[U]:
        return Ok(fn(self.value))

    def map_err(self, fn: Callable[[Any], Any]) -> Ok[T]:
        return self

    def and_then(self, fn: Callable[[T], Result[U, F]]) -> Result[U, F]:
        """Invoke *fn* with the value and return its result."""
        return fn(self.value)

    def unwrap(self) -> T:
        return self.value

    def expect(self, message: str) -> T:
        return self.value

    def unwrap_err(self) -> NoReturn:
        raise UnwrapError(f"called unwrap_err() on Ok: {self.value!r}")

    def unwrap_or(self, default: Any) -> T:
        return self.value

    def unwrap_or_else(self, fn: Callable[[Any], Any]) -> T:
        return self.value


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """A failed result carrying *error*."""

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def map(self, fn: Callable[[Any], Any]) -> Err[E]:
        return self

    def map_err(self, fn: Callable[[E], F]) -> Err[F]:
        return Err(fn(self.error))

    def and_then(self, fn: Callable[[Any], Any]) -> Err[E]:
        """Return self; *fn* is never called."""
        return self

    def unwrap(self) -> NoReturn:
        raise UnwrapError(f"called unwrap() on Err: {self.error}", error=self.error)

    def expect(self, message: str) -> NoReturn:
        raise UnwrapError(f"{message}: {self.error}", error=self.error)

    def unwrap_err(self) -> E:
        return self.error

    def unwrap_or(self, default: U) -> U:
        return default

    def unwrap_or_else(self, fn: Callable[[E], U]) -> U:
        return fn(self.error)


Result = Ok[T] | Err[E]
