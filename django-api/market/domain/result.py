"""Explicit result type for fallible domain operations.

Operations that can fail for business reasons return ``Ok(value)`` or
``Err(error)`` instead of raising, so callers must handle both branches.
"""

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E", bound=Exception)


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    def is_ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value

    def map(self, fn: Callable[[T], U]) -> "Ok[U]":
        return Ok(fn(self.value))


@dataclass(frozen=True)
class Err(Generic[E]):
    error: E

    def is_ok(self) -> bool:
        return False

    def unwrap(self):
        """Raise the carried error."""
        raise self.error

    def map(self, fn: Callable) -> "Err[E]":
        return self


Result = Ok[T] | Err[E]
