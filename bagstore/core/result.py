"""Result Values — explicit success/failure returned by every fallible core operation.

Invariants:
    - Exactly one of Ok(value) / Err(error); both immutable
    - unwrap() on Err raises the carried error when it is an exception
    - Core functions return Results; only the shell calls unwrap()

Design Decisions:
    - Frozen dataclasses: structural equality and match-statement support for free
    - No third-party result library: two tiny classes cover every caller
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_err(self):
        raise ValueError(f"Called unwrap_err on {self!r}")

    def map(self, fn: Callable[[T], U]) -> Ok[U]:
        return Ok(fn(self.value))


@dataclass(frozen=True)
class Err(Generic[E]):
    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self):
        """Raise the carried error; non-exception errors are wrapped in ValueError."""
        if isinstance(self.error, BaseException):
            raise self.error
        raise ValueError(f"Called unwrap on {self!r}")

    def unwrap_err(self) -> E:
        return self.error

    def map(self, fn: Callable) -> Err[E]:
        return self


Result = Union[Ok[T], Err[E]]
