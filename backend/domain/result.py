"""
Result Channel

Two-variant container returned by command use cases. A Result is exactly
one of:
- Left(failure): usually a Notification with validation or gateway errors
- Right(value): the success value

Callers branch explicitly (`is_left()` / `is_right()` or `fold`) instead of
catching exceptions.
"""

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar, Union

L = TypeVar("L")
R = TypeVar("R")
T = TypeVar("T")


@dataclass(frozen=True)
class Left(Generic[L]):
    """Failure variant."""

    value: L

    def is_left(self) -> bool:
        return True

    def is_right(self) -> bool:
        return False

    def get(self):
        raise ValueError(f"get() called on Left: {self.value!r}")

    def get_left(self) -> L:
        return self.value

    def map(self, fn: Callable) -> "Left[L]":
        return self

    def map_left(self, fn: Callable[[L], T]) -> "Left[T]":
        return Left(fn(self.value))

    def bimap(self, on_left: Callable[[L], T], on_right: Callable) -> "Left[T]":
        return Left(on_left(self.value))

    def fold(self, on_left: Callable[[L], T], on_right: Callable) -> T:
        return on_left(self.value)


@dataclass(frozen=True)
class Right(Generic[R]):
    """Success variant."""

    value: R

    def is_left(self) -> bool:
        return False

    def is_right(self) -> bool:
        return True

    def get(self) -> R:
        return self.value

    def get_left(self):
        raise ValueError(f"get_left() called on Right: {self.value!r}")

    def map(self, fn: Callable[[R], T]) -> "Right[T]":
        return Right(fn(self.value))

    def map_left(self, fn: Callable) -> "Right[R]":
        return self

    def bimap(self, on_left: Callable, on_right: Callable[[R], T]) -> "Right[T]":
        return Right(on_right(self.value))

    def fold(self, on_left: Callable, on_right: Callable[[R], T]) -> T:
        return on_right(self.value)


Result = Union[Left[L], Right[R]]


def attempt(fn: Callable[[], R]) -> "Result[Exception, R]":
    """
    Run a callable and capture its outcome.

    Args:
        fn: Zero-argument callable

    Returns:
        Right(return value), or Left(exception) if the callable raised
    """
    try:
        return Right(fn())
    except Exception as e:
        return Left(e)
