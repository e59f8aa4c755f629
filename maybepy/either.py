from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

from .maybe import Maybe, Just, NOTHING

E = TypeVar("E")
A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")


class Either(Generic[E, A]):
    """Exactly one of a failure value (``Left``) or a success value (``Right``).

    Combinators are right-biased; ``map_left``/``flat_map_left`` work on the
    failure side. ``left()`` and ``right()`` view the two cases as Maybe
    slots, exactly one of which is present.
    """
    def is_left(self) -> bool: raise NotImplementedError
    def is_right(self) -> bool: return not self.is_left()

    def left(self) -> Maybe[E]:
        return Just(self.error) if self.is_left() else NOTHING  # type: ignore[attr-defined]

    def right(self) -> Maybe[A]:
        return Just(self.value) if self.is_right() else NOTHING  # type: ignore[attr-defined]

    def map(self, f: Callable[[A], B]) -> "Either[E, B]":
        if self.is_right():
            return Right(f(self.value))  # type: ignore[attr-defined]
        return self  # type: ignore[return-value]

    def flat_map(self, f: Callable[[A], "Either[E, B]"]) -> "Either[E, B]":
        if self.is_right():
            return _ensure_either(f(self.value))  # type: ignore[attr-defined]
        return self  # type: ignore[return-value]

    def map_left(self, f: Callable[[E], B]) -> "Either[B, A]":
        if self.is_left():
            return Left(f(self.error))  # type: ignore[attr-defined]
        return self  # type: ignore[return-value]

    def flat_map_left(self, f: Callable[[E], "Either[B, A]"]) -> "Either[B, A]":
        if self.is_left():
            return _ensure_either(f(self.error))  # type: ignore[attr-defined]
        return self  # type: ignore[return-value]

    def join(self, on_left: Callable[[E], C], on_right: Callable[[A], C]) -> C:
        """Fold into a single value by calling exactly one of the handlers."""
        if self.is_left():
            return on_left(self.error)  # type: ignore[attr-defined]
        return on_right(self.value)  # type: ignore[attr-defined]

    def get_or_else(self, default: A) -> A:
        return self.value if self.is_right() else default  # type: ignore[attr-defined]


@dataclass(frozen=True)
class Left(Either[E, A]):
    error: E
    def is_left(self) -> bool: return True


@dataclass(frozen=True)
class Right(Either[E, A]):
    value: A
    def is_left(self) -> bool: return False


def from_maybe(m: Maybe[A], if_empty: E) -> Either[E, A]:
    """``Right(v)`` for ``Just(v)``, ``Left(if_empty)`` for an empty Maybe."""
    if m.is_some():
        return Right(m.unsafe_get())
    return Left(if_empty)


def _ensure_either(e: object) -> Either:
    if not isinstance(e, Either):
        raise TypeError(f"flat_map function must return an Either, got {type(e).__name__}")
    return e
