from __future__ import annotations
import copy
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterator, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")
B = TypeVar("B")


class EmptyMaybeError(AssertionError):
    """Raised when the payload of an empty Maybe is read with ``unsafe_get``."""


class Maybe(Generic[T]):
    """Zero or one value of type ``T``.

    A Maybe is either ``Just(value)`` or the ``NOTHING`` singleton, chosen at
    construction and never changed afterwards. Every combinator returns a new
    container.

    Example:
        ```python
        port = maybe("8080").map(int).get(80)
        for p in from_nullable(env.get("PORT")):
            ...
        ```
    """
    def is_some(self) -> bool: raise NotImplementedError
    def is_none(self) -> bool: return not self.is_some()

    def size(self) -> int:
        return 1 if self.is_some() else 0

    def empty(self) -> bool:
        return not self.is_some()

    def __len__(self) -> int: return self.size()
    def __bool__(self) -> bool: return self.is_some()

    def get(self, default: U) -> T | U:
        """Return the payload, or ``default`` when empty.

        The stored object itself is returned, not a copy; mutating a mutable
        payload through it is visible in this container.
        """
        return self.value if self.is_some() else default  # type: ignore[attr-defined]

    def unsafe_get(self) -> T:
        """Return the payload of a present container.

        Callers must check presence first. Like :meth:`get`, this returns the
        stored object itself.

        Raises:
            EmptyMaybeError: If the container is empty
        """
        if not self.is_some():
            raise EmptyMaybeError("unsafe_get must not be called on an empty Maybe")
        return self.value  # type: ignore[attr-defined]

    def fold(self, on_nothing: Callable[[], B], on_just: Callable[[T], B]) -> B:
        if self.is_some():
            return on_just(self.value)  # type: ignore[attr-defined]
        return on_nothing()

    def map(self, f: Callable[[T], U]) -> "Maybe[U]":
        """Apply ``f`` to a copy of the payload and wrap the result.

        ``f`` is not called on an empty container. The payload is copied with
        ``copy.copy`` so ``f`` cannot alter this container through its
        argument (a shallow copy; nested objects are still shared). Use
        :meth:`map_move` when the receiver is about to be discarded.
        """
        if self.is_some():
            return Just(f(copy.copy(self.value)))  # type: ignore[attr-defined]
        return NOTHING

    def map_move(self, f: Callable[[T], U]) -> "Maybe[U]":
        """Like :meth:`map` but hands the payload itself to ``f``."""
        if self.is_some():
            return Just(f(self.value))  # type: ignore[attr-defined]
        return NOTHING

    def flat_map(self, f: Callable[[T], "Maybe[U]"]) -> "Maybe[U]":
        """Apply a Maybe-returning ``f`` to a copy of the payload, unnested.

        Raises:
            TypeError: If ``f`` does not return a Maybe
        """
        if self.is_some():
            return _ensure_maybe(f(copy.copy(self.value)))  # type: ignore[attr-defined]
        return NOTHING

    def flat_map_move(self, f: Callable[[T], "Maybe[U]"]) -> "Maybe[U]":
        if self.is_some():
            return _ensure_maybe(f(self.value))  # type: ignore[attr-defined]
        return NOTHING

    def __iter__(self) -> Iterator[T]:
        """Yield the stored payload (not a copy) once, or nothing when empty."""
        if self.is_some():
            yield self.value  # type: ignore[attr-defined]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Maybe):
            return NotImplemented
        if self.is_some():
            return other.is_some() and self.value == other.value  # type: ignore[attr-defined]
        return not other.is_some()

    def __hash__(self) -> int:
        if self.is_some():
            return hash((Just, self.value))  # type: ignore[attr-defined]
        return hash(_Nothing)


@dataclass(frozen=True, eq=False)
class Just(Maybe[T]):
    value: T
    def is_some(self) -> bool: return True

    def __copy__(self) -> "Just[T]":
        return Just(copy.copy(self.value))

    def __deepcopy__(self, memo: dict) -> "Just[T]":
        return Just(copy.deepcopy(self.value, memo))


class _Nothing(Maybe[Any]):
    __slots__ = ()
    _instance: Optional["_Nothing"] = None

    def __new__(cls) -> "_Nothing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str: return "Nothing"
    def is_some(self) -> bool: return False
    def __copy__(self) -> "_Nothing": return self
    def __deepcopy__(self, memo: dict) -> "_Nothing": return self


NOTHING: Maybe[Any] = _Nothing()

_MISSING: Any = object()


def maybe(value: T = _MISSING) -> Maybe[T]:
    """``maybe(v)`` is ``Just(v)``; ``maybe()`` is the empty container."""
    if value is _MISSING:
        return NOTHING
    return Just(value)


def from_nullable(v: Optional[T]) -> Maybe[T]:
    return Just(v) if v is not None else NOTHING


def _ensure_maybe(m: Any) -> Maybe[Any]:
    if not isinstance(m, Maybe):
        raise TypeError(f"flat_map function must return a Maybe, got {type(m).__name__}")
    return m
