from __future__ import annotations
from typing import Any, Awaitable, Callable, Generic, Optional, Tuple, Type, TypeVar, Union
import anyio
from .either import Either, Left, Right
from .logger import ConsoleLogger, get_logger

E = TypeVar("E"); A = TypeVar("A")

Catch = Union[Type[BaseException], Tuple[Type[BaseException], ...]]


class Failure(Exception, Generic[E]):
    """Carries an arbitrary failure value out of a computation.

    ``attempt`` turns ``raise Failure(42)`` into ``Left(42)``.
    """
    def __init__(self, error: E):
        super().__init__(repr(error)); self.error = error


def _captured(ex: BaseException, logger: Optional[ConsoleLogger]) -> Either[Any, Any]:
    err = ex.error if isinstance(ex, Failure) else ex
    (logger or get_logger()).debug("captured failure", kind=type(ex).__name__, error=repr(err))
    return Left(err)


def attempt(thunk: Callable[[], A], catch: Catch = Exception, logger: Optional[ConsoleLogger] = None) -> Either[Any, A]:
    """Run ``thunk`` and turn its outcome into an Either.

    Args:
        thunk: Zero-argument computation
        catch: Exception type(s) converted into ``Left``; anything else propagates
        logger: Logger for captured failures, the package logger by default

    Returns:
        ``Right(result)`` on normal return, ``Left(error)`` for a raised
        ``Failure(error)``, ``Left(exc)`` for a caught exception ``exc``

    Example:
        ```python
        attempt(lambda: int("42"))         # Right(value=42)
        attempt(lambda: int("x"))          # Left(error=ValueError(...))
        attempt(lambda: int("x"), catch=KeyError)  # raises ValueError
        ```
    """
    try:
        value = thunk()
    except Failure as fe:
        return _captured(fe, logger)
    except catch as ex:
        return _captured(ex, logger)
    return Right(value)


async def attempt_async(thunk: Callable[[], Awaitable[A]], catch: Catch = Exception, timeout: Optional[float] = None, logger: Optional[ConsoleLogger] = None) -> Either[Any, A]:
    """Async counterpart of :func:`attempt`.

    With ``timeout`` set the call runs under ``anyio.move_on_after`` and an
    expired deadline becomes ``Left(TimeoutError())`` whatever ``catch`` is.
    A ``TimeoutError`` raised by ``thunk`` itself is subject to ``catch``.
    Cancellation of the enclosing task always propagates.
    """
    try:
        if timeout is None:
            value = await thunk()
        else:
            with anyio.move_on_after(timeout) as scope:
                value = await thunk()
            if scope.cancelled_caught:
                return _captured(TimeoutError(f"deadline of {timeout}s expired"), logger)
    except Failure as fe:
        return _captured(fe, logger)
    except catch as ex:
        if isinstance(ex, anyio.get_cancelled_exc_class()):
            raise
        return _captured(ex, logger)
    return Right(value)
