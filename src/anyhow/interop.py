"""Bridges between Results and Python's raise/return convention.

Python code reports failure by raising; ``concurrent.futures.Future`` is the
standard container holding either a value or an exception. These helpers
move outcomes between that world and AnyhowResult.
"""

from __future__ import annotations

from collections.abc import Callable
from concurrent.futures import CancelledError, Future
from typing import Any, TypeVar

from anyhow.errors import AnyhowError
from anyhow.result import Err, Ok

__all__ = ['anyhow_call', 'from_future', 'to_anyhow', 'to_future']

T = TypeVar('T')


def to_anyhow(result: Ok[T] | Err[Any]) -> Ok[T] | Err[AnyhowError]:
    """Canonicalise the error of any Result into an AnyhowError."""
    if isinstance(result, Err):
        return AnyhowError.wrap(result.error)
    return result


def anyhow_call(fn: Callable[..., T], /, *args: Any, **kwargs: Any) -> Ok[T] | Err[AnyhowError]:
    """Call fn, capturing a raised exception as an AnyhowError.

    Examples:
        >>> anyhow_call(int, '7')
        Ok(value=7)
    """
    try:
        return Ok(fn(*args, **kwargs))
    except Exception as e:
        return AnyhowError.wrap(e)


def to_future(result: Ok[T] | Err[Any]) -> Future[T]:
    """Return an already-completed Future holding the outcome of result.

    An Err completes the future with its error as an AnyhowError.
    """
    future: Future[T] = Future()
    if isinstance(result, Ok):
        future.set_result(result.value)
    else:
        future.set_exception(AnyhowError.of(result.error))
    return future


def from_future(future: Future[T]) -> Ok[T] | Err[AnyhowError]:
    """Read a completed Future back into an AnyhowResult.

    Raises:
        ValueError: If the future has not finished.
    """
    if not future.done():
        msg = 'future has not completed'
        raise ValueError(msg)
    try:
        exception = future.exception(timeout=0)
    except CancelledError as e:
        return AnyhowError.wrap(e)
    if exception is not None:
        return AnyhowError.wrap(exception)
    return Ok(future.result(timeout=0))
