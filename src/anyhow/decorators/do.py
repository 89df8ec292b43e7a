"""@do decorator for generator-based do-notation."""

from __future__ import annotations

from collections.abc import Callable, Generator
from typing import Any, ParamSpec, TypeVar

import wrapt

from anyhow.errors import AnyhowError
from anyhow.option import NothingType, Some
from anyhow.result import Err, Ok

__all__ = ['do']

P = ParamSpec('P')
T = TypeVar('T')
E = TypeVar('E')


def do(
    func: Callable[P, Generator[Ok[Any] | Err[E] | Some[Any] | NothingType, Any, T]],
) -> Callable[P, Ok[T] | Err[E] | Err[AnyhowError]]:
    """Decorator for generator-based do-notation with Result.

    Yield Result or Option values to extract their contents; a yielded Err
    ends the computation with that Err, and a yielded Nothing ends it with
    an AnyhowError. The generator's return value is wrapped in Ok.

    Args:
        func: A generator function that yields Results and returns T.

    Returns:
        A function that returns Result[T, E].

    Example:
        ```python
        @do
        def compute():
            x = yield get_x()  # Returns Err early if get_x() is Err
            y = yield get_y()
            return x + y
        ```
    """

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[P, Generator[Ok[Any] | Err[E] | Some[Any] | NothingType, Any, T]],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Ok[T] | Err[Any]:
        gen = wrapped(*args, **kwargs)
        try:
            result = next(gen)
            while True:
                if isinstance(result, Err):
                    gen.close()
                    return result
                if isinstance(result, NothingType):
                    gen.close()
                    return Err(AnyhowError('no value'))
                if isinstance(result, (Ok, Some)):
                    value = result.value
                else:
                    value = result
                result = gen.send(value)
        except StopIteration as e:
            return Ok(e.value)

    return wrapper(func)  # type: ignore[return-value]
