"""@scoped decorator: run a function body as an anyhow block."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

import wrapt

from anyhow.errors import AnyhowError
from anyhow.result import Err, Ok
from anyhow.scope import AnyhowScope, anyhow

__all__ = ['scoped']

T = TypeVar('T')


def scoped(func: Callable[..., T]) -> Callable[..., Ok[T] | Err[AnyhowError]]:
    """Decorator that supplies an AnyhowScope and returns an AnyhowResult.

    The decorated function takes the scope as its first parameter (after
    ``self`` for methods); callers omit it.

    Args:
        func: Function whose first parameter is an AnyhowScope.

    Returns:
        A wrapped function returning Ok of the original return value, or
        Err when the scope exited early.

    Example:
        ```python
        @scoped
        def total(scope: AnyhowScope, a: Result[int, str], b: Result[int, str]) -> int:
            return scope.bind(a) + scope.bind(b)

        total(Ok(1), Ok(2))
        # Ok(value=3)
        ```
    """

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[..., T],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Ok[T] | Err[AnyhowError]:
        def block(scope: AnyhowScope) -> T:
            return wrapped(scope, *args, **kwargs)

        return anyhow(block)

    return wrapper(func)  # type: ignore[return-value]
