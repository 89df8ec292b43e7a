"""@safe: run a raising function and hand back a Result instead."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import wrapt

from anyhow.result import call_catching

__all__ = ['safe']


def safe(func: Callable[..., Any] | None = None, *, exceptions: tuple[type[BaseException], ...] = (Exception,)) -> Any:
    """Return Ok(value) from the decorated function, or Err(exception) when it raises.

    Only ``exceptions`` are captured; anything else, scope exits included,
    keeps unwinding. Works bare (``@safe``) or with arguments
    (``@safe(exceptions=(ValueError,))``), on functions and methods alike.

    Example:
        ```python
        @safe(exceptions=(ValueError,))
        def parse_port(raw: str) -> int:
            return int(raw)
        parse_port('8080')
        # Ok(value=8080)
        parse_port('http')
        # Err(error=ValueError(...))
        ```
    """

    @wrapt.decorator
    def capture(wrapped, instance, args, kwargs):  # noqa: ARG001
        return call_catching(wrapped, args, kwargs, exceptions)

    return capture if func is None else capture(func)
