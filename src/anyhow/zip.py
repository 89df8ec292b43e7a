"""Combine several independent Results into one.

Both helpers take two to five producers (zero-argument callables returning a
Result) followed by a transform that receives the unwrapped values.

Example:
    ```python
    zip_results(lambda: Ok(1), lambda: Ok(2), lambda a, b: a + b)
    # Ok(value=3)
    zip_or_accumulate(lambda: Err('a'), lambda: Ok(2), lambda: Err('c'), lambda *xs: xs)
    # Err(error=['a', 'c'])
    ```
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from anyhow.result import Err, Ok

__all__ = ['zip_or_accumulate', 'zip_results']


_MIN_PRODUCERS = 2
_MAX_PRODUCERS = 5

Producer = Callable[[], 'Ok[Any] | Err[Any]']


def _split(name: str, args: tuple[Any, ...]) -> tuple[tuple[Producer, ...], Callable[..., Any]]:
    if not _MIN_PRODUCERS <= len(args) - 1 <= _MAX_PRODUCERS:
        msg = (
            f'{name}() takes {_MIN_PRODUCERS} to {_MAX_PRODUCERS} producers and a transform, '
            f'got {len(args)} arguments'
        )
        raise TypeError(msg)
    *producers, transform = args
    return tuple(producers), transform


def zip_results(*args: Any) -> Ok[Any] | Err[Any]:
    """Evaluate producers in order and combine their values.

    Stops at the first Err; later producers are not called.

    Args:
        *args: Two to five producers, then a transform taking one value per
            producer.

    Returns:
        Ok(transform(*values)), or the first Err.

    Raises:
        TypeError: If the number of producers is outside 2..5.
    """
    producers, transform = _split('zip_results', args)
    values = []
    for producer in producers:
        result = producer()
        if isinstance(result, Err):
            return result
        values.append(result.value)
    return Ok(transform(*values))


def zip_or_accumulate(*args: Any) -> Ok[Any] | Err[list[Any]]:
    """Evaluate every producer and collect all failures.

    Args:
        *args: Two to five producers, then a transform taking one value per
            producer.

    Returns:
        Ok(transform(*values)) if every producer succeeded, otherwise
        Err of the list of errors in producer order.

    Raises:
        TypeError: If the number of producers is outside 2..5.
    """
    producers, transform = _split('zip_or_accumulate', args)
    values = []
    errors = []
    for producer in producers:
        result = producer()
        if isinstance(result, Err):
            errors.append(result.error)
        else:
            values.append(result.value)
    if errors:
        return Err(errors)
    return Ok(transform(*values))
