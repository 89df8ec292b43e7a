"""Bulk operations over iterables of Results.

Every short-circuiting helper walks its input lazily and returns at the
first Err, so the remaining elements of a generator are never produced.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from typing import Any, TypeVar

from anyhow.result import Err, Ok

__all__ = [
    'all_err',
    'all_ok',
    'any_err',
    'any_ok',
    'combine',
    'count_err',
    'count_ok',
    'errors_of',
    'filter_errors',
    'filter_errors_to',
    'filter_values',
    'filter_values_to',
    'fold',
    'fold_right',
    'map_result',
    'map_result_indexed',
    'map_result_indexed_not_none',
    'map_result_indexed_not_none_to',
    'map_result_indexed_to',
    'map_result_not_none',
    'map_result_not_none_to',
    'map_result_to',
    'partition',
    'values_of',
]

T = TypeVar('T')
U = TypeVar('U')
E = TypeVar('E')
R = TypeVar('R')
C = TypeVar('C')


def _add(destination: Any, item: Any) -> None:
    # list-like collections append, set-like ones add
    if hasattr(destination, 'append'):
        destination.append(item)
    else:
        destination.add(item)


def combine(results: Iterable[Ok[T] | Err[E]]) -> Ok[list[T]] | Err[E]:
    """Collect values from an iterable of Results, short-circuiting on first Err.

    Args:
        results: An iterable of Result instances.

    Returns:
        Ok with the values in input order if all are Ok, otherwise the first Err.

    Examples:
        >>> combine([Ok(1), Ok(2)])
        Ok(value=[1, 2])
        >>> combine([Ok(1), Err('a'), Err('b')])
        Err(error='a')
    """
    values: list[T] = []
    for result in results:
        if isinstance(result, Err):
            return result
        values.append(result.value)
    return Ok(values)


def values_of(*results: Ok[T] | Err[E]) -> list[T]:
    """Return the values of the Ok arguments, in order."""
    return filter_values(results)


def errors_of(*results: Ok[T] | Err[E]) -> list[E]:
    """Return the errors of the Err arguments, in order."""
    return filter_errors(results)


def partition(results: Iterable[Ok[T] | Err[E]]) -> tuple[list[T], list[E]]:
    """Separate an iterable of Results into successes and failures.

    Relative order is preserved within each list.

    Args:
        results: An iterable of Result instances.

    Returns:
        A tuple of (values, errors).
    """
    values: list[T] = []
    errors: list[E] = []
    for result in results:
        if isinstance(result, Ok):
            values.append(result.value)
        else:
            errors.append(result.error)
    return values, errors


def filter_values(results: Iterable[Ok[T] | Err[E]]) -> list[T]:
    return [result.value for result in results if isinstance(result, Ok)]


def filter_errors(results: Iterable[Ok[T] | Err[E]]) -> list[E]:
    return [result.error for result in results if isinstance(result, Err)]


def filter_values_to(results: Iterable[Ok[T] | Err[E]], destination: C) -> C:
    """Add the value of every Ok into destination and return it."""
    for result in results:
        if isinstance(result, Ok):
            _add(destination, result.value)
    return destination


def filter_errors_to(results: Iterable[Ok[T] | Err[E]], destination: C) -> C:
    """Add the error of every Err into destination and return it."""
    for result in results:
        if isinstance(result, Err):
            _add(destination, result.error)
    return destination


def all_ok(results: Iterable[Ok[Any] | Err[Any]]) -> bool:
    return all(isinstance(result, Ok) for result in results)


def all_err(results: Iterable[Ok[Any] | Err[Any]]) -> bool:
    return all(isinstance(result, Err) for result in results)


def any_ok(results: Iterable[Ok[Any] | Err[Any]]) -> bool:
    return any(isinstance(result, Ok) for result in results)


def any_err(results: Iterable[Ok[Any] | Err[Any]]) -> bool:
    return any(isinstance(result, Err) for result in results)


def count_ok(results: Iterable[Ok[Any] | Err[Any]]) -> int:
    return sum(1 for result in results if isinstance(result, Ok))


def count_err(results: Iterable[Ok[Any] | Err[Any]]) -> int:
    return sum(1 for result in results if isinstance(result, Err))


def fold(items: Iterable[T], initial: R, op: Callable[[R, T], Ok[R] | Err[E]]) -> Ok[R] | Err[E]:
    """Accumulate left to right with a step that may fail.

    Args:
        items: Elements to fold over.
        initial: Starting accumulator.
        op: Called as op(accumulator, element); returns the next accumulator
            as a Result.

    Returns:
        Ok of the final accumulator, or the first Err returned by op.

    Examples:
        >>> fold([20, 30, 40, 50], 10, lambda acc, x: Ok(acc + x))
        Ok(value=150)
    """
    accumulator = initial
    for item in items:
        result = op(accumulator, item)
        if isinstance(result, Err):
            return result
        accumulator = result.value
    return Ok(accumulator)


def fold_right(items: Sequence[T], initial: R, op: Callable[[T, R], Ok[R] | Err[E]]) -> Ok[R] | Err[E]:
    """Accumulate right to left with a step that may fail.

    Args:
        items: Elements to fold over; must support reversed().
        initial: Starting accumulator.
        op: Called as op(element, accumulator).

    Returns:
        Ok of the final accumulator, or the first Err returned by op.
    """
    accumulator = initial
    for item in reversed(items):
        result = op(item, accumulator)
        if isinstance(result, Err):
            return result
        accumulator = result.value
    return Ok(accumulator)


def map_result_to(
    items: Iterable[T], destination: C, transform: Callable[[T], Ok[U] | Err[E]]
) -> Ok[C] | Err[E]:
    """Transform each element into destination, stopping at the first Err.

    Args:
        items: Elements to transform.
        destination: Collection the mapped values are added to.
        transform: Result-returning function applied to each element.

    Returns:
        Ok(destination), or the first Err produced by transform.
    """
    for item in items:
        result = transform(item)
        if isinstance(result, Err):
            return result
        _add(destination, result.value)
    return Ok(destination)


def map_result(items: Iterable[T], transform: Callable[[T], Ok[U] | Err[E]]) -> Ok[list[U]] | Err[E]:
    """Transform each element, stopping at the first Err.

    Examples:
        >>> map_result(['1', '2'], lambda s: Ok(int(s)))
        Ok(value=[1, 2])
    """
    return map_result_to(items, [], transform)


def map_result_not_none_to(
    items: Iterable[T], destination: C, transform: Callable[[T], Ok[U] | Err[E] | None]
) -> Ok[C] | Err[E]:
    """Like map_result_to(), skipping elements whose transform returns None."""
    for item in items:
        result = transform(item)
        if result is None:
            continue
        if isinstance(result, Err):
            return result
        _add(destination, result.value)
    return Ok(destination)


def map_result_not_none(
    items: Iterable[T], transform: Callable[[T], Ok[U] | Err[E] | None]
) -> Ok[list[U]] | Err[E]:
    """Like map_result(), skipping elements whose transform returns None."""
    return map_result_not_none_to(items, [], transform)


def map_result_indexed_to(
    items: Iterable[T], destination: C, transform: Callable[[int, T], Ok[U] | Err[E]]
) -> Ok[C] | Err[E]:
    """Like map_result_to(), passing each element's index as the first argument."""
    for index, item in enumerate(items):
        result = transform(index, item)
        if isinstance(result, Err):
            return result
        _add(destination, result.value)
    return Ok(destination)


def map_result_indexed(
    items: Iterable[T], transform: Callable[[int, T], Ok[U] | Err[E]]
) -> Ok[list[U]] | Err[E]:
    """Like map_result(), passing each element's index as the first argument."""
    return map_result_indexed_to(items, [], transform)


def map_result_indexed_not_none_to(
    items: Iterable[T], destination: C, transform: Callable[[int, T], Ok[U] | Err[E] | None]
) -> Ok[C] | Err[E]:
    for index, item in enumerate(items):
        result = transform(index, item)
        if result is None:
            continue
        if isinstance(result, Err):
            return result
        _add(destination, result.value)
    return Ok(destination)


def map_result_indexed_not_none(
    items: Iterable[T], transform: Callable[[int, T], Ok[U] | Err[E] | None]
) -> Ok[list[U]] | Err[E]:
    return map_result_indexed_not_none_to(items, [], transform)
