"""Result type: Ok[T] | Err[E] for explicit error handling.

Every combinator is defined by case analysis on the two variants. There is
no third state, so each method on ``Ok`` has a mirror on ``Err`` and none of
them can fail on their own; only the callbacks you pass in can.

Examples:
    >>> Ok(5).map(lambda x: x * 2)
    Ok(value=10)
    >>> Err('boom').map(lambda x: x * 2)
    Err(error='boom')
    >>> Ok(5).and_then(lambda x: Err('too small') if x < 10 else Ok(x))
    Err(error='too small')
"""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING, Any, Generic, NoReturn, TypeVar, Union

import msgspec

if TYPE_CHECKING:
    from anyhow.errors import AnyhowError

__all__ = ['Err', 'Ok', 'Result', 'call_catching', 'run_catching', 'to_result_or']

T = TypeVar('T')
U = TypeVar('U')
E = TypeVar('E')
F = TypeVar('F')


class Ok(msgspec.Struct, Generic[T], frozen=True, gc=False):
    """Success variant of Result containing a value of type T.

    Ok represents the successful outcome of an operation. It wraps a value
    that can be extracted, transformed, or propagated through a chain of
    Result-returning operations.

    Examples:
        >>> ok = Ok(42)
        >>> ok.get()
        42
        >>> ok.map(lambda x: x * 2)
        Ok(value=84)
    """

    value: T

    def is_ok(self) -> bool:
        """Return True since this is Ok."""
        return True

    def is_err(self) -> bool:
        """Return False since this is Ok."""
        return False

    # -- access ---------------------------------------------------------------

    def get(self) -> T:
        """Return the contained value."""
        return self.value

    def ok(self) -> T:
        """Alias for get()."""
        return self.value

    def get_error(self) -> None:
        """Return None since this is Ok."""
        return None

    def err(self) -> None:
        """Alias for get_error()."""
        return None

    def get_or(self, default: T) -> T:  # noqa: ARG002
        """Return the contained value, ignoring the default."""
        return self.value

    def get_or_else(self, f: Callable[[Any], T]) -> T:  # noqa: ARG002
        """Return the contained value, ignoring the fallback function."""
        return self.value

    def get_error_or(self, default: E) -> E:
        """Return the default since this is Ok."""
        return default

    def get_error_or_else(self, f: Callable[[T], E]) -> E:
        """Compute an error from the contained value.

        Args:
            f: Function that turns the value into an error.

        Returns:
            The result of applying f to the value.
        """
        return f(self.value)

    def get_or_throw(self, transform: Callable[[Any], BaseException] | None = None) -> T:  # noqa: ARG002
        """Return the contained value; nothing is raised for Ok."""
        return self.value

    def unwrap(self) -> T:
        """Return the contained Ok value.

        Since this is Ok, this always succeeds.
        """
        return self.value

    def unwrap_err(self) -> NoReturn:
        """Raise since Ok has no error to unwrap.

        Raises:
            RuntimeError: Always.
        """
        raise RuntimeError(f'Called unwrap_err on Ok: {self.value!r}')

    def expect(self, _msg: str) -> T:
        """Return the contained Ok value, ignoring the message."""
        return self.value

    def merge(self) -> T:
        """Collapse to the contained value."""
        return self.value

    def iter(self) -> Iterator[T]:
        """Iterate over the value.

        Yields:
            The contained value, exactly once.
        """
        yield self.value

    def __iter__(self) -> Iterator[T]:
        return self.iter()

    # -- mapping --------------------------------------------------------------

    def map(self, f: Callable[[T], U]) -> Ok[U]:
        """Apply a function to the contained value.

        Args:
            f: Function to apply to the Ok value.

        Returns:
            Ok containing the result of applying f to the value.
        """
        return Ok(f(self.value))

    def map_catching(self, f: Callable[[T], U]) -> Result[U, Exception]:
        """Apply a function to the value, capturing a raised exception as Err.

        Args:
            f: Function to apply to the Ok value.

        Returns:
            Ok of the mapped value, or Err of the exception f raised.
        """
        return run_catching(f, self.value)

    def map_error(self, _f: Callable[[Any], F]) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    def map_or(self, default: U, f: Callable[[T], U]) -> U:  # noqa: ARG002
        """Apply f to the value, ignoring the default."""
        return f(self.value)

    def map_or_else(self, default: Callable[[Any], U], f: Callable[[T], U]) -> U:  # noqa: ARG002
        """Apply f to the value, ignoring the default function."""
        return f(self.value)

    def map_both(self, ok: Callable[[T], U], err: Callable[[Any], U]) -> U:  # noqa: ARG002
        """Collapse the Result by applying whichever branch matches.

        Args:
            ok: Function applied to the value when Ok.
            err: Function applied to the error when Err.

        Returns:
            ok(value), since this is Ok.
        """
        return ok(self.value)

    def fold(self, ok: Callable[[T], U], err: Callable[[Any], U]) -> U:
        """Alias for map_both()."""
        return self.map_both(ok, err)

    def flat_map_both(
        self, ok: Callable[[T], Ok[U] | Err[E]], err: Callable[[Any], Ok[U] | Err[E]]
    ) -> Ok[U] | Err[E]:  # noqa: ARG002
        """Return the Result produced by the ok branch."""
        return ok(self.value)

    def map_either(self, ok: Callable[[T], U], err: Callable[[Any], F]) -> Ok[U]:  # noqa: ARG002
        """Map the value with the ok branch, keeping the Ok variant.

        Unlike map_both(), each branch may produce a different type, and the
        outcome is recombined into a new Result.
        """
        return Ok(ok(self.value))

    def flat_map_either(
        self, ok: Callable[[T], Ok[U] | Err[F]], err: Callable[[Any], Ok[U] | Err[F]]
    ) -> Ok[U] | Err[F]:  # noqa: ARG002
        """Return the Result produced by the ok branch."""
        return ok(self.value)

    def map_all(self, f: Callable[[Any], Ok[U] | Err[E]]) -> Ok[list[U]] | Err[E]:
        """Map every element of the contained iterable through f.

        Short-circuits on the first Err returned by f.

        Args:
            f: Result-returning function applied to each element.

        Returns:
            Ok of the mapped elements, or the first Err.
        """
        from anyhow.iterables import map_result

        return map_result(self.value, f)

    # -- chaining -------------------------------------------------------------

    def and_then(self, f: Callable[[T], Ok[U] | Err[E]]) -> Ok[U] | Err[E]:
        """Apply a function that returns a Result to the contained value.

        Also known as flat_map or bind.

        Args:
            f: Function that takes T and returns Result[U, E].

        Returns:
            The Result returned by f.
        """
        return f(self.value)

    def flat_map(self, f: Callable[[T], Ok[U] | Err[E]]) -> Ok[U] | Err[E]:
        """Alias for and_then()."""
        return self.and_then(f)

    def and_(self, other: Ok[U] | Err[E]) -> Ok[U] | Err[E]:
        """Return other since this is Ok."""
        return other

    def or_(self, _other: Ok[T] | Err[F]) -> Ok[T]:
        """Return self since this is Ok."""
        return self

    def or_else(self, _f: Callable[[Any], Ok[T] | Err[F]]) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    def or_else_throw(self) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    def throw_if(self, _predicate: Callable[[Any], bool]) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    def throw_unless(self, _predicate: Callable[[Any], bool]) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    def flatten(self) -> Any:
        """Flatten a nested Result.

        Converts Result[Result[T, E], E] into Result[T, E].
        """
        return self.value

    def transpose(self) -> Ok[T] | None:
        """Turn Result[T | None, E] into Result[T, E] | None.

        Ok(None) becomes None (no result at all); any other Ok is returned
        unchanged.
        """
        if self.value is None:
            return None
        return self

    def to_error_if(self, predicate: Callable[[T], bool], f: Callable[[T], E]) -> Ok[T] | Err[E]:
        """Turn the value into an error when it satisfies the predicate.

        Args:
            predicate: Test applied to the value.
            f: Function producing the error from the value.

        Returns:
            Err(f(value)) if predicate(value), else self.
        """
        if predicate(self.value):
            return Err(f(self.value))
        return self

    def to_error_if_none(self, error: Callable[[], E]) -> Ok[T] | Err[E]:
        """Return Err(error()) if the value is None, else self."""
        if self.value is None:
            return Err(error())
        return self

    def to_error_unless(self, predicate: Callable[[T], bool], f: Callable[[T], E]) -> Ok[T] | Err[E]:
        """Return Err(f(value)) unless the value satisfies the predicate."""
        if predicate(self.value):
            return self
        return Err(f(self.value))

    def to_error_unless_none(self, error: Callable[[], E]) -> Ok[T] | Err[E]:
        """Keep Ok(None); any other value becomes Err(error())."""
        if self.value is None:
            return self
        return Err(error())

    # -- recovery -------------------------------------------------------------

    def recover(self, _f: Callable[[Any], T]) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    def recover_catching(self, _f: Callable[[Any], T]) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    def recover_if(self, _predicate: Callable[[Any], bool], _f: Callable[[Any], T]) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    def recover_unless(self, _predicate: Callable[[Any], bool], _f: Callable[[Any], T]) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    def and_then_recover(self, _f: Callable[[Any], Ok[T] | Err[E]]) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    def and_then_recover_if(
        self, _predicate: Callable[[Any], bool], _f: Callable[[Any], Ok[T] | Err[E]]
    ) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    def and_then_recover_unless(
        self, _predicate: Callable[[Any], bool], _f: Callable[[Any], Ok[T] | Err[E]]
    ) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    # -- inspection -----------------------------------------------------------

    def on_success(self, action: Callable[[T], Any]) -> Ok[T]:
        """Call action with the value for side effects.

        Returns:
            self, unchanged.
        """
        action(self.value)
        return self

    def on_failure(self, _action: Callable[[Any], Any]) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    def context(self, _message: str) -> Ok[T]:
        """Return self unchanged since there is no error to annotate."""
        return self

    def __lt__(self, other: object) -> bool:
        return _compare(operator.lt, self, other)

    def __le__(self, other: object) -> bool:
        return _compare(operator.le, self, other)

    def __gt__(self, other: object) -> bool:
        return _compare(operator.gt, self, other)

    def __ge__(self, other: object) -> bool:
        return _compare(operator.ge, self, other)


class Err(msgspec.Struct, Generic[E], frozen=True, gc=False):
    """Error variant of Result containing an error of type E.

    Err represents the failure outcome of an operation. It wraps an error
    value that can be transformed, recovered from, or propagated. The error
    may be any value; it does not have to be an exception.

    Examples:
        >>> err = Err('something went wrong')
        >>> err.is_err()
        True
        >>> err.get_or(0)
        0
    """

    error: E

    def is_ok(self) -> bool:
        """Return False since this is Err."""
        return False

    def is_err(self) -> bool:
        """Return True since this is Err."""
        return True

    # -- access ---------------------------------------------------------------

    def get(self) -> None:
        """Return None since this is Err."""
        return None

    def ok(self) -> None:
        """Alias for get()."""
        return None

    def get_error(self) -> E:
        """Return the contained error."""
        return self.error

    def err(self) -> E:
        """Alias for get_error()."""
        return self.error

    def get_or(self, default: T) -> T:
        """Return the default value since this is Err."""
        return default

    def get_or_else(self, f: Callable[[E], T]) -> T:
        """Compute a fallback value from the error.

        Args:
            f: Function that turns the error into a value.

        Returns:
            The result of applying f to the error.
        """
        return f(self.error)

    def get_error_or(self, _default: E) -> E:
        """Return the contained error, ignoring the default."""
        return self.error

    def get_error_or_else(self, _f: Callable[[Any], E]) -> E:
        """Return the contained error, ignoring the fallback function."""
        return self.error

    def get_or_throw(self, transform: Callable[[E], BaseException] | None = None) -> NoReturn:
        """Raise the error, turning the Result back into an exception.

        Args:
            transform: Optional function that builds the exception to raise.
                Without it, an exception error is raised as-is and any other
                error value is raised as an AnyhowError.

        Raises:
            BaseException: Always.
        """
        if transform is not None:
            raise transform(self.error)
        raise _as_exception(self.error)

    def unwrap(self) -> NoReturn:
        """Raise an exception since this is Err.

        Raises:
            RuntimeError: Always, since Err has no Ok value to unwrap.
        """
        cause = self.error if isinstance(self.error, BaseException) else None
        raise RuntimeError(f'Called unwrap on Err: {self.error!r}') from cause

    def unwrap_err(self) -> E:
        """Return the contained error."""
        return self.error

    def expect(self, msg: str) -> NoReturn:
        """Raise an exception with a custom message.

        Args:
            msg: Custom error message.

        Raises:
            RuntimeError: Always, with the custom message.
        """
        cause = self.error if isinstance(self.error, BaseException) else None
        raise RuntimeError(f'{msg}: {self.error!r}') from cause

    def merge(self) -> E:
        """Collapse to the contained error."""
        return self.error

    def iter(self) -> Iterator[Any]:
        """Iterate over the value (empty iterator for Err)."""
        yield from ()

    def __iter__(self) -> Iterator[Any]:
        return self.iter()

    # -- mapping --------------------------------------------------------------

    def map(self, _f: Callable[[Any], U]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    def map_catching(self, _f: Callable[[Any], U]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    def map_error(self, f: Callable[[E], F]) -> Err[F]:
        """Apply a function to the contained error.

        Args:
            f: Function to apply to the error value.

        Returns:
            Err containing the transformed error.
        """
        return Err(f(self.error))

    def map_or(self, default: U, _f: Callable[[Any], U]) -> U:
        """Return the default since this is Err."""
        return default

    def map_or_else(self, default: Callable[[E], U], _f: Callable[[Any], U]) -> U:
        """Compute the default from the error since this is Err."""
        return default(self.error)

    def map_both(self, ok: Callable[[Any], U], err: Callable[[E], U]) -> U:  # noqa: ARG002
        """Collapse the Result by applying the err branch."""
        return err(self.error)

    def fold(self, ok: Callable[[Any], U], err: Callable[[E], U]) -> U:
        """Alias for map_both()."""
        return self.map_both(ok, err)

    def flat_map_both(
        self, ok: Callable[[Any], Ok[U] | Err[E]], err: Callable[[E], Ok[U] | Err[E]]
    ) -> Ok[U] | Err[E]:  # noqa: ARG002
        """Return the Result produced by the err branch."""
        return err(self.error)

    def map_either(self, ok: Callable[[Any], U], err: Callable[[E], F]) -> Err[F]:  # noqa: ARG002
        """Map the error with the err branch, keeping the Err variant."""
        return Err(err(self.error))

    def flat_map_either(
        self, ok: Callable[[Any], Ok[U] | Err[F]], err: Callable[[E], Ok[U] | Err[F]]
    ) -> Ok[U] | Err[F]:  # noqa: ARG002
        """Return the Result produced by the err branch."""
        return err(self.error)

    def map_all(self, _f: Callable[[Any], Any]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    # -- chaining -------------------------------------------------------------

    def and_then(self, _f: Callable[[Any], Ok[U] | Err[E]]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    def flat_map(self, _f: Callable[[Any], Ok[U] | Err[E]]) -> Err[E]:
        """Alias for and_then()."""
        return self

    def and_(self, _other: Ok[U] | Err[E]) -> Err[E]:
        """Return self since this is Err."""
        return self

    def or_(self, other: Ok[T] | Err[F]) -> Ok[T] | Err[F]:
        """Return other since this is Err."""
        return other

    def or_else(self, f: Callable[[E], Ok[T] | Err[F]]) -> Ok[T] | Err[F]:
        """Apply a recovery function to the error.

        Args:
            f: Function that takes the error and returns a new Result.

        Returns:
            The Result returned by f.
        """
        return f(self.error)

    def or_else_throw(self) -> NoReturn:
        """Raise the error (see get_or_throw)."""
        raise _as_exception(self.error)

    def throw_if(self, predicate: Callable[[E], bool]) -> Err[E]:
        """Raise the error if it satisfies the predicate, else return self."""
        if predicate(self.error):
            raise _as_exception(self.error)
        return self

    def throw_unless(self, predicate: Callable[[E], bool]) -> Err[E]:
        """Raise the error unless it satisfies the predicate, else return self."""
        if not predicate(self.error):
            raise _as_exception(self.error)
        return self

    def flatten(self) -> Err[E]:
        """Return self since this is Err (nothing to flatten)."""
        return self

    def transpose(self) -> Err[E]:
        """Return self since this is Err."""
        return self

    def to_error_if(self, _predicate: Callable[[Any], bool], _f: Callable[[Any], E]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    def to_error_if_none(self, _error: Callable[[], E]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    def to_error_unless(self, _predicate: Callable[[Any], bool], _f: Callable[[Any], E]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    def to_error_unless_none(self, error: Callable[[], F]) -> Err[F]:
        """Replace the error with error(); only Ok(None) survives this check."""
        return Err(error())

    # -- recovery -------------------------------------------------------------

    def recover(self, f: Callable[[E], T]) -> Ok[T]:
        """Convert the error into a value.

        Args:
            f: Function that turns the error into a success value.

        Returns:
            Ok(f(error)).
        """
        return Ok(f(self.error))

    def recover_catching(self, f: Callable[[E], T]) -> Result[T, Exception]:
        """Like recover(), capturing an exception raised by f as Err."""
        return run_catching(f, self.error)

    def recover_if(self, predicate: Callable[[E], bool], f: Callable[[E], T]) -> Ok[T] | Err[E]:
        """Recover only when the error satisfies the predicate."""
        if predicate(self.error):
            return Ok(f(self.error))
        return self

    def recover_unless(self, predicate: Callable[[E], bool], f: Callable[[E], T]) -> Ok[T] | Err[E]:
        """Recover only when the error does not satisfy the predicate."""
        if predicate(self.error):
            return self
        return Ok(f(self.error))

    def and_then_recover(self, f: Callable[[E], Ok[T] | Err[E]]) -> Ok[T] | Err[E]:
        """Recover with a function that may itself fail.

        Args:
            f: Function that takes the error and returns a new Result.

        Returns:
            The Result returned by f.
        """
        return f(self.error)

    def and_then_recover_if(
        self, predicate: Callable[[E], bool], f: Callable[[E], Ok[T] | Err[E]]
    ) -> Ok[T] | Err[E]:
        """Apply and_then_recover() only when the error satisfies the predicate."""
        if predicate(self.error):
            return f(self.error)
        return self

    def and_then_recover_unless(
        self, predicate: Callable[[E], bool], f: Callable[[E], Ok[T] | Err[E]]
    ) -> Ok[T] | Err[E]:
        """Apply and_then_recover() only when the error does not satisfy the predicate."""
        if predicate(self.error):
            return self
        return f(self.error)

    # -- inspection -----------------------------------------------------------

    def on_success(self, _action: Callable[[Any], Any]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    def on_failure(self, action: Callable[[E], Any]) -> Err[E]:
        """Call action with the error for side effects.

        Returns:
            self, unchanged.
        """
        action(self.error)
        return self

    def context(self, message: str) -> Err[AnyhowError]:
        """Attach a context message to the error.

        The error is first converted to an AnyhowError, so this works for
        string and exception errors alike.

        Args:
            message: Human-readable description of what was being attempted.

        Returns:
            Err holding a new AnyhowError with the message appended.
        """
        from anyhow.errors import AnyhowError

        return Err(AnyhowError.of(self.error).context(message))

    def __lt__(self, other: object) -> bool:
        return _compare(operator.lt, self, other)

    def __le__(self, other: object) -> bool:
        return _compare(operator.le, self, other)

    def __gt__(self, other: object) -> bool:
        return _compare(operator.gt, self, other)

    def __ge__(self, other: object) -> bool:
        return _compare(operator.ge, self, other)


Result = Union[Ok[T], Err[E]]
"""Either Ok[T] or Err[E]."""


def _sort_key(result: Ok[Any] | Err[Any]) -> tuple[int, Any]:
    # Ok orders before Err; payloads break ties within a variant.
    if isinstance(result, Ok):
        return (0, result.value)
    return (1, result.error)


def _compare(op: Callable[[Any, Any], bool], left: Ok[Any] | Err[Any], right: object) -> bool:
    if not isinstance(right, (Ok, Err)):
        return NotImplemented
    return op(_sort_key(left), _sort_key(right))


def _as_exception(error: object) -> BaseException:
    if isinstance(error, BaseException):
        return error
    from anyhow.errors import AnyhowError

    return AnyhowError.of(error)


def run_catching(fn: Callable[..., T], /, *args: Any, **kwargs: Any) -> Ok[T] | Err[Exception]:
    """Call fn, capturing a raised exception as Err.

    Only ``Exception`` subclasses are captured. ``KeyboardInterrupt``,
    ``SystemExit`` and scope exits keep unwinding.

    Args:
        fn: The callable to run.
        *args: Positional arguments for fn.
        **kwargs: Keyword arguments for fn.

    Returns:
        Ok(fn(*args, **kwargs)), or Err of the exception fn raised.

    Examples:
        >>> run_catching(int, '42')
        Ok(value=42)
        >>> run_catching(int, 'x').is_err()
        True
    """
    return call_catching(fn, args, kwargs, (Exception,))


def call_catching(
    fn: Callable[..., T],
    args: tuple[Any, ...],
    kwargs: dict[str, Any],
    exceptions: tuple[type[E], ...],
) -> Ok[T] | Err[E]:
    """Call fn(*args, **kwargs), capturing only the listed exception types as Err."""
    try:
        return Ok(fn(*args, **kwargs))
    except exceptions as e:
        return Err(e)


def to_result_or(value: T | None, error: Callable[[], E]) -> Ok[T] | Err[E]:
    """Convert a nullable value to a Result.

    Args:
        value: The value that may be None.
        error: Called to produce the error when value is None.

    Returns:
        Ok(value) if value is not None, otherwise Err(error()).
    """
    if value is None:
        return Err(error())
    return Ok(value)
