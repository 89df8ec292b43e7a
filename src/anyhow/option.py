"""Option type: Some[T] | Nothing for optional values.

Scopes bind Options the same way they bind Results: ``Some`` yields its
value and ``Nothing`` exits the block.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Generic, NoReturn, TypeVar, Union

import msgspec

from anyhow.result import Err, Ok

__all__ = ['Nothing', 'NothingType', 'Option', 'Some', 'from_optional']

T = TypeVar('T')
U = TypeVar('U')
E = TypeVar('E')


class Some(msgspec.Struct, Generic[T], frozen=True, gc=False):
    """Some variant of Option containing a value of type T.

    Examples:
        >>> Some(42).unwrap()
        42
        >>> Some(42).map(lambda x: x * 2)
        Some(value=84)
    """

    value: T

    def is_some(self) -> bool:
        """Return True since this is Some."""
        return True

    def is_none(self) -> bool:
        """Return False since this is Some."""
        return False

    def get(self) -> T:
        """Return the contained value."""
        return self.value

    def unwrap(self) -> T:
        """Return the contained Some value.

        Since this is Some, this always succeeds.
        """
        return self.value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        """Return the contained Some value, ignoring the default."""
        return self.value

    def unwrap_or_else(self, f: Callable[[], T]) -> T:  # noqa: ARG002
        """Return the contained Some value, ignoring the fallback function."""
        return self.value

    def map(self, f: Callable[[T], U]) -> Some[U]:
        """Apply a function to the contained value.

        Args:
            f: Function to apply to the Some value.

        Returns:
            Some containing the result of applying f to the value.
        """
        return Some(f(self.value))

    def and_then(self, f: Callable[[T], Some[U] | NothingType]) -> Some[U] | NothingType:
        """Apply a function that returns an Option to the contained value."""
        return f(self.value)

    def filter(self, predicate: Callable[[T], bool]) -> Some[T] | NothingType:
        """Return Some if the predicate is satisfied, else Nothing.

        Args:
            predicate: Function that returns True to keep the value.

        Returns:
            Some(value) if predicate(value) is True, else Nothing.
        """
        if predicate(self.value):
            return self
        return Nothing

    def ok_or(self, _err: Any) -> Ok[T]:
        """Convert to Result, returning Ok(value)."""
        return Ok(self.value)

    def ok_or_else(self, _f: Callable[[], Any]) -> Ok[T]:
        """Convert to Result, returning Ok(value)."""
        return Ok(self.value)


class NothingType(msgspec.Struct, frozen=True, gc=False):
    """Nothing variant of Option representing absence of a value.

    This is a singleton - use the `Nothing` constant instead of
    instantiating directly.

    Examples:
        >>> Nothing.is_none()
        True
        >>> Nothing.unwrap_or(0)
        0
    """

    def is_some(self) -> bool:
        """Return False since this is Nothing."""
        return False

    def is_none(self) -> bool:
        """Return True since this is Nothing."""
        return True

    def get(self) -> None:
        """Return None since this is Nothing."""
        return None

    def unwrap(self) -> NoReturn:
        """Raise an exception since this is Nothing.

        Raises:
            RuntimeError: Always, since Nothing has no value to unwrap.
        """
        raise RuntimeError('Called unwrap on Nothing')

    def unwrap_or(self, default: T) -> T:
        """Return the default value since this is Nothing."""
        return default

    def unwrap_or_else(self, f: Callable[[], T]) -> T:
        """Compute and return a default value since this is Nothing."""
        return f()

    def map(self, _f: Callable[[Any], Any]) -> NothingType:
        """Return Nothing since there is no value to map."""
        return self

    def and_then(self, _f: Callable[[Any], Any]) -> NothingType:
        """Return Nothing since there is no value to chain."""
        return self

    def filter(self, _predicate: Callable[[Any], bool]) -> NothingType:
        """Return Nothing."""
        return self

    def ok_or(self, err: E) -> Err[E]:
        """Convert to Result, returning Err(err).

        Args:
            err: Error value to use.

        Returns:
            Err containing the error.
        """
        return Err(err)

    def ok_or_else(self, f: Callable[[], E]) -> Err[E]:
        """Convert to Result, returning Err(f())."""
        return Err(f())

    def __repr__(self) -> str:
        return 'Nothing'


Nothing = NothingType()
"""The singleton absent value."""

Option = Union[Some[T], NothingType]
"""Either Some[T] or Nothing."""


def from_optional(value: T | None) -> Some[T] | NothingType:
    """Lift a nullable value into an Option.

    Examples:
        >>> from_optional(3)
        Some(value=3)
        >>> from_optional(None)
        Nothing
    """
    if value is None:
        return Nothing
    return Some(value)
