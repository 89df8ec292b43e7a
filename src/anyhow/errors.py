"""Error types: a context-carrying AnyhowError plus its struct report.

AnyhowError wraps one underlying cause and an ordered list of context
messages. Errors are immutable: ``context()`` returns a new instance and
leaves the receiver untouched.

Example:
    ```python
    err = AnyhowError('connection refused').context('loading config').context('starting app')
    print(err)
    # starting app
    # Caused by: loading config
    # Caused by: connection refused
    ```
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TypeVar, Union

import msgspec

from anyhow.result import Err, Ok

__all__ = [
    'AnyhowError',
    'AnyhowException',
    'AnyhowResult',
    'ErrorReport',
    'ScopeLeakedError',
]

T = TypeVar('T')

_SEPARATOR = '\nCaused by: '


class AnyhowException(Exception):
    """Generic message-carrying cause, used when the failure is just text."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ScopeLeakedError(RuntimeError):
    """An anyhow scope was used after its block returned."""


def _to_cause(error: object) -> BaseException:
    if isinstance(error, BaseException):
        return error
    if error is None:
        return AnyhowException('null')
    if isinstance(error, str):
        return AnyhowException(error)
    return AnyhowException(str(error))


def _describe(cause: BaseException) -> str:
    return str(cause) or type(cause).__name__


class AnyhowError(Exception):
    """Structured failure: a root cause plus human-readable context.

    Args:
        error: The underlying failure. Strings, ``None`` and arbitrary
            values are canonicalised into an ``AnyhowException``; an
            existing AnyhowError contributes its cause and context instead
            of being nested.
        context: Context messages, oldest first. A single string counts as
            one message.
    """

    def __init__(self, error: object = None, context: Iterable[str] = ()) -> None:
        if isinstance(context, str):
            context = (context,)
        if isinstance(error, AnyhowError):
            cause = error.cause
            contexts = (*error.contexts, *context)
        else:
            cause = _to_cause(error)
            contexts = tuple(context)
        self._cause = cause
        self._contexts = contexts
        super().__init__(cause, contexts)
        self.__cause__ = cause

    @classmethod
    def of(cls, error: object) -> AnyhowError:
        """Canonicalise any value into an AnyhowError.

        An existing AnyhowError is returned as-is, so calling this
        repeatedly never double-wraps.
        """
        if isinstance(error, AnyhowError):
            return error
        return cls(error)

    @classmethod
    def wrap(cls, error: object) -> Err[AnyhowError]:
        """Canonicalise a value and place it in an Err."""
        return Err(cls.of(error))

    @property
    def cause(self) -> BaseException:
        """The root failure."""
        return self._cause

    @property
    def contexts(self) -> tuple[str, ...]:
        """Context messages, oldest first."""
        return self._contexts

    @property
    def root_message(self) -> str:
        return _describe(self._cause)

    def context(self, message: str) -> AnyhowError:
        """Return a new error with message appended to the context."""
        return AnyhowError(self._cause, (*self._contexts, message))

    def chain(self) -> list[str]:
        """Rendered lines: newest context first, root cause last."""
        return [*reversed(self._contexts), self.root_message]

    def to_struct(self) -> ErrorReport:
        """Convert to struct for serialisation."""
        return ErrorReport(
            message=self.root_message,
            context=list(self._contexts),
            cause_type=type(self._cause).__name__,
        )

    def __str__(self) -> str:
        return _SEPARATOR.join(self.chain())

    def __repr__(self) -> str:
        if self._contexts:
            return f'AnyhowError({self.root_message!r}, context={list(self._contexts)!r})'
        return f'AnyhowError({self.root_message!r})'


class ErrorReport(msgspec.Struct, frozen=True, gc=False):
    """Serialisable snapshot of an AnyhowError - struct variant."""

    message: str
    context: list[str] = msgspec.field(default_factory=list)
    cause_type: str = 'AnyhowException'

    def to_exception(self) -> AnyhowError:
        """Convert to exception for raise-based code.

        The original cause type is not reconstructed; the message is carried
        by an AnyhowException.
        """
        return AnyhowError(AnyhowException(self.message), self.context)


AnyhowResult = Union[Ok[T], Err[AnyhowError]]
"""Result whose error is always an AnyhowError."""
