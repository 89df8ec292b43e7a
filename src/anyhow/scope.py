"""Short-circuit scopes: imperative-looking code that returns a Result.

``anyhow(block)`` calls ``block`` with a fresh AnyhowScope. Inside the block,
``scope.bind`` unwraps Ok values and exits the block at the first Err, so
the code reads as straight-line logic while still producing a Result.

Example:
    ```python
    from anyhow import Ok, Err, anyhow

    def load(scope):
        port = scope.bind(parse_port(raw))
        scope.ensure(port > 1024, lambda: f'privileged port {port}')
        return port

    anyhow(load)
    # Ok(value=8080) or Err(error=AnyhowError(...))
    ```
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from typing import Any, NoReturn, TypeVar, overload

from anyhow._config import get_config
from anyhow._logging import get_logger
from anyhow.errors import AnyhowError, ScopeLeakedError
from anyhow.option import NothingType, Some
from anyhow.propagate import ShortCircuit
from anyhow.result import Err, Ok

__all__ = ['AnyhowScope', 'anyhow', 'err', 'ok']

T = TypeVar('T')
K = TypeVar('K')

_log = get_logger('anyhow.scope')

# Never converted into errors, whatever get_config().catch says.
_PASSTHROUGH = (KeyboardInterrupt, SystemExit, GeneratorExit)


class AnyhowScope:
    """Binding context handed to an anyhow block.

    A scope is valid only while its block runs. Every exit method raises a
    signal that the owning ``anyhow()`` call turns into an Err.
    """

    __slots__ = ('_active',)

    def __init__(self) -> None:
        self._active = True

    @property
    def active(self) -> bool:
        return self._active

    def _close(self) -> None:
        self._active = False

    def raise_(self, error: object) -> NoReturn:
        """Exit the block with error, canonicalised to an AnyhowError.

        Raises:
            ScopeLeakedError: If the block that owns this scope has returned.
        """
        if not self._active:
            msg = 'anyhow scope used after its block returned'
            raise ScopeLeakedError(msg)
        raise ShortCircuit(self, AnyhowError.of(error))

    def bail(self, error: str | BaseException) -> NoReturn:
        """Exit the block with a message or an exception."""
        self.raise_(error)

    @overload
    def bind(self, value: Ok[T] | Err[Any]) -> T: ...

    @overload
    def bind(self, value: Some[T] | NothingType, error: Callable[[], object] | None = None) -> T: ...

    @overload
    def bind(self, value: T | None, error: Callable[[], object] | None = None) -> T: ...

    def bind(self, value: Any, error: Callable[[], object] | None = None) -> Any:
        """Unwrap a value or exit the block.

        Args:
            value: An Ok/Err, a Some/Nothing, or a plain possibly-None value.
            error: Produces the error for None or Nothing. Defaults to
                "null value" for None and "no value" for Nothing.

        Returns:
            The unwrapped value.
        """
        if isinstance(value, Ok):
            return value.value
        if isinstance(value, Err):
            self.raise_(value.error)
        if isinstance(value, Some):
            return value.value
        if isinstance(value, NothingType):
            self.raise_(error() if error is not None else 'no value')
        if value is None:
            self.raise_(error() if error is not None else 'null value')
        return value

    @overload
    def bind_all(self, results: Mapping[K, Ok[T] | Err[Any]]) -> dict[K, T]: ...

    @overload
    def bind_all(self, results: Iterable[Ok[T] | Err[Any]]) -> list[T]: ...

    def bind_all(self, results: Any) -> Any:
        """Bind every result, exiting at the first Err in iteration order.

        A mapping binds its values and keeps the keys; anything else is
        iterated lazily, so elements after the failing one are never
        produced.
        """
        if isinstance(results, Mapping):
            return {key: self.bind(value) for key, value in results.items()}
        return [self.bind(result) for result in results]

    def ensure(self, condition: bool, error: Callable[[], object]) -> None:
        """Exit the block with error() unless condition holds."""
        if not condition:
            self.raise_(error())

    def ensure_not_none(self, value: T | None, error: Callable[[], object]) -> T:
        """Return value, or exit the block with error() if it is None."""
        if value is None:
            self.raise_(error())
        return value

    def with_context(self, message: str, block: Callable[[AnyhowScope], T]) -> T:
        """Run block in a nested scope, adding message to any error it exits with.

        Args:
            message: Context describing what block was doing.
            block: Called with the nested scope.

        Returns:
            The value block returned.
        """
        result = anyhow(block)
        if isinstance(result, Err):
            self.raise_(result.error.context(message))
        return result.value

    def catching(self, block: Callable[[], T]) -> T:
        """Call block, exiting the block with any configured fault it raises."""
        try:
            return block()
        except (ShortCircuit, ScopeLeakedError, *_PASSTHROUGH):
            raise
        except get_config().catch as e:
            self.raise_(e)

    def anyhow(self, block: Callable[[AnyhowScope], T]) -> Ok[T] | Err[AnyhowError]:
        """Evaluate block in an independent nested scope."""
        return anyhow(block)


def anyhow(block: Callable[[AnyhowScope], T]) -> Ok[T] | Err[AnyhowError]:
    """Evaluate block in a fresh scope and return its outcome as a Result.

    Args:
        block: Called with the new AnyhowScope.

    Returns:
        Ok of the value block returned, or Err when the scope exited early
        or block raised one of ``get_config().catch``.
    """
    scope = AnyhowScope()
    try:
        return Ok(block(scope))
    except ShortCircuit as signal:
        if signal.scope is not scope:
            raise
        _log.debug('scope.short_circuit', error=str(signal.error))
        return Err(signal.error)
    except (ScopeLeakedError, *_PASSTHROUGH):
        raise
    except get_config().catch as e:
        _log.debug('scope.fault_captured', exc_type=type(e).__name__, error=str(e))
        return Err(AnyhowError.of(e))
    finally:
        scope._close()


def ok(value: T) -> Ok[T]:
    """Build a successful AnyhowResult."""
    return Ok(value)


def err(error: object) -> Err[AnyhowError]:
    """Build a failed AnyhowResult from any error value."""
    return Err(AnyhowError.of(error))
