"""Short-circuit signal used by anyhow scopes.

Raised by ``AnyhowScope.raise_`` and friends and caught only by the scope
that raised it. It derives from BaseException so that ``except Exception``
blocks in user code do not swallow an early exit.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from anyhow.errors import AnyhowError
    from anyhow.scope import AnyhowScope

__all__ = ['ShortCircuit']


class ShortCircuit(BaseException):  # noqa: N818
    """Carries an error out of an anyhow block to its owning scope."""

    __slots__ = ('_error', '_scope')

    def __init__(self, scope: AnyhowScope, error: AnyhowError) -> None:
        self._scope = scope
        self._error = error
        super().__init__(f'ShortCircuit({error!r})')

    @property
    def scope(self) -> AnyhowScope:
        """The scope that raised this signal."""
        return self._scope

    @property
    def error(self) -> AnyhowError:
        """The error the scope exits with."""
        return self._error
