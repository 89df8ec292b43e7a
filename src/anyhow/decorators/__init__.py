"""Decorators: @safe, @scoped and @do."""

from anyhow.decorators.do import do
from anyhow.decorators.safe import safe
from anyhow.decorators.scoped import scoped

__all__ = [
    'do',
    'safe',
    'scoped',
]
