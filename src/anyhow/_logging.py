"""Structured logging for anyhow.

Library loggers are stdlib-backed structlog loggers filtered by level, so
nothing is emitted until the application calls ``configure_logging`` (or
``anyhow.init`` with a level).
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = [
    'add_log_hook',
    'clear_log_hooks',
    'configure_logging',
    'get_logger',
    'remove_log_hook',
]

_log_hooks: list[Callable[[dict[str, Any]], None]] = []


def _run_hooks(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:  # noqa: ARG001
    for hook in _log_hooks:
        try:
            hook(event_dict.copy())
        except Exception:  # noqa: S110
            pass  # a failing hook must not break logging
    return event_dict


def _event_processors() -> list[Any]:
    import structlog

    return [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
        _run_hooks,
    ]


def configure_logging(level: str = 'INFO', *, json_output: bool = True) -> None:
    """Route anyhow's events (and other stdlib logging) through one stderr handler.

    Replaces the root logger's handlers, so call it from application start-up,
    never from library code.

    Args:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL").
        json_output: If True, emit JSON logs. If False, use console output.
    """
    import structlog

    renderer = (
        structlog.processors.JSONRenderer() if json_output else structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    )
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_event_processors(),
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))


def get_logger(name: str | None = None) -> Any:
    """Get a stdlib-backed structlog logger named ``name`` (default ``'anyhow'``).

    Events below the stdlib logger's level are dropped before any processing,
    whether or not structlog itself was ever configured.
    """
    import structlog

    return structlog.wrap_logger(
        logging.getLogger(name or 'anyhow'),
        processors=[
            structlog.stdlib.filter_by_level,
            *_event_processors(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
    )


def add_log_hook(hook: Callable[[dict[str, Any]], None]) -> None:
    """Register a hook called with a copy of every event dict."""
    _log_hooks.append(hook)


def remove_log_hook(hook: Callable[[dict[str, Any]], None]) -> None:
    if hook in _log_hooks:
        _log_hooks.remove(hook)


def clear_log_hooks() -> None:
    _log_hooks.clear()
