"""Library configuration: AnyhowConfig and initialization."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from anyhow._logging import configure_logging

__all__ = [
    'AnyhowConfig',
    'get_config',
    'init',
    'reset_config',
]


@dataclass(frozen=True)
class AnyhowConfig:
    """Configuration for anyhow.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
        json_output: Emit JSON logs when True, console logs otherwise.
        catch: Exception types that ``anyhow()`` and ``catching()`` convert
            into errors. Anything else propagates out of the block, as do
            KeyboardInterrupt, SystemExit and GeneratorExit whatever is listed.
    """

    log_level: str | None = None
    json_output: bool = True
    catch: tuple[type[BaseException], ...] = (Exception,)


# Global configuration (set by init())
_config: AnyhowConfig | None = None


def _detect_log_level() -> str | None:
    level = os.environ.get('ANYHOW_LOG_LEVEL', '').strip()
    return level.upper() or None


def _detect_json_output() -> bool:
    """Detect the log format from ANYHOW_LOG_FORMAT ("json" or "console")."""
    log_format = os.environ.get('ANYHOW_LOG_FORMAT', '').lower()
    if log_format == 'console':
        return False
    if log_format and log_format != 'json':
        logging.warning("Unknown ANYHOW_LOG_FORMAT value '%s', defaulting to json", log_format)
    return True


def _from_env() -> AnyhowConfig:
    return AnyhowConfig(log_level=_detect_log_level(), json_output=_detect_json_output())


def init(
    log_level: str | None = None,
    json_output: bool | None = None,
    catch: tuple[type[BaseException], ...] | None = None,
) -> AnyhowConfig:
    """Initialize anyhow with the specified configuration.

    Explicit arguments win over the environment.

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). Read from
            ANYHOW_LOG_LEVEL if None; silent if neither is set.
        json_output: Log format. Read from ANYHOW_LOG_FORMAT if None.
        catch: Exception types converted at anyhow() boundaries.

    Returns:
        The AnyhowConfig that was set.

    Example:
        ```python
        import anyhow

        anyhow.init(log_level='DEBUG', json_output=False)
        ```
    """
    global _config  # noqa: PLW0603

    resolved = _from_env()
    _config = AnyhowConfig(
        log_level=log_level if log_level is not None else resolved.log_level,
        json_output=json_output if json_output is not None else resolved.json_output,
        catch=tuple(catch) if catch is not None else resolved.catch,
    )

    if _config.log_level is not None:
        configure_logging(_config.log_level, json_output=_config.json_output)

    return _config


def get_config() -> AnyhowConfig:
    """Get the current configuration.

    Without a prior init() the configuration is read from the environment
    but logging is left untouched; only init() installs handlers.

    Example:
        ```python
        from anyhow import init, get_config

        init(catch=(ValueError,))
        get_config().catch  # (ValueError,)
        ```
    """
    global _config  # noqa: PLW0603
    if _config is None:
        _config = _from_env()
    return _config


def reset_config() -> None:
    """Forget the current configuration so the next get_config() re-reads it."""
    global _config  # noqa: PLW0603
    _config = None
