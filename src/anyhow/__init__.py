"""anyhow: Result values, context-carrying errors and short-circuit scopes.

Flat imports (preferred):
    from anyhow import Ok, Err, Result, AnyhowError, anyhow
    from anyhow import safe, scoped, do

Submodule imports (for organization):
    from anyhow.result import Ok, Err, Result
    from anyhow.iterables import combine, partition
    from anyhow.scope import AnyhowScope, anyhow
"""

from anyhow import iterables

# Configuration and logging
from anyhow._config import AnyhowConfig, get_config, init, reset_config
from anyhow._logging import (
    add_log_hook,
    clear_log_hooks,
    configure_logging,
    get_logger,
    remove_log_hook,
)

# Decorators
from anyhow.decorators import do, safe, scoped

# Errors
from anyhow.errors import (
    AnyhowError,
    AnyhowException,
    AnyhowResult,
    ErrorReport,
    ScopeLeakedError,
)

# Platform bridge
from anyhow.interop import anyhow_call, from_future, to_anyhow, to_future

# Bulk operations
from anyhow.iterables import (
    combine,
    errors_of,
    partition,
    values_of,
)
from anyhow.option import Nothing, NothingType, Option, Some, from_optional
from anyhow.result import Err, Ok, Result, run_catching, to_result_or

# Scopes
from anyhow.scope import AnyhowScope, anyhow, err, ok

# Zip
from anyhow.zip import zip_or_accumulate, zip_results

__all__ = [
    'AnyhowConfig',
    'AnyhowError',
    'AnyhowException',
    'AnyhowResult',
    'AnyhowScope',
    'Err',
    'ErrorReport',
    'Nothing',
    'NothingType',
    'Ok',
    'Option',
    'Result',
    'ScopeLeakedError',
    'Some',
    'add_log_hook',
    'anyhow',
    'anyhow_call',
    'clear_log_hooks',
    'combine',
    'configure_logging',
    'do',
    'err',
    'errors_of',
    'from_future',
    'from_optional',
    'get_config',
    'get_logger',
    'init',
    'iterables',
    'ok',
    'partition',
    'remove_log_hook',
    'reset_config',
    'run_catching',
    'safe',
    'scoped',
    'to_anyhow',
    'to_future',
    'to_result_or',
    'values_of',
    'zip_or_accumulate',
    'zip_results',
]

__version__ = '0.1.0'
