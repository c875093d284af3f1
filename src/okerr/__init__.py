"""okerr: typed Ok/Err results for Python 3.13+.

Expected failures are returned as values instead of raised, and code that
still raises (sync or async) is adapted with ``resultify`` and ``safe_fn``.

Flat imports (preferred):
    from okerr import Result, Ok, Err, ok, err, err_id
    from okerr import resultify, safe_fn, unknown_to_error, is_result
    from okerr import Results, get_ok_err

Submodule imports (for organization):
    from okerr.result import Ok, Err, Result
    from okerr.adapters import resultify, safe_fn
    from okerr.async_ import async_map, async_unwrap
"""

# Adapters
from okerr.adapters import ErrorNormalizer, resultify, safe_fn

# Assertions
from okerr.assertions import invariant

# Async
from okerr.async_ import AsyncMapper, async_map, async_unwrap

# Configuration and logging
from okerr._logging import (
    add_log_hook,
    clear_log_hooks,
    configure_logging,
    get_logger,
    remove_log_hook,
    reset_logging,
)
from okerr.config import Settings, configure, get_settings

# Errors
from okerr.errors import InvariantError, NormalizedError, OkErrError, PhantomTypeError

# Guards
from okerr.guards import is_result

# Namespace
from okerr.namespace import Results

# Normalization
from okerr.normalize import unknown_to_error

# Result types
from okerr.result import Err, ErrorPayload, Ok, Result, err, err_id, ok

# Typed constructors
from okerr.typed import TypedResult, get_ok_err

__all__ = [
    # Async
    'AsyncMapper',
    # Result types
    'Err',
    # Adapters
    'ErrorNormalizer',
    'ErrorPayload',
    # Errors
    'InvariantError',
    'NormalizedError',
    'Ok',
    'OkErrError',
    'PhantomTypeError',
    'Result',
    # Namespace
    'Results',
    # Configuration
    'Settings',
    # Typed constructors
    'TypedResult',
    # Logging
    'add_log_hook',
    'async_map',
    'async_unwrap',
    'clear_log_hooks',
    'configure',
    'configure_logging',
    'err',
    'err_id',
    'get_logger',
    'get_ok_err',
    'get_settings',
    # Assertions
    'invariant',
    # Guards
    'is_result',
    'ok',
    'remove_log_hook',
    'reset_logging',
    'resultify',
    'safe_fn',
    # Normalization
    'unknown_to_error',
]
