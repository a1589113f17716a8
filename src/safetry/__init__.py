"""safetry: explicit Result values for sync and async error handling.

Flat imports (preferred):
    from safetry import Ok, Err, Result, success, failure
    from safetry import safe_run, fallback, map_value, unwrap

Submodule imports (for organization):
    from safetry.result import Ok, Err
    from safetry.run import SafeRunConfig, safe_run
    from safetry.combinators import combine, map_error
"""

# Logging
from safetry._logging import configure_logging, get_logger

# Combinators
from safetry.combinators import (
    combine,
    is_error,
    is_ok,
    log_error,
    map_error,
    map_value,
    tap_error,
    unwrap,
)

# Decorators
from safetry.decorators import safe, safe_async

# Errors
from safetry.errors import OperationError, normalize_error

# Fallbacks
from safetry.fallback import fallback, fallback_async

# Types
from safetry.result import Err, Ok, Result, failure, success

# Execution
from safetry.run import SafeRunConfig, safe_run, safe_run_sync

__all__ = [
    # Types
    'Err',
    'Ok',
    # Errors
    'OperationError',
    'Result',
    # Execution
    'SafeRunConfig',
    # Combinators
    'combine',
    # Logging
    'configure_logging',
    'failure',
    # Fallbacks
    'fallback',
    'fallback_async',
    'get_logger',
    'is_error',
    'is_ok',
    'log_error',
    'map_error',
    'map_value',
    'normalize_error',
    # Decorators
    'safe',
    'safe_async',
    'safe_run',
    'safe_run_sync',
    'success',
    'tap_error',
    'unwrap',
]
