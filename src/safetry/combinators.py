"""Combinators for inspecting, transforming and combining Results.

Every function here is pure except tap_error, which runs a caller-supplied
side effect. Exceptions raised by caller-supplied callables are never caught.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, TypeIs

from safetry._logging import get_logger
from safetry.errors import normalize_error
from safetry.result import Err, Ok, Result, failure, success

__all__ = [
    'combine',
    'is_error',
    'is_ok',
    'log_error',
    'map_error',
    'map_value',
    'tap_error',
    'unwrap',
]

_LOG_LEVELS = ('debug', 'info', 'warning', 'error', 'critical')


def unwrap[T](result: Result[T, Exception]) -> T:
    """Return the Ok value or raise the contained error.

    The error is raised as-is, so ``except`` clauses see the very object the
    Err held. A payload that is not an exception is raised through
    normalize_error.

    Raises:
        Exception: The error held by an Err.

    Examples:
        >>> unwrap(Ok(42))
        42
    """
    if isinstance(result, Ok):
        return result.value
    error = result.error
    if isinstance(error, BaseException):
        raise error
    raise normalize_error(error)


def tap_error[T](result: Result[T, Exception], handler: Callable[[Exception], object]) -> Result[T, Exception]:
    """Call ``handler(error)`` once for an Err, then return ``result`` itself.

    The handler's return value is ignored. Ok results skip the handler.
    """
    if isinstance(result, Err):
        handler(result.error)
    return result


def map_value[T, U](result: Result[T, Exception], f: Callable[[T], U]) -> Result[U, Exception]:
    """Apply ``f`` to the Ok value.

    Args:
        result: The Result to transform.
        f: Function applied to the value. Never called for Err.

    Returns:
        Ok(f(value)), or a new Err holding the same error object.

    Examples:
        >>> map_value(Ok(2), lambda x: x * 10)
        Ok(value=20)
    """
    if isinstance(result, Ok):
        return success(f(result.value))
    return failure(result.error)


def map_error[T](result: Result[T, Exception], f: Callable[[Exception], Exception]) -> Result[T, Exception]:
    """Apply ``f`` to the Err error.

    Args:
        result: The Result to transform.
        f: Function applied to the error. Never called for Ok.

    Returns:
        Err(f(error)), or ``result`` itself when it is Ok.
    """
    if isinstance(result, Err):
        return failure(f(result.error))
    return result


def is_ok[T, E](result: Result[T, E]) -> TypeIs[Ok[T]]:
    """Return True if ``result`` is Ok, narrowing its type for the checker."""
    return isinstance(result, Ok)


def is_error[T, E](result: Result[T, E]) -> TypeIs[Err[E]]:
    """Return True if ``result`` is Err, narrowing its type for the checker."""
    return isinstance(result, Err)


def combine(results: Iterable[Result[Any, Exception]]) -> Result[list[Any], Exception]:
    """Combine Results positionally into a Result of a list.

    Walks ``results`` left to right and returns the first Err without
    consuming any later element. When every element is Ok, the values are
    collected in input order.

    Args:
        results: Any iterable of Results, including a lazy generator.

    Returns:
        Ok(list of values) if all results are Ok, otherwise the first Err.

    Examples:
        >>> combine([Ok(1), Ok('a')])
        Ok(value=[1, 'a'])
        >>> combine([])
        Ok(value=[])
    """
    values: list[Any] = []
    for result in results:
        if isinstance(result, Err):
            return result
        values.append(result.value)
    return success(values)


def log_error(
    logger: Any = None,
    *,
    event: str = 'result.error',
    level: str = 'warning',
) -> Callable[[Exception], None]:
    """Build a tap_error handler that logs the error through structlog.

    Args:
        logger: A structlog logger. Resolved lazily from this module when None.
        event: Event name for the log entry.
        level: Logger method to call ("debug", "info", "warning", "error").

    Returns:
        A handler suitable for tap_error.

    Raises:
        ValueError: If ``level`` is not one of the supported levels.

    Example:
        ```python
        result = tap_error(await safe_run(load_config), log_error(event='config.load_failed'))
        ```
    """
    if level not in _LOG_LEVELS:
        msg = f'Unknown log level {level!r}; expected one of {", ".join(_LOG_LEVELS)}'
        raise ValueError(msg)

    def handler(error: Exception) -> None:
        log = logger if logger is not None else get_logger(__name__)
        getattr(log, level)(
            event,
            error_type=type(error).__name__,
            error=str(error),
            exc_info=error,
        )

    return handler
