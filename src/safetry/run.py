"""safe_run and safe_run_sync: execute an operation and return its outcome as a Result.

Example:
    ```python
    async def fetch_user(user_id: int) -> dict:
        ...

    result = await safe_run(lambda: fetch_user(1))
    match result:
        case Ok(user):
            print(user['name'])
        case Err(error):
            print(f'lookup failed: {error}')
    ```
"""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from types import TracebackType
from typing import Any, overload

from safetry._logging import get_logger, is_logging_configured
from safetry.errors import normalize_error
from safetry.result import Err, Result, failure, success

__all__ = ['SafeRunConfig', 'safe_run', 'safe_run_sync']


@dataclass(frozen=True)
class SafeRunConfig:
    """Per-call options for safe_run and safe_run_sync.

    Attributes:
        capture_stack: Attach a traceback built at the catch site when the
            final error has none.
        error_transform: Called with the raw exception. It must return an
            Exception or None. An Exception is used as the error without
            normalization; None falls back to normalization. Exceptions it
            raises are not caught.
        exceptions: Exception types converted into Err. Anything else
            propagates, so cancellation and interpreter exits pass through.
    """

    capture_stack: bool = False
    error_transform: Callable[[BaseException], Exception | None] | None = None
    exceptions: tuple[type[BaseException], ...] = (Exception,)


_DEFAULT_CONFIG = SafeRunConfig()


def _current_traceback(skip: int = 0) -> TracebackType | None:
    """Build a traceback for the live call stack.

    Args:
        skip: Number of frames above this helper to leave out.

    Returns:
        Traceback chain from the outermost frame down to the innermost kept one.
    """
    frame = inspect.currentframe()
    for _ in range(skip + 1):
        if frame is None:
            return None
        frame = frame.f_back

    tb: TracebackType | None = None
    while frame is not None:
        tb = TracebackType(tb, frame, frame.f_lasti, frame.f_lineno or frame.f_code.co_firstlineno)
        frame = frame.f_back
    return tb


def _to_failure(raw: BaseException, config: SafeRunConfig) -> Err[Exception]:
    error = config.error_transform(raw) if config.error_transform is not None else None
    if error is None:
        error = normalize_error(raw)

    if config.capture_stack and error.__traceback__ is None:
        # Innermost kept frame is safe_run / safe_run_sync.
        error = error.with_traceback(_current_traceback(skip=1))

    if is_logging_configured():
        get_logger(__name__).debug(
            'safe_run.failed',
            error_type=type(error).__name__,
            raw_type=type(raw).__name__,
        )
    return failure(error)


@overload
async def safe_run[T](
    operation: Callable[[], Awaitable[T]],
    config: SafeRunConfig | None = None,
) -> Result[T, Exception]: ...


@overload
async def safe_run[T](
    operation: Callable[[], T],
    config: SafeRunConfig | None = None,
) -> Result[T, Exception]: ...


@overload
async def safe_run[T](
    operation: Awaitable[T],
    config: SafeRunConfig | None = None,
) -> Result[T, Exception]: ...


async def safe_run(operation: Any, config: SafeRunConfig | None = None) -> Result[Any, Exception]:
    """Run an operation once and capture its outcome as a Result.

    ``operation`` may be a zero-argument callable returning a plain value, a
    zero-argument callable returning an awaitable, or an awaitable that is
    already in flight (coroutine object, Future, Task). Callables are invoked
    exactly once; an awaitable result is awaited. No retries are made.

    Args:
        operation: The work to run.
        config: Options controlling error capture. Defaults to SafeRunConfig().

    Returns:
        Ok(value) on success, Err(error) when an exception in
        ``config.exceptions`` was raised.

    Raises:
        TypeError: If ``operation`` is neither callable nor awaitable.

    Example:
        ```python
        await safe_run(lambda: 'hello'.upper())
        # Ok(value='HELLO')

        await safe_run(asyncio.sleep(0, result=42))
        # Ok(value=42)

        await safe_run(lambda: int('x'))
        # Err(error=ValueError("invalid literal for int() with base 10: 'x'"))
        ```
    """
    if config is None:
        config = _DEFAULT_CONFIG

    is_callable = callable(operation)
    if not is_callable and not inspect.isawaitable(operation):
        msg = f'safe_run expects a callable or an awaitable, got {type(operation).__name__}'
        raise TypeError(msg)

    try:
        value = operation() if is_callable else operation
        if inspect.isawaitable(value):
            value = await value
    except config.exceptions as exc:
        return _to_failure(exc, config)
    return success(value)


def safe_run_sync[T](func: Callable[[], T], config: SafeRunConfig | None = None) -> Result[T, Exception]:
    """Synchronous counterpart of safe_run for plain callables.

    Args:
        func: Zero-argument callable returning a plain value.
        config: Options controlling error capture. Defaults to SafeRunConfig().

    Returns:
        Ok(value) on success, Err(error) when an exception in
        ``config.exceptions`` was raised.

    Raises:
        TypeError: If ``func`` is not callable or returns an awaitable.
    """
    if config is None:
        config = _DEFAULT_CONFIG

    if not callable(func):
        msg = f'safe_run_sync expects a callable, got {type(func).__name__}'
        raise TypeError(msg)

    try:
        value = func()
    except config.exceptions as exc:
        return _to_failure(exc, config)

    if inspect.isawaitable(value):
        if inspect.iscoroutine(value):
            value.close()
        msg = f'{getattr(func, "__name__", func)!s} returned an awaitable; use safe_run or @safe_async instead'
        raise TypeError(msg)
    return success(value)
