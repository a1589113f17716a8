"""@safe and @safe_async decorators built on safe_run_sync and safe_run."""

from __future__ import annotations

import functools
from collections.abc import Awaitable, Callable
from typing import Any, overload

import wrapt

from safetry.result import Result
from safetry.run import SafeRunConfig, safe_run, safe_run_sync

__all__ = ['safe', 'safe_async']


def _build_config(
    capture_stack: bool,
    error_transform: Callable[[BaseException], Exception | None] | None,
    exceptions: tuple[type[BaseException], ...] | None,
) -> SafeRunConfig:
    return SafeRunConfig(
        capture_stack=capture_stack,
        error_transform=error_transform,
        exceptions=exceptions if exceptions is not None else (Exception,),
    )


@overload
def safe[**P, T](
    func: Callable[P, T],
) -> Callable[P, Result[T, Exception]]: ...


@overload
def safe[**P, T](
    func: None = None,
    *,
    capture_stack: bool = False,
    error_transform: Callable[[BaseException], Exception | None] | None = None,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Callable[[Callable[P, T]], Callable[P, Result[T, Exception]]]: ...


def safe(
    func: Callable[..., Any] | None = None,
    *,
    capture_stack: bool = False,
    error_transform: Callable[[BaseException], Exception | None] | None = None,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Any:
    """Decorator that returns a Result instead of raising.

    Every call goes through safe_run_sync, so normalization, error_transform
    and capture_stack behave exactly as they do there.

    Can be used with or without arguments:
        @safe
        def risky(): ...

        @safe(exceptions=(ValueError, TypeError), capture_stack=True)
        def specific(): ...

    Args:
        func: The function to wrap (when used without parentheses).
        capture_stack: See SafeRunConfig.capture_stack.
        error_transform: See SafeRunConfig.error_transform.
        exceptions: Exception types to capture. Defaults to (Exception,).

    Returns:
        A wrapped function that returns Result[T, Exception] instead of T.

    Example:
        ```python
        @safe
        def divide(a: int, b: int) -> float:
            return a / b

        divide(10, 2)
        # Ok(value=5.0)
        divide(10, 0)
        # Err(error=ZeroDivisionError('division by zero'))
        ```
    """
    config = _build_config(capture_stack, error_transform, exceptions)

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[..., Any],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Result[Any, Exception]:
        return safe_run_sync(functools.partial(wrapped, *args, **kwargs), config)

    if func is not None:
        return wrapper(func)
    return wrapper


@overload
def safe_async[**P, T](
    func: Callable[P, Awaitable[T]],
) -> Callable[P, Awaitable[Result[T, Exception]]]: ...


@overload
def safe_async[**P, T](
    func: None = None,
    *,
    capture_stack: bool = False,
    error_transform: Callable[[BaseException], Exception | None] | None = None,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Callable[[Callable[P, Awaitable[T]]], Callable[P, Awaitable[Result[T, Exception]]]]: ...


def safe_async(
    func: Callable[..., Awaitable[Any]] | None = None,
    *,
    capture_stack: bool = False,
    error_transform: Callable[[BaseException], Exception | None] | None = None,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Any:
    """Async decorator that returns a Result instead of raising.

    Every call goes through safe_run.

    Can be used with or without arguments:
        @safe_async
        async def risky(): ...

        @safe_async(error_transform=lambda e: LookupError(str(e)))
        async def specific(): ...

    Args:
        func: The async function to wrap (when used without parentheses).
        capture_stack: See SafeRunConfig.capture_stack.
        error_transform: See SafeRunConfig.error_transform.
        exceptions: Exception types to capture. Defaults to (Exception,).

    Returns:
        A wrapped async function that returns Result[T, Exception] instead of T.
    """
    config = _build_config(capture_stack, error_transform, exceptions)

    @wrapt.decorator
    async def wrapper(
        wrapped: Callable[..., Awaitable[Any]],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Result[Any, Exception]:
        return await safe_run(functools.partial(wrapped, *args, **kwargs), config)

    if func is not None:
        return wrapper(func)
    return wrapper
