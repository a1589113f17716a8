"""fallback and fallback_async: collapse a Result into a plain value."""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable

from safetry.result import Ok, Result

__all__ = ['fallback', 'fallback_async']


def fallback[T](result: Result[T, Exception], default: T | Callable[[Exception], T]) -> T:
    """Return the Ok value, or a default for Err.

    A callable ``default`` is invoked with the error and its return value is
    used. Anything else is returned as-is. Note that classes are callable
    too, so ``fallback(result, list)`` calls ``list(error)``.

    Examples:
        >>> fallback(Ok(1), 0)
        1
        >>> fallback(Err(ValueError('boom')), lambda e: f'handled: {e}')
        'handled: boom'
    """
    if isinstance(result, Ok):
        return result.value
    if callable(default):
        return default(result.error)
    return default


async def fallback_async[T](
    pending: Awaitable[Result[T, Exception]],
    default: T | Callable[[Exception], T | Awaitable[T]],
) -> T:
    """Await a Result, then behave like fallback.

    When ``default`` is callable and returns an awaitable, that awaitable is
    awaited too, so both sync and async recovery functions work.

    Example:
        ```python
        async def from_cache(error: Exception) -> str:
            return await cache.get('user')

        name = await fallback_async(safe_run(fetch_name), from_cache)
        ```
    """
    result = await pending
    if isinstance(result, Ok):
        return result.value
    if not callable(default):
        return default
    value = default(result.error)
    if inspect.isawaitable(value):
        return await value
    return value
