"""Error normalization: turn any raised value into an Exception."""

from __future__ import annotations

__all__ = ['OperationError', 'normalize_error']


class OperationError(Exception):
    """Generic error kind for raised values that are not already an Exception.

    Attributes:
        message: Human-readable message.
        raw: The original value the error was built from.
    """

    def __init__(self, message: str, raw: object = None) -> None:
        self.message = message
        self.raw = raw
        super().__init__(message)


def normalize_error(raw: object) -> Exception:
    """Convert a raw raised value into an Exception.

    The chain is deliberately shallow:

    1. An ``Exception`` is returned unchanged (same identity).
    2. A ``str`` becomes ``OperationError`` with that text as message.
    3. Anything else becomes ``OperationError(str(raw))``. This is a
       low-fidelity fallback: plain objects render as their default
       ``<object at 0x...>`` form and no structure is recovered from them.

    Args:
        raw: The value that was raised or rejected.

    Returns:
        An Exception suitable for an Err payload.

    Examples:
        >>> exc = ValueError('bad')
        >>> normalize_error(exc) is exc
        True
        >>> normalize_error('bad').message
        'bad'
        >>> normalize_error(42).message
        '42'
    """
    if isinstance(raw, Exception):
        return raw
    if isinstance(raw, str):
        return OperationError(raw, raw)
    return OperationError(str(raw), raw)
