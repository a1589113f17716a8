"""Result type: Ok[T] | Err[E] for explicit error handling."""

from __future__ import annotations

from typing import Literal

import msgspec

__all__ = ['Err', 'Ok', 'Result', 'failure', 'success']


class Ok[T](msgspec.Struct, frozen=True):
    """Success variant of Result containing a value of type T.

    Ok represents the successful outcome of an operation. Its ``ok`` tag is
    always True and it carries exactly one payload field, ``value``.

    Examples:
        >>> ok = Ok(42)
        >>> ok.ok
        True
        >>> ok.value
        42
    """

    value: T

    @property
    def ok(self) -> Literal[True]:
        """Variant tag, always True for Ok."""
        return True


class Err[E](msgspec.Struct, frozen=True):
    """Error variant of Result containing an error of type E.

    Err represents the failure outcome of an operation. Its ``ok`` tag is
    always False and it carries exactly one payload field, ``error``.

    Examples:
        >>> err = Err(ValueError('boom'))
        >>> err.ok
        False
        >>> err.error
        ValueError('boom')
    """

    error: E

    @property
    def ok(self) -> Literal[False]:
        """Variant tag, always False for Err."""
        return False


type Result[T, E = Exception] = Ok[T] | Err[E]


def success[T](value: T) -> Ok[T]:
    """Wrap a value in the success variant.

    Examples:
        >>> success('hello')
        Ok(value='hello')
    """
    return Ok(value)


def failure[E](error: E) -> Err[E]:
    """Wrap an error in the failure variant.

    Examples:
        >>> failure('nope')
        Err(error='nope')
    """
    return Err(error)
