"""Exception types raised by okerr itself.

Domain errors never appear here: they travel inside ``Err`` values. These are
the coercion errors produced when an arbitrary payload has to become an
exception, and the programming errors raised on misuse of the library.
"""

from __future__ import annotations

from typing import Any

__all__ = [
    'InvariantError',
    'NormalizedError',
    'OkErrError',
    'PhantomTypeError',
]


class OkErrError(Exception):
    """Base class for every exception raised by okerr."""


class NormalizedError(OkErrError):
    """A non-exception error payload coerced into an exception.

    Produced by ``unknown_to_error`` and by ``Err.unwrap()`` when the error
    payload is a mapping, a sequence, ``True`` or any other non-exception
    value. The original payload is kept on ``cause``; Python reserves
    ``__cause__`` for exceptions, so it cannot be stored there.

    Attributes:
        message: Human-readable message extracted or rendered from the payload.
        cause: The original payload, or None when the payload was a plain string.

    Example:
        ```python
        error = NormalizedError('quota exceeded', cause={'id': 'quota'})
        str(error)
        # 'quota exceeded'
        error.cause
        # {'id': 'quota'}
        ```
    """

    def __init__(self, message: str, cause: Any = None) -> None:
        self.message = message
        self.cause = cause
        super().__init__(message)

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self.message, self.cause))

    def __repr__(self) -> str:
        return f'NormalizedError({self.message!r})'


class PhantomTypeError(OkErrError, TypeError):
    """Raised when the phantom ``TypedResult._type`` attribute is evaluated."""


class InvariantError(OkErrError, AssertionError):
    """Raised by ``invariant`` when its condition does not hold."""
