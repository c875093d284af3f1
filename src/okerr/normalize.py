"""Error normalization: turn any caught or stored error payload into an exception."""

from __future__ import annotations

from typing import overload

from okerr._internal.guards import is_plain_object
from okerr._internal.stringify import safe_stringify
from okerr._logging import get_logger
from okerr.config import get_settings
from okerr.errors import NormalizedError

__all__ = ['unknown_to_error']

_logger = get_logger(__name__)


@overload
def unknown_to_error[X: BaseException](error: X) -> X: ...


@overload
def unknown_to_error(error: object) -> NormalizedError: ...


def unknown_to_error(error: object) -> BaseException:
    """Convert an arbitrary error payload into an exception.

    Never raises. Exceptions are returned unchanged (same instance, traceback
    intact); every other payload becomes a ``NormalizedError`` that keeps the
    original value on ``cause``.

    The conversion handles:
    - exceptions: returned as is
    - strings: used as the message
    - mappings: the ``message`` key if it holds a non-empty string, else the
      JSON rendering of the mapping
    - anything else: the JSON rendering of the value

    When JSON rendering fails the configured ``unknown_message`` ('unknown' by
    default) is used.

    Args:
        error: The payload to convert.

    Returns:
        An exception instance.

    Example:
        ```python
        unknown_to_error('boom')
        # NormalizedError('boom')
        unknown_to_error({'message': 'm', 'x': 1}).cause
        # {'message': 'm', 'x': 1}
        unknown_to_error(42).message
        # '42'
        ```
    """
    if isinstance(error, BaseException):
        return error

    if isinstance(error, str):
        return NormalizedError(error)

    _logger.debug('error.normalized', payload_type=type(error).__name__)

    if is_plain_object(error):
        message = error.get('message')
        if isinstance(message, str) and message:
            return NormalizedError(message, cause=error)

    rendered = safe_stringify(error)
    if rendered is None:
        rendered = get_settings().unknown_message
    return NormalizedError(rendered, cause=error)
