"""Runtime check for values of unknown type: is_result."""

from __future__ import annotations

from typing import Any, TypeIs

from okerr.result import Result

__all__ = ['is_result']

# map_to_value, if_ok, if_err and error_result are not required.
_RESULT_METHODS = (
    'unwrap_or_null',
    'unwrap_or',
    'unwrap',
    'map_ok',
    'map_err',
    'map_ok_and_err',
    'on_ok',
    'on_err',
)


def is_result(value: object) -> TypeIs[Result[Any, Any]]:
    """Return True if value behaves like a Result.

    The check is structural: a boolean ``ok`` attribute, an ``error``
    attribute, and a callable for every shared Result method. Objects that
    only carry the flags, like ``{'ok': True, 'value': 1}``, are rejected.

    Args:
        value: Any value.

    Returns:
        True for Ok and Err instances and compatible objects.

    Example:
        ```python
        is_result(ok(1))
        # True
        is_result({'ok': True, 'value': 1})
        # False
        ```
    """
    if value is None or isinstance(value, type):
        return False
    if not isinstance(getattr(value, 'ok', None), bool):
        return False
    if not hasattr(value, 'error'):
        return False
    return all(callable(getattr(value, name, None)) for name in _RESULT_METHODS)
