"""invariant: an assertion that survives ``python -O``."""

from __future__ import annotations

from okerr.errors import InvariantError

__all__ = ['invariant']


def invariant(condition: object, message: str = '') -> None:
    """Raise InvariantError if condition is falsy.

    Unlike the built-in assert, this always executes regardless of __debug__.
    okerr never calls it; it is provided for code and tests that narrow
    Results, e.g. ``invariant(result.ok, 'expected a value')``.

    Args:
        condition: The condition to check.
        message: Optional error message if the check fails.

    Raises:
        InvariantError: If condition is falsy. It subclasses AssertionError.

    Example:
        ```python
        invariant(1 + 1 == 2)  # passes
        invariant(False, 'This always fails')  # raises InvariantError
        ```
    """
    if not condition:
        raise InvariantError(message)
