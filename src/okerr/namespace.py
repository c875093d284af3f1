"""The Results namespace: constructors and helpers grouped under one name."""

from __future__ import annotations

from okerr.adapters import resultify, safe_fn
from okerr.async_ import async_map, async_unwrap
from okerr.guards import is_result
from okerr.normalize import unknown_to_error
from okerr.result import Err, err, err_id, ok
from okerr.typed import get_ok_err

__all__ = ['Results', 'unknown_to_result_error']


def unknown_to_result_error(error: object) -> Err[BaseException]:
    """Normalize an arbitrary payload with unknown_to_error and wrap it in Err."""
    return Err(unknown_to_error(error))


class Results:
    """Namespace for the Result constructors and helpers.

    ``Result`` itself is the ``Ok[T] | Err[E]`` type alias, so the helpers
    live here. Not meant to be instantiated.

    Note that ``Results.unknown_to_error`` returns ``Err(error)``, unlike the
    module-level ``unknown_to_error`` which returns the exception itself.

    Example:
        ```python
        from okerr import Results

        Results.ok(5)
        # Ok(value=5)
        Results.err_id('missing')
        # Err(error={'id': 'missing'})
        await Results.async_unwrap(fetch_user(1))
        ```
    """

    __slots__ = ()

    ok = staticmethod(ok)
    err = staticmethod(err)
    err_id = staticmethod(err_id)
    unknown_to_error = staticmethod(unknown_to_result_error)
    async_unwrap = staticmethod(async_unwrap)
    async_map = staticmethod(async_map)
    get_ok_err = staticmethod(get_ok_err)
    safe_fn = staticmethod(safe_fn)
    resultify = staticmethod(resultify)
    is_result = staticmethod(is_result)
