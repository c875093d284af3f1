"""Typed constructors: get_ok_err and TypedResult.

``get_ok_err`` hands back the ordinary ``ok``/``err`` constructors, typed
for a given success and error type. Nothing is specialized at runtime: every
call returns the same TypedResult object.

Example:
    ```python
    async def fetch_data(flag: bool) -> Result[dict[str, str], ValueError]:
        typed = get_ok_err(fetch_data)
        if flag:
            return typed.ok({'a': 'test'})
        return typed.err(ValueError('Error'))
    ```
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, overload

from okerr.errors import PhantomTypeError
from okerr.result import Err, Ok, Result, err, ok

__all__ = ['TypedResult', 'get_ok_err']


class TypedResult[T, E]:
    """The ``ok``/``err`` constructors typed for ``Result[T, E]``.

    ``ok`` and ``err`` are the module-level constructors themselves.
    ``_type`` only exists for type checkers (``Result[T, E]``); evaluating it
    raises PhantomTypeError.
    """

    __slots__ = ()

    @property
    def ok(self) -> Callable[[T], Ok[T]]:
        return ok

    @property
    def err(self) -> Callable[[E], Err[E]]:
        return err

    @property
    def _type(self) -> Result[T, E]:
        raise PhantomTypeError('usage as value is not allowed')

    def __repr__(self) -> str:
        return 'TypedResult()'


_TYPED_RESULT: TypedResult[Any, Any] = TypedResult()


@overload
def get_ok_err() -> TypedResult[Any, Any]: ...


@overload
def get_ok_err[T, E](ok_type: type[T], err_type: type[E], /) -> TypedResult[T, E]: ...


@overload
def get_ok_err[T, E](fn: Callable[..., Awaitable[Ok[T] | Err[E]]], /) -> TypedResult[T, E]: ...


@overload
def get_ok_err[T, E](fn: Callable[..., Ok[T] | Err[E]], /) -> TypedResult[T, E]: ...


def get_ok_err(*hints: object) -> TypedResult[Any, Any]:  # noqa: ARG001
    """Return the shared TypedResult, typed from the given hints.

    The hints only drive static inference and are ignored at runtime:
    - ``get_ok_err(int, ValueError)``: explicit success and error types
    - ``get_ok_err(fetch)``: from an async function returning a Result
    - ``get_ok_err(divide)``: from a function returning a Result
    - ``typed: TypedResult[int, ValueError] = get_ok_err()``: from a Result
      shape stated on the annotation

    Returns:
        The TypedResult singleton.
    """
    return _TYPED_RESULT
