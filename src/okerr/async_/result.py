"""Helpers over awaitable Results: async_unwrap and async_map.

Example:
    ```python
    async def fetch_user(id: int) -> Result[User, ValueError]:
        ...

    user = await async_unwrap(fetch_user(1))

    name_result = await async_map(fetch_user(1)).ok(lambda user: user.name)
    ```
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Generator
from typing import Any

from okerr.result import Result

__all__ = ['AsyncMapper', 'async_map', 'async_unwrap']


async def async_unwrap[T](result: Awaitable[Result[T, Any]]) -> T:
    """Await a Result and return its value, or raise its error.

    Raising follows ``Err.unwrap()``: an exception payload is raised as is,
    any other payload is converted with ``unknown_to_error``.

    Args:
        result: An awaitable producing a Result.

    Returns:
        The Ok value.
    """
    resolved = await result
    return resolved.unwrap()


class AsyncMapper[T, E]:
    """Mapping methods applied to a Result that is not available yet.

    Each method awaits the wrapped Result and returns a new Result, exactly
    like the synchronous ``map_ok``, ``map_err`` and ``map_ok_and_err``.

    Note:
        AsyncMapper is single-shot when wrapping a coroutine object.
        Coroutines can only be awaited once, so only one method call (or
        ``await``) can be made per mapper. Wrap a Task or Future to map the
        same Result several times.

    Example:
        ```python
        async def get_data() -> Result[int, ValueError]:
            return ok(5)

        await async_map(get_data()).ok(lambda x: x * 3)
        # Ok(value=15)
        ```
    """

    __slots__ = ('_awaitable',)

    def __init__(self, awaitable: Awaitable[Result[T, E]]) -> None:
        self._awaitable = awaitable

    def __await__(self) -> Generator[Any, Any, Result[T, E]]:
        """Await the underlying Result unchanged."""
        return self._awaitable.__await__()

    async def ok[U](self, fn: Callable[[T], U]) -> Result[U, E]:
        """Map the eventual Ok value."""
        result = await self._awaitable
        return result.map_ok(fn)

    async def err[F](self, fn: Callable[[E], F]) -> Result[T, F]:
        """Map the eventual Err payload."""
        result = await self._awaitable
        return result.map_err(fn)

    async def ok_and_err[U, F](
        self,
        *,
        ok: Callable[[T], U],
        err: Callable[[E], F],
    ) -> Result[U, F]:
        """Map whichever branch the eventual Result holds."""
        result = await self._awaitable
        return result.map_ok_and_err(ok=ok, err=err)

    def __repr__(self) -> str:
        return f'AsyncMapper({self._awaitable!r})'


def async_map[T, E](result: Awaitable[Result[T, E]]) -> AsyncMapper[T, E]:
    """Wrap an awaitable Result to map it before it resolves.

    Args:
        result: An awaitable producing a Result.

    Returns:
        An AsyncMapper exposing ``ok``, ``err`` and ``ok_and_err``.
    """
    return AsyncMapper(result)
