"""safe_fn: wrap a raising function so that it returns a Result."""

from __future__ import annotations

import functools
from collections.abc import Awaitable, Callable, Coroutine, Iterable
from typing import Any, overload

import wrapt

from okerr.adapters.resultify import ErrorNormalizer, resultify
from okerr.result import Result

__all__ = ['safe_fn']


@overload
def safe_fn[**P, T](
    fn: Callable[P, Awaitable[T]],
    error_normalizer: None = None,
    *,
    exceptions: Iterable[type[BaseException]] | None = None,
) -> Callable[P, Coroutine[Any, Any, Result[T, Exception]]]: ...


@overload
def safe_fn[**P, T, E](
    fn: Callable[P, Awaitable[T]],
    error_normalizer: ErrorNormalizer[E],
    *,
    exceptions: Iterable[type[BaseException]] | None = None,
) -> Callable[P, Coroutine[Any, Any, Result[T, E]]]: ...


@overload
def safe_fn[**P, T](
    fn: Callable[P, T],
    error_normalizer: None = None,
    *,
    exceptions: Iterable[type[BaseException]] | None = None,
) -> Callable[P, Result[T, Exception]]: ...


@overload
def safe_fn[**P, T, E](
    fn: Callable[P, T],
    error_normalizer: ErrorNormalizer[E],
    *,
    exceptions: Iterable[type[BaseException]] | None = None,
) -> Callable[P, Result[T, E]]: ...


@overload
def safe_fn(
    fn: None = None,
    error_normalizer: ErrorNormalizer[Any] | None = None,
    *,
    exceptions: Iterable[type[BaseException]] | None = None,
) -> Callable[[Callable[..., Any]], Callable[..., Any]]: ...


def safe_fn(
    fn: Callable[..., Any] | None = None,
    error_normalizer: ErrorNormalizer[Any] | None = None,
    *,
    exceptions: Iterable[type[BaseException]] | None = None,
) -> Any:
    """Wrap a function so that it returns a Result instead of raising.

    The wrapper keeps fn's name, docstring and signature. Each call forwards
    its arguments to fn through ``resultify``: a plain return gives a Result,
    an awaitable return gives a coroutine resolving to a Result. The shape is
    decided per call, so fn is expected to be consistently sync or async.

    Can be called directly or used as a decorator, with or without arguments:
        divide = safe_fn(lambda a, b: a / b)

        @safe_fn
        def parse(text: str) -> int: ...

        @safe_fn(exceptions=(ValueError,))
        async def fetch(url: str) -> bytes: ...

    Args:
        fn: The function to wrap (omitted when used as ``@safe_fn(...)``).
        error_normalizer: Converts caught exceptions into the Err payload.
        exceptions: Exception types to capture. Defaults to
            ``get_settings().exceptions``.

    Returns:
        The wrapped function, or a decorator when fn is omitted.

    Example:
        ```python
        @safe_fn
        def divide(a: int, b: int) -> float:
            return a / b

        divide(10, 2)
        # Ok(value=5.0)
        divide(10, 0)
        # Err(error=ZeroDivisionError('division by zero'))
        ```
    """
    captured = tuple(exceptions) if exceptions is not None else None

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[..., Any],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Any:
        return resultify(
            functools.partial(wrapped, *args, **kwargs),
            error_normalizer,
            exceptions=captured,
        )

    if fn is not None:
        return wrapper(fn)
    return wrapper
