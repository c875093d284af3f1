"""resultify: capture the outcome of raising or awaitable code as a Result."""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Coroutine, Iterable
from typing import Any, overload

from okerr._internal.guards import is_awaitable
from okerr._logging import get_logger
from okerr.config import get_settings
from okerr.normalize import unknown_to_error
from okerr.result import Err, Ok, Result

__all__ = ['ErrorNormalizer', 'resultify']

_logger = get_logger(__name__)

type ErrorNormalizer[E] = Callable[[BaseException], E]


@overload
def resultify[T](
    fn: Callable[[], Awaitable[T]],
    error_normalizer: None = None,
    *,
    exceptions: Iterable[type[BaseException]] | None = None,
) -> Coroutine[Any, Any, Result[T, Exception]]: ...


@overload
def resultify[T, E](
    fn: Callable[[], Awaitable[T]],
    error_normalizer: ErrorNormalizer[E],
    *,
    exceptions: Iterable[type[BaseException]] | None = None,
) -> Coroutine[Any, Any, Result[T, E]]: ...


@overload
def resultify[T](
    fn: Awaitable[T],
    error_normalizer: None = None,
    *,
    exceptions: Iterable[type[BaseException]] | None = None,
) -> Coroutine[Any, Any, Result[T, Exception]]: ...


@overload
def resultify[T, E](
    fn: Awaitable[T],
    error_normalizer: ErrorNormalizer[E],
    *,
    exceptions: Iterable[type[BaseException]] | None = None,
) -> Coroutine[Any, Any, Result[T, E]]: ...


@overload
def resultify[T](
    fn: Callable[[], T],
    error_normalizer: None = None,
    *,
    exceptions: Iterable[type[BaseException]] | None = None,
) -> Result[T, Exception]: ...


@overload
def resultify[T, E](
    fn: Callable[[], T],
    error_normalizer: ErrorNormalizer[E],
    *,
    exceptions: Iterable[type[BaseException]] | None = None,
) -> Result[T, E]: ...


def resultify(
    fn: Callable[[], Any] | Awaitable[Any],
    error_normalizer: ErrorNormalizer[Any] | None = None,
    *,
    exceptions: Iterable[type[BaseException]] | None = None,
) -> Result[Any, Any] | Coroutine[Any, Any, Result[Any, Any]]:
    """Run a callable, or resolve an awaitable, and return the outcome as a Result.

    The argument is classified by shape:
    - a callable is invoked immediately with no arguments. A plain return
      value becomes ``Ok(value)`` and a raised exception ``Err(error)``, both
      returned synchronously. If the call returns an awaitable, a coroutine
      resolving to the Result is returned instead.
    - an awaitable (not callable) gives a coroutine resolving to
      ``Ok(value)`` or ``Err(error)``.

    Only the configured exception types are captured (``Exception`` by
    default); ``KeyboardInterrupt``, ``SystemExit`` and task cancellation
    always propagate.

    Args:
        fn: A zero-argument callable, or an awaitable.
        error_normalizer: Converts the caught exception into the Err payload.
            Defaults to ``unknown_to_error``; its output is used verbatim.
        exceptions: Exception types to capture. Defaults to
            ``get_settings().exceptions``.

    Returns:
        A Result for synchronous outcomes, or a coroutine resolving to one.

    Raises:
        TypeError: If fn is neither callable nor awaitable.

    Example:
        ```python
        resultify(lambda: int('42'))
        # Ok(value=42)

        resultify(lambda: int('x'))
        # Err(error=ValueError("invalid literal for int() with base 10: 'x'"))

        async def fetch() -> int:
            return 42

        await resultify(fetch)
        # Ok(value=42)
        await resultify(fetch())
        # Ok(value=42)
        ```
    """
    catch = tuple(exceptions) if exceptions is not None else get_settings().exceptions
    normalize = error_normalizer if error_normalizer is not None else unknown_to_error

    if not callable(fn):
        if not is_awaitable(fn):
            msg = f'resultify() expects a callable or an awaitable, got {type(fn).__name__}'
            raise TypeError(msg)
        return _settle(fn, normalize, catch)

    try:
        value = fn()
    except catch as exc:
        _logger.debug('resultify.caught', exc_type=type(exc).__name__, mode='sync')
        return Err(normalize(exc))

    if is_awaitable(value):
        return _settle(value, normalize, catch)
    return Ok(value)


async def _settle[T, E](
    awaitable: Awaitable[T],
    normalize: ErrorNormalizer[E],
    catch: tuple[type[BaseException], ...],
) -> Result[T, E]:
    try:
        value = await awaitable
    except catch as exc:
        _logger.debug('resultify.caught', exc_type=type(exc).__name__, mode='async')
        return Err(normalize(exc))
    return Ok(value)
