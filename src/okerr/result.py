"""Result type: Ok[T] | Err[E] for explicit success and failure values.

A Result is returned instead of raising for *expected* failures. Both
variants expose the same method surface, so a caller can transform, inspect
or unwrap a Result without first checking which branch it holds.

Example:
    ```python
    from okerr import Result, err, ok

    def divide(a: float, b: float) -> Result[float, ValueError]:
        if b == 0:
            return err(ValueError('Cannot divide by zero'))
        return ok(a / b)

    divide(10, 2).map_ok(lambda v: v * 3)
    # Ok(value=15.0)

    divide(10, 0).map_err(lambda e: [str(e)])
    # Err(error=['Cannot divide by zero'])

    divide(10, 0).unwrap_or(0)
    # 0
    ```

    Branch on the ``ok`` flag or with structural pattern matching:

    ```python
    match divide(1, 0):
        case Ok(value):
            print(value)
        case Err(error):
            print(f'failed: {error}')
    ```
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, ClassVar, Literal, NoReturn, overload
from warnings import deprecated

import msgspec

from okerr.normalize import unknown_to_error

__all__ = ['Err', 'ErrorPayload', 'Ok', 'Result', 'err', 'err_id', 'ok']

# Error payloads are restricted to shapes that unwrap() can always raise.
type ErrorPayload = BaseException | Mapping[str, Any] | list[Any] | tuple[Any, ...] | Literal[True]


# Tracked by the GC: values and error payloads can reference the Result holding them.
class Ok[T](msgspec.Struct, frozen=True):
    """Success variant of Result containing a value of type T.

    ``ok`` is always True and ``error`` always False, so an Ok can be told
    apart from an Err by either flag.

    Examples:
        >>> ok(42).unwrap()
        42
        >>> ok(42).map_ok(lambda x: x * 2)
        Ok(value=84)
        >>> ok(42).error
        False
    """

    value: T

    ok: ClassVar[Literal[True]] = True
    error: ClassVar[Literal[False]] = False

    def unwrap_or_null(self) -> T:
        """Return the contained value."""
        return self.value

    def unwrap_or[U](self, default: U) -> T:  # noqa: ARG002
        """Return the contained value, ignoring the default."""
        return self.value

    def unwrap(self) -> T:
        """Return the contained value.

        Since this is Ok, this always succeeds.
        """
        return self.value

    def map_ok[U](self, fn: Callable[[T], U]) -> Ok[U]:
        """Apply a function to the contained value.

        Args:
            fn: Function to apply to the Ok value.

        Returns:
            A new Ok containing the result of applying fn to the value.
        """
        return Ok(fn(self.value))

    def map_err(self, fn: Callable[[Any], Any]) -> Ok[T]:  # noqa: ARG002
        """Return self unchanged since this is Ok."""
        return self

    def map_ok_and_err[U](
        self,
        *,
        ok: Callable[[T], U],
        err: Callable[[Any], Any],  # noqa: ARG002
    ) -> Ok[U]:
        """Map the value with ``ok``; ``err`` is not called.

        Both mappers are required, whichever branch the Result holds.

        Returns:
            A new Ok containing ``ok(value)``.
        """
        return Ok(ok(self.value))

    def map_to_value[U](
        self,
        *,
        ok: Callable[[T], U],
        err: Callable[[Any], Any],  # noqa: ARG002
    ) -> U:
        """Return ``ok(value)`` as a plain value, leaving the Result behind.

        This is the only method that does not return a Result, so it ends a
        chain.
        """
        return ok(self.value)

    def on_ok(self, fn: Callable[[T], object]) -> Ok[T]:
        """Call fn with the value for its side effect and return self."""
        fn(self.value)
        return self

    def on_err(self, fn: Callable[[Any], object]) -> Ok[T]:  # noqa: ARG002
        """Return self unchanged since this is Ok."""
        return self

    @deprecated('Use on_ok() instead')
    def if_ok(self, fn: Callable[[T], object]) -> Ok[T]:
        """Deprecated alias of on_ok()."""
        return self.on_ok(fn)

    @deprecated('Use on_err() instead')
    def if_err(self, fn: Callable[[Any], object]) -> Ok[T]:
        """Deprecated alias of on_err()."""
        return self.on_err(fn)


class Err[E](msgspec.Struct, frozen=True):
    """Error variant of Result containing an error of type E.

    ``ok`` is always False. ``error`` holds the payload, which should be an
    exception, a mapping, a list or tuple, or ``True`` (see ErrorPayload).

    Examples:
        >>> err(ValueError('boom')).unwrap_or(0)
        0
        >>> err(['a']).map_err(lambda e: [*e, 'b'])
        Err(error=['a', 'b'])
    """

    error: E

    ok: ClassVar[Literal[False]] = False

    def unwrap_or_null(self) -> None:
        """Return None since this is Err."""
        return None

    def unwrap_or[U](self, default: U) -> U:
        """Return the default since this is Err."""
        return default

    def unwrap(self) -> NoReturn:
        """Raise the error.

        An exception payload is raised as is, so its identity and traceback
        are preserved. Any other payload is converted with
        ``unknown_to_error`` first.

        Raises:
            BaseException: Always.
        """
        if isinstance(self.error, BaseException):
            raise self.error
        raise unknown_to_error(self.error)

    def map_ok(self, fn: Callable[[Any], Any]) -> Err[E]:  # noqa: ARG002
        """Return self unchanged since this is Err."""
        return self

    def map_err[F](self, fn: Callable[[E], F]) -> Err[F]:
        """Apply a function to the contained error.

        Args:
            fn: Function to apply to the error payload.

        Returns:
            A new Err containing the transformed error.
        """
        return Err(fn(self.error))

    def map_ok_and_err[F](
        self,
        *,
        ok: Callable[[Any], Any],  # noqa: ARG002
        err: Callable[[E], F],
    ) -> Err[F]:
        """Map the error with ``err``; ``ok`` is not called.

        Returns:
            A new Err containing ``err(error)``.
        """
        return Err(err(self.error))

    def map_to_value[V](
        self,
        *,
        ok: Callable[[Any], Any],  # noqa: ARG002
        err: Callable[[E], V],
    ) -> V:
        """Return ``err(error)`` as a plain value, leaving the Result behind."""
        return err(self.error)

    def on_ok(self, fn: Callable[[Any], object]) -> Err[E]:  # noqa: ARG002
        """Return self unchanged since this is Err."""
        return self

    def on_err(self, fn: Callable[[E], object]) -> Err[E]:
        """Call fn with the error for its side effect and return self."""
        fn(self.error)
        return self

    @deprecated('Use on_ok() instead')
    def if_ok(self, fn: Callable[[Any], object]) -> Err[E]:
        """Deprecated alias of on_ok()."""
        return self.on_ok(fn)

    @deprecated('Use on_err() instead')
    def if_err(self, fn: Callable[[E], object]) -> Err[E]:
        """Deprecated alias of on_err()."""
        return self.on_err(fn)

    def error_result(self) -> Err[E]:
        """Return a new Err holding the same error instance.

        Useful to re-type an Err when returning it from a function whose Ok
        type differs.
        """
        return Err(self.error)


type Result[T, E = Exception] = Ok[T] | Err[E]


@overload
def ok() -> Ok[None]: ...


@overload
def ok[T](value: T) -> Ok[T]: ...


def ok(value: Any = None) -> Ok[Any]:
    """Create an Ok result.

    Called without an argument it represents completion without data.

    Args:
        value: The value to wrap.

    Returns:
        A new Ok.

    Examples:
        >>> ok(5)
        Ok(value=5)
        >>> ok()
        Ok(value=None)
    """
    return Ok(value)


def err[E: ErrorPayload](error: E) -> Err[E]:
    """Create an Err result.

    The payload is not validated; construction never fails.

    Args:
        error: The error payload.

    Returns:
        A new Err.

    Examples:
        >>> err(ValueError('bad input')).ok
        False
    """
    return Err(error)


def err_id[I: str](id: I) -> Err[dict[str, I]]:  # noqa: A002
    """Create an Err whose payload is ``{'id': id}``.

    A cheap, comparable sentinel error that needs no exception object.

    Examples:
        >>> err_id('not_found')
        Err(error={'id': 'not_found'})
    """
    return Err({'id': id})
