"""Tests for the safe_fn wrapper and decorator."""

from __future__ import annotations

import inspect

import anyio
import pytest

from okerr import Err, NormalizedError, Ok, safe_fn, unknown_to_error


def parse_int(text: str) -> int:
    return int(text)


class TestSafeFnSync:
    """Wrapping synchronous functions."""

    def test_returns_ok(self) -> None:
        """A successful call returns Ok."""
        safe_divide = safe_fn(lambda a, b: a / b)
        assert safe_divide(10, 2) == Ok(5.0)

    def test_returns_err(self) -> None:
        """A raising call returns Err."""
        safe_divide = safe_fn(lambda a, b: a / b)
        result = safe_divide(10, 0)
        assert isinstance(result, Err)
        assert isinstance(result.error, ZeroDivisionError)

    def test_forwards_keyword_arguments(self) -> None:
        """Positional and keyword arguments reach the wrapped function."""

        @safe_fn
        def greet(name: str, *, punctuation: str = '.') -> str:
            return f'hello {name}{punctuation}'

        assert greet('ada', punctuation='!') == Ok('hello ada!')

    def test_string_normalizer(self) -> None:
        """A normalizer can coerce the exception message into a NormalizedError."""

        def fail() -> None:
            raise ValueError('a')

        result = safe_fn(fail, lambda e: unknown_to_error(str(e)))()
        assert isinstance(result.error, NormalizedError)
        assert result.error.message == 'a'

    def test_each_call_is_independent(self) -> None:
        """Successive calls produce independent Results."""
        parse = safe_fn(parse_int)
        assert parse('1') == Ok(1)
        assert isinstance(parse('x'), Err)
        assert parse('2') == Ok(2)


class TestSafeFnAsync:
    """Wrapping async functions."""

    async def test_returns_ok(self) -> None:
        """An async function resolves to Ok."""

        @safe_fn
        async def fetch(n: int) -> int:
            await anyio.sleep(0)
            return n * 2

        assert await fetch(21) == Ok(42)

    async def test_returns_err(self) -> None:
        """An async function that raises resolves to Err."""

        @safe_fn
        async def fetch(n: int) -> int:
            await anyio.sleep(0)
            raise LookupError(n)

        result = await fetch(1)
        assert isinstance(result.error, LookupError)

    async def test_call_returns_awaitable(self) -> None:
        """Calling the wrapper gives an awaitable."""

        @safe_fn
        async def fetch() -> int:
            return 1

        pending = fetch()
        assert inspect.isawaitable(pending)
        assert await pending == Ok(1)


class TestSafeFnOptions:
    """Normalizer and exception filter options."""

    def test_custom_normalizer(self) -> None:
        """The normalizer output becomes the payload."""

        def to_list(exc: BaseException) -> list[str]:
            return [type(exc).__name__, str(exc)]

        parse = safe_fn(parse_int, to_list)
        assert parse('x') == Err(['ValueError', "invalid literal for int() with base 10: 'x'"])

    def test_decorator_with_arguments(self) -> None:
        """@safe_fn(...) accepts keyword options."""

        @safe_fn(exceptions=(ValueError,))
        def risky(x: int) -> int:
            if x < 0:
                raise ValueError('negative')
            if x == 0:
                raise TypeError('zero')
            return x

        assert risky(5) == Ok(5)
        assert isinstance(risky(-1).error, ValueError)
        with pytest.raises(TypeError):
            risky(0)

    async def test_decorator_normalizer_async(self) -> None:
        """Options apply to async functions too."""

        @safe_fn(error_normalizer=lambda e: {'message': str(e)})
        async def fetch() -> int:
            raise RuntimeError('down')

        assert await fetch() == Err({'message': 'down'})


class TestSafeFnMetadata:
    """The wrapper keeps the wrapped function's metadata."""

    def test_preserves_name_and_doc(self) -> None:
        """__name__, __doc__ and __wrapped__ are kept."""

        def parse(text: str) -> int:
            """Parse an integer."""
            return int(text)

        wrapped = safe_fn(parse)
        assert wrapped.__name__ == 'parse'
        assert wrapped.__doc__ == 'Parse an integer.'
        assert wrapped.__wrapped__ is parse

    def test_preserves_signature(self) -> None:
        """The wrapper reports the wrapped signature."""

        def combine(a: int, b: str = 'x', *, flag: bool = False) -> str:
            return f'{a}{b}{flag}'

        assert inspect.signature(safe_fn(combine)) == inspect.signature(combine)

    def test_wraps_methods(self) -> None:
        """Decorated methods are bound normally."""

        class Parser:
            base = 10

            @safe_fn
            def parse(self, text: str) -> int:
                return int(text, self.base)

        assert Parser().parse('12') == Ok(12)
        assert isinstance(Parser().parse('z').error, ValueError)
