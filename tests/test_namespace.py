"""Tests for the Results namespace."""

from __future__ import annotations

import pytest

from okerr import (
    Err,
    NormalizedError,
    Ok,
    Results,
    async_map,
    async_unwrap,
    err,
    err_id,
    get_ok_err,
    is_result,
    ok,
    resultify,
    safe_fn,
)


class TestResultsNamespace:
    """Results exposes the same operations as the flat API."""

    @pytest.mark.parametrize(
        ('name', 'function'),
        [
            ('ok', ok),
            ('err', err),
            ('err_id', err_id),
            ('async_unwrap', async_unwrap),
            ('async_map', async_map),
            ('get_ok_err', get_ok_err),
            ('safe_fn', safe_fn),
            ('resultify', resultify),
            ('is_result', is_result),
        ],
    )
    def test_members_are_flat_functions(self, name: str, function: object) -> None:
        """Namespace members are the module-level functions."""
        assert getattr(Results, name) is function

    def test_constructors(self) -> None:
        """Constructors work through the namespace."""
        assert Results.ok(5) == Ok(5)
        assert Results.err_id('missing') == Err({'id': 'missing'})

    def test_unknown_to_error_returns_err(self) -> None:
        """Results.unknown_to_error wraps the normalized error in Err."""
        result = Results.unknown_to_error('boom')
        assert isinstance(result, Err)
        assert isinstance(result.error, NormalizedError)
        assert result.error.message == 'boom'

    def test_unknown_to_error_keeps_exception(self) -> None:
        """Exceptions are wrapped unchanged."""
        exc = ValueError('x')
        assert Results.unknown_to_error(exc).error is exc

    async def test_async_helpers(self) -> None:
        """Async helpers work through the namespace."""

        async def fetch() -> Ok[int]:
            return ok(2)

        assert await Results.async_unwrap(fetch()) == 2
        assert await Results.async_map(fetch()).ok(lambda x: x + 1) == Ok(3)

    def test_adapters(self) -> None:
        """Adapters work through the namespace."""
        assert Results.resultify(lambda: 1) == Ok(1)
        assert Results.safe_fn(lambda: 2)() == Ok(2)
        assert Results.is_result(Results.ok(None))
