"""Async helpers for awaitable Results."""

from okerr.async_.result import AsyncMapper, async_map, async_unwrap

__all__ = [
    'AsyncMapper',
    'async_map',
    'async_unwrap',
]
