"""Shape predicates used to classify payloads and adapter arguments."""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Mapping
from typing import Any, TypeIs

__all__ = ['is_awaitable', 'is_plain_object']


def is_plain_object(value: object) -> TypeIs[Mapping[Any, Any]]:
    """Return True for mapping payloads (dicts and other ``Mapping`` types)."""
    return isinstance(value, Mapping)


def is_awaitable(value: object) -> TypeIs[Awaitable[Any]]:
    """Return True for coroutines, futures, tasks and objects defining ``__await__``."""
    return inspect.isawaitable(value)
