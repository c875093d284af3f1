"""Non-raising JSON rendering of arbitrary payloads."""

from __future__ import annotations

import threading
from typing import Any

import msgspec

__all__ = ['safe_stringify']

# Encoders are not thread-safe: one per thread.
_local = threading.local()


def _encoder() -> msgspec.json.Encoder:
    encoder = getattr(_local, 'encoder', None)
    if encoder is None:
        encoder = msgspec.json.Encoder()
        _local.encoder = encoder
    return encoder


def safe_stringify(value: Any) -> str | None:
    """Render a value as compact JSON, or return None if it cannot be encoded.

    Args:
        value: Any value. Builtin containers, dataclasses, msgspec Structs and
            the other types msgspec understands are supported.

    Returns:
        The JSON text, or None for unsupported, circular or out-of-range values.

    Example:
        ```python
        safe_stringify({'a': [1, 2]})
        # '{"a":[1,2]}'
        safe_stringify(object())
        # None
        ```
    """
    try:
        return _encoder().encode(value).decode()
    except (TypeError, ValueError, OverflowError, RecursionError, msgspec.EncodeError):
        return None
