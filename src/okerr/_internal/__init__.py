"""Small primitives consumed by the okerr core."""

from okerr._internal.guards import is_awaitable, is_plain_object
from okerr._internal.stringify import safe_stringify

__all__ = ['is_awaitable', 'is_plain_object', 'safe_stringify']
