"""Adapters from raising and awaitable code to Results: resultify and safe_fn."""

from okerr.adapters.resultify import ErrorNormalizer, resultify
from okerr.adapters.safe import safe_fn

__all__ = [
    'ErrorNormalizer',
    'resultify',
    'safe_fn',
]
