"""Assertion utilities: invariant."""

from okerr.assertions.invariant import invariant

__all__ = ['invariant']
