"""Pytest configuration and shared fixtures for okerr tests."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from okerr import Err, Ok, clear_log_hooks, configure


@pytest.fixture(autouse=True)
def reset_okerr(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Restore default settings, hooks and the okerr logger around each test."""
    monkeypatch.delenv('OKERR_LOG_LEVEL', raising=False)
    monkeypatch.delenv('OKERR_JSON_LOGS', raising=False)
    configure()
    clear_log_hooks()
    yield
    monkeypatch.delenv('OKERR_LOG_LEVEL', raising=False)
    configure()
    clear_log_hooks()


@pytest.fixture
def sample_ok() -> Ok[int]:
    """Sample Ok value for testing."""
    return Ok(42)


@pytest.fixture
def sample_err() -> Err[ValueError]:
    """Sample Err value for testing."""
    return Err(ValueError('test error'))
