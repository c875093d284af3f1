"""Library configuration: Settings, configure() and get_settings()."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from dataclasses import dataclass

from okerr._logging import configure_logging, reset_logging

__all__ = [
    'Settings',
    'configure',
    'get_settings',
]

_LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')
_FALSY = ('0', 'false', 'no', 'off')


@dataclass(frozen=True)
class Settings:
    """Configuration for okerr.

    Attributes:
        exceptions: Exception types that ``resultify`` and ``safe_fn`` turn
            into ``Err`` when no ``exceptions`` argument is given. Anything
            else propagates.
        unknown_message: Message used by ``unknown_to_error`` when a payload
            cannot be rendered as JSON.
        log_level: Logging level for the ``okerr`` logger. None = silent.
        json_logs: Render logs as JSON (True) or for the console (False).
    """

    exceptions: tuple[type[BaseException], ...] = (Exception,)
    unknown_message: str = 'unknown'
    log_level: str | None = None
    json_logs: bool = True


# Current settings (set by configure(), or lazily by get_settings())
_settings: Settings | None = None


def _detect_log_level() -> str | None:
    """Read ``OKERR_LOG_LEVEL``; unknown values are reported and ignored."""
    env_level = os.environ.get('OKERR_LOG_LEVEL', '').strip().upper()
    if not env_level:
        return None
    if env_level not in _LOG_LEVELS:
        logging.warning("Unknown OKERR_LOG_LEVEL value '%s', keeping okerr silent", env_level)
        return None
    return env_level


def _detect_json_logs() -> bool:
    """Read ``OKERR_JSON_LOGS``; JSON output unless explicitly disabled."""
    return os.environ.get('OKERR_JSON_LOGS', '').strip().lower() not in _FALSY


def _validate_exceptions(exceptions: Iterable[type[BaseException]]) -> tuple[type[BaseException], ...]:
    resolved = tuple(exceptions)
    for exc_type in resolved:
        if not (isinstance(exc_type, type) and issubclass(exc_type, BaseException)):
            msg = f'exceptions must be exception classes, got {exc_type!r}'
            raise TypeError(msg)
    return resolved


def configure(
    *,
    exceptions: Iterable[type[BaseException]] | None = None,
    unknown_message: str | None = None,
    log_level: str | None = None,
    json_logs: bool | None = None,
) -> Settings:
    """Install okerr settings, replacing the current ones.

    Every argument left as None falls back to its environment variable or
    default, so ``configure()`` with no arguments restores the defaults.
    With no level resolved, a handler installed by an earlier
    ``configure(log_level=...)`` is removed and okerr is silent again.

    Args:
        exceptions: Exception types caught by the adapters. Defaults to
            ``(Exception,)``.
        unknown_message: Fallback normalization message. Defaults to
            ``'unknown'``.
        log_level: Logging level ("DEBUG", "INFO", etc.). Defaults to
            ``OKERR_LOG_LEVEL``; None = silent.
        json_logs: JSON log rendering. Defaults to ``OKERR_JSON_LOGS``.

    Returns:
        The Settings that were installed.

    Raises:
        TypeError: If ``exceptions`` contains something that is not an
            exception class.
        ValueError: If ``log_level`` is not a known level name.

    Example:
        ```python
        from okerr import configure

        configure(exceptions=(ValueError, KeyError), log_level='DEBUG')
        ```
    """
    global _settings  # noqa: PLW0603

    if log_level is None:
        resolved_level = _detect_log_level()
    else:
        resolved_level = log_level.upper()
        if resolved_level not in _LOG_LEVELS:
            msg = f'Unknown log level {log_level!r}, expected one of {", ".join(_LOG_LEVELS)}'
            raise ValueError(msg)

    _settings = Settings(
        exceptions=_validate_exceptions(exceptions) if exceptions is not None else (Exception,),
        unknown_message=unknown_message if unknown_message is not None else 'unknown',
        log_level=resolved_level,
        json_logs=json_logs if json_logs is not None else _detect_json_logs(),
    )

    if _settings.log_level is not None:
        configure_logging(_settings.log_level, json_output=_settings.json_logs)
    else:
        reset_logging()

    return _settings


def get_settings() -> Settings:
    """Get the current settings, creating them from the environment on first use.

    Returns:
        The current Settings.
    """
    if _settings is None:
        return configure()
    return _settings
