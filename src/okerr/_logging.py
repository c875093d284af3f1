"""Structured logging for okerr.

okerr logs through structlog bound to the stdlib ``okerr`` logger hierarchy.
Nothing is emitted until that logger is enabled, either by the application's
own logging setup or by ``configure_logging``. Global structlog and root
logger configuration are left to the application.

Uses structlog's ProcessorFormatter so that records from the ``okerr``
loggers render the same way whether they come from structlog or stdlib.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = [
    'LOGGER_NAME',
    'add_log_hook',
    'clear_log_hooks',
    'configure_logging',
    'get_logger',
    'remove_log_hook',
    'reset_logging',
]

LOGGER_NAME = 'okerr'

# True while the okerr logger carries the handler installed by configure_logging()
_configured = False


def _get_shared_processors() -> list[Any]:
    """Get processors shared between structlog and stdlib foreign logs."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
        structlog.stdlib.ExtraAdder(),
        _create_hook_processor(),
    ]


def _get_structlog_processors() -> list[Any]:
    """Get the full processor chain for okerr loggers."""
    return [
        structlog.stdlib.filter_by_level,
        *_get_shared_processors(),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ]


def _get_renderer(json_output: bool = True) -> Any:
    """Get the appropriate renderer based on output format."""
    if json_output:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(
    level: str = 'INFO',
    *,
    json_output: bool = True,
) -> None:
    """Attach a structured handler to the ``okerr`` logger.

    Only the ``okerr`` logger is touched: its handlers are replaced, its level
    set, and propagation to the root logger disabled so records are not
    emitted twice.

    Args:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL").
        json_output: If True, emit JSON logs. If False, use console output.
    """
    global _configured  # noqa: PLW0603

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_get_shared_processors(),
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _get_renderer(json_output),
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    logger.propagate = False
    _configured = True


def reset_logging() -> None:
    """Undo ``configure_logging``, returning the ``okerr`` logger to silence.

    Handlers are removed, the level goes back to NOTSET and propagation is
    re-enabled. A logger set up by the application rather than by
    ``configure_logging`` is left alone.
    """
    global _configured  # noqa: PLW0603

    if not _configured:
        return
    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    _configured = False


def get_logger(name: str | None = None) -> Any:
    """Get a structlog logger bound to a stdlib logger in the okerr hierarchy.

    Args:
        name: Stdlib logger name. Defaults to ``okerr``.

    Returns:
        A lazily bound structlog ``BoundLogger``.
    """
    return structlog.wrap_logger(
        logging.getLogger(name or LOGGER_NAME),
        processors=_get_structlog_processors(),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
    )


# --- Logging Hooks ---

_log_hooks: list[Callable[[dict[str, Any]], None]] = []


def add_log_hook(hook: Callable[[dict[str, Any]], None]) -> None:
    """Register a hook called with a copy of each okerr log entry.

    Args:
        hook: Callable that receives the event dict.
    """
    _log_hooks.append(hook)


def remove_log_hook(hook: Callable[[dict[str, Any]], None]) -> None:
    """Remove a previously registered log hook.

    Args:
        hook: The hook to remove.
    """
    if hook in _log_hooks:
        _log_hooks.remove(hook)


def clear_log_hooks() -> None:
    """Remove all registered log hooks."""
    _log_hooks.clear()


def _create_hook_processor() -> Callable[[Any, str, dict[str, Any]], dict[str, Any]]:
    """Create a processor that invokes log hooks."""

    def hook_processor(
        logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        for hook in _log_hooks:
            try:
                hook(event_dict.copy())
            except Exception:  # noqa: BLE001, S112
                continue  # a failing hook must not break logging
        return event_dict

    return hook_processor
