"""Structured logging for klaw-adt.

Library loggers are structlog wrappers around stdlib loggers under the
``klaw_adt`` namespace. Until the host opts in (``configure_logging`` or
``klaw_adt.init``) their events are dropped by the stdlib level filter, so the
library stays silent by default. Opting in attaches one structlog-rendered
handler to the ``klaw_adt`` logger only; the root logger and global structlog
configuration belong to the host and are left alone.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

__all__ = ['configure_logging', 'get_logger']

LOGGER_NAMESPACE = 'klaw_adt'

_handler: logging.Handler | None = None


def _get_processors() -> list[Any]:
    """Get the processor chain for library loggers."""
    return [
        structlog.stdlib.filter_by_level,
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
        structlog.processors.StackInfoRenderer(),
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ]


def _get_renderer(json_output: bool = True) -> Any:
    if json_output:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(
    level: str = 'INFO',
    *,
    json_output: bool = True,
) -> None:
    """Emit klaw-adt log events to stderr at ``level`` and above.

    Calling this again replaces the handler installed by the previous call.
    Handlers added by the host, on the root logger or on ``klaw_adt``, are
    kept.

    Args:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL").
        json_output: If True, emit JSON lines. If False, use console output.
    """
    global _handler  # noqa: PLW0603

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _get_renderer(json_output),
        ],
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    package_logger = logging.getLogger(LOGGER_NAMESPACE)
    if _handler is not None:
        package_logger.removeHandler(_handler)
    package_logger.addHandler(handler)
    package_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    package_logger.propagate = False
    _handler = handler


def get_logger(name: str | None = None) -> Any:
    """Get a structlog logger backed by the stdlib logger ``name``.

    The logger does not depend on global structlog configuration, so it is
    safe to create at import time.

    Args:
        name: Logger name, normally ``__name__`` of a klaw_adt module.

    Returns:
        A structlog BoundLogger.
    """
    return structlog.wrap_logger(
        logging.getLogger(name or LOGGER_NAMESPACE),
        processors=_get_processors(),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
    )
