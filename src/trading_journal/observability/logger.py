"""Structured logging for the journal CLI.

Uses structlog on top of the stdlib logging tree so library modules can
keep calling ``logging.getLogger(__name__)`` while the CLI decides
whether entries are rendered as JSON or for the console.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from ..core.enums import LogFormat


def bind_source(source: str) -> None:
    """Attach the trade file being analysed to every later log entry."""
    structlog.contextvars.bind_contextvars(source=source)


def _add_component(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Structlog processor: tag entries with the journal component."""
    event_dict.setdefault("component", "trading_journal")
    return event_dict


def setup_logging(
    level: str = "INFO",
    format: LogFormat | str = LogFormat.CONSOLE,
) -> None:
    """Configure structured logging for the application.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR).
        format: "json" for machine-readable output, "console" for humans.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        _add_component,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if LogFormat(format) == LogFormat.JSON:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=log_level,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger for a module."""
    return structlog.get_logger(name)
