"""Structured logging configuration using structlog.

objutils never configures logging on import; applications call
``setup_logging`` once at startup if they want objutils' debug events.
"""

from __future__ import annotations

import logging
import sys

import structlog

from objutils.config import load_log_config
from objutils.models.config import LogFormat


def setup_logging(level: str | None = None, fmt: LogFormat | str | None = None) -> None:
    """Configure structlog to render to stderr as JSON or console text.

    Arguments left as None are taken from OBJUTILS_LOG_LEVEL and
    OBJUTILS_LOG_FORMAT.
    """
    if level is None or fmt is None:
        log_config = load_log_config()
        level = log_config.level if level is None else level
        fmt = log_config.format if fmt is None else fmt
    log_level = getattr(logging, level.upper(), logging.INFO)
    renderer = (
        structlog.dev.ConsoleRenderer(colors=False)
        if LogFormat(fmt) == LogFormat.CONSOLE
        else structlog.processors.JSONRenderer(sort_keys=True)
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso", utc=True, key="ts"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def get_logger(component: str) -> structlog.stdlib.BoundLogger:
    """Get a logger bound with a component name."""
    return structlog.get_logger(component=component)  # type: ignore[return-value]
