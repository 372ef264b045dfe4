"""Logging configuration.

stdlib logging carries the records to stderr (stdout is reserved for
command output); structlog formats them.
"""

from __future__ import annotations

import logging
import os
import sys

import structlog

DEFAULT_LEVEL = "WARNING"


def get_log_level(level: str | None = None) -> str:
    """Resolve the log level: explicit value, then LOG_LEVEL, then default."""
    return (level or os.getenv("LOG_LEVEL") or DEFAULT_LEVEL).upper()


def setup_stdlib_logging(level: str) -> None:
    """Configure standard library logging."""
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers = []

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    root_logger.addHandler(handler)


def setup_structlog() -> None:
    """Configure structlog for structured logging."""
    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.contextvars.merge_contextvars,
    ]

    if os.getenv("IMS_LOG_FORMAT", "console").lower() == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def configure_logging(level: str | None = None) -> None:
    """Configure all logging for the application."""
    setup_stdlib_logging(get_log_level(level))
    setup_structlog()
