"""Structured logging configuration using structlog."""

import logging
import sys

import structlog

from src.utils.config import LOG_LEVEL


def resolve_level(level: str | None = None) -> int:
    """Numeric level for a level name; None means LOG_LEVEL, unknown names INFO."""
    name = LOG_LEVEL if level is None else level
    value = logging.getLevelName(name.upper())
    return value if isinstance(value, int) else logging.INFO


def configure_logging(level: str | None = None, json_output: bool = False) -> None:
    """Configure structured logging for the dashboard and its engine.

    Args:
        level: Logging level name; defaults to LOG_LEVEL from the environment
        json_output: If True, emit one JSON object per event
    """
    log_level = resolve_level(level)

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=log_level,
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if json_output:
        processors.append(structlog.processors.JSONRenderer(ensure_ascii=False))
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger bound to ``name`` (usually ``__name__``)."""
    return structlog.get_logger(name)
