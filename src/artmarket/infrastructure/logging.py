"""Logging setup: structlog on top of the standard library.

Call ``configure_logging`` once at startup. Modules log through
``structlog.get_logger(__name__)`` with keyword context.
"""

from __future__ import annotations

import logging
import sys

import structlog

from artmarket.infrastructure.config import Settings


def setup_stdlib_logging(settings: Settings) -> None:
    root_logger = logging.getLogger()
    root_logger.setLevel(settings.log_level)
    root_logger.handlers = []

    # stderr keeps log lines out of CLI output
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(settings.log_level)
    root_logger.addHandler(handler)


def setup_structlog(settings: Settings) -> None:
    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.contextvars.merge_contextvars,
    ]

    if settings.json_logs:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_logging(settings: Settings) -> None:
    setup_stdlib_logging(settings)
    setup_structlog(settings)
