#!/usr/bin/env python3
"""
Structured logging for mapconfirm.

Records go to stderr so they never land on the stdout prompt line.
"""

import logging
import sys

import structlog
from structlog.typing import Processor

from .config import get_config


def _renderer(log_format: str) -> list[Processor]:
    if log_format == "json":
        return [
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(),
        ]
    return [
        structlog.processors.TimeStamper(fmt="%H:%M:%S"),
        structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()),
    ]


def setup_logging() -> None:
    """Configure stdlib logging and structlog from ``MAPCONFIRM_LOG_*``."""
    config = get_config()

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, config.log_level),
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            *_renderer(config.log_format),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str = "mapconfirm") -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def suppress_logging() -> None:
    """Silence every log record while a prompt owns the terminal."""
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(logging.NullHandler())
    logging.disable(logging.CRITICAL)


def restore_logging() -> None:
    """Undo :func:`suppress_logging`."""
    logging.disable(logging.NOTSET)
    # basicConfig is a no-op while the NullHandler is installed
    logging.getLogger().handlers.clear()
    setup_logging()
