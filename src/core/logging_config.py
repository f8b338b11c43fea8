"""Structured logging configuration.

This module initializes structlog with a stable JSON format on stderr.
Verbosity only moves the level filter; event shapes never change.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

_DEFAULT_LEVEL = logging.WARNING
_VERBOSE_LEVEL = logging.DEBUG


def configure_logging(verbose: bool = False) -> None:
    """Configure structlog processors and level filter.

    Args:
        verbose: Emit debug and info events when true.
    """
    level = _VERBOSE_LEVEL if verbose else _DEFAULT_LEVEL
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.JSONRenderer(sort_keys=True),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=_stderr_logger,
        cache_logger_on_first_use=False,
    )


def _stderr_logger(*_args: Any) -> structlog.PrintLogger:
    """Bind a print logger to the current stderr stream."""
    return structlog.PrintLogger(file=sys.stderr)


def get_logger(name: str) -> Any:
    """Return a module logger instance.

    Args:
        name: Logger name, usually __name__.

    Returns:
        A structlog logger with structured output.
    """
    if not structlog.is_configured():
        configure_logging()
    return structlog.get_logger(name)
