"""Structured logging configuration for campcal.

The engines themselves never log; registry changes, calendar file loading,
validation failures and CLI commands do.

Example:
    >>> from campcal.core.logging import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("calendar_loaded", calendar="harptos", months=17)
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

import structlog
from structlog.types import Processor


if TYPE_CHECKING:
    from structlog.types import EventDict, WrappedLogger


def add_app_context(
    logger: WrappedLogger,
    method_name: str,
    event_dict: EventDict,
) -> EventDict:
    event_dict["app"] = "campcal"
    return event_dict


def configure_logging(*, level: str = "WARNING", json_format: bool = False) -> None:
    """Configure structlog and the stdlib root logger.

    Args:
        level: The logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        json_format: If True, render one JSON object per line.
    """
    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        add_app_context,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if json_format:
        processors: list[Processor] = [
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = [
            *shared_processors,
            structlog.dev.ConsoleRenderer(
                colors=False,
                exception_formatter=structlog.dev.plain_traceback,
            ),
        ]

    numeric_level = getattr(logging, level.upper(), logging.WARNING)

    # Rendered lines are handed to stdlib logging, which writes to stderr so
    # CLI output on stdout stays parseable.
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    logging.basicConfig(
        format="%(message)s",
        level=numeric_level,
        stream=sys.stderr,
        force=True,
    )


def install_default_filter(level: str = "WARNING") -> None:
    """Drop records below ``level`` until the application calls ``configure_logging``."""
    if not structlog.is_configured():
        numeric_level = getattr(logging, level.upper(), logging.WARNING)
        structlog.configure(wrapper_class=structlog.make_filtering_bound_logger(numeric_level))


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    return structlog.get_logger(name)


def bind_context(**kwargs) -> None:
    """Bind context variables included in all subsequent log entries (e.g. ``calendar="harptos"``)."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    structlog.contextvars.clear_contextvars()


__all__ = [
    "configure_logging",
    "install_default_filter",
    "get_logger",
    "bind_context",
    "clear_context",
]
