"""
Structured logging for dockercmd.

Uses structlog with the same processor chain regardless of output format.
The library itself only ever calls :func:`get_logger`; applications that
want JSON or console output call :func:`configure_logging` once at startup.

Events emitted by the library:
    - ``engine.detected`` / ``engine.not_found`` from auto-detection
    - ``engine.groups_probe_failed`` when the ``groups`` probe cannot run
    - ``command.exec`` / ``command.failed`` from the optional runner

Examples:
    >>> from dockercmd.logging import configure_logging, get_logger
    >>> configure_logging(level="DEBUG", json_format=False)
    >>> logger = get_logger(__name__)
    >>> logger.debug("command.exec", command="docker ps")

Tags:
    logging, structlog, observability, dockercmd
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog
from structlog.types import EventDict, Processor, WrappedLogger


def _service_metadata(service: str) -> Processor:
    """Processor that tags every event with ``service``."""

    def _add(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
        event_dict.setdefault("service", service)
        return event_dict

    return _add


def configure_logging(
    level: str = "INFO",
    json_format: bool | None = None,
    service: str = "dockercmd",
) -> None:
    """Configure structured logging for the application.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        json_format: True for JSON, False for console, None for auto (JSON if not tty)
        service: Value of the ``service`` field on every event
    """
    if json_format is None:
        json_format = not sys.stdout.isatty()

    processors: list[Processor] = [
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.dev.set_exc_info,
        _service_metadata(service),
    ]
    if json_format:
        processors.append(structlog.processors.format_exc_info)
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty()))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level.upper())
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> Any:
    """Get a structured logger (usually ``get_logger(__name__)``)."""
    return structlog.get_logger(name)


__all__ = [
    "configure_logging",
    "get_logger",
]
