"""Structured logging for the script filter.

stdout belongs to the launcher, which parses it as item JSON, so log lines
are rendered as JSON on stderr instead.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, TextIO

import structlog


def _resolve_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    return resolved if isinstance(resolved, int) else logging.WARNING


def configure_logging(level: int | str = logging.WARNING, stream: TextIO | None = None) -> None:
    target = stream if stream is not None else sys.stderr
    numeric_level = _resolve_level(level)
    logging.basicConfig(level=numeric_level, format="%(message)s", stream=target)
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(ensure_ascii=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        logger_factory=structlog.PrintLoggerFactory(file=target),
        cache_logger_on_first_use=True,
    )


def bind_invocation(query: str, **context: Any) -> None:
    """Attach the current query (and any filters) to every later log line."""

    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(
        query=query,
        **{key: value for key, value in context.items() if value is not None},
    )


logger = structlog.get_logger()

__all__ = ["bind_invocation", "configure_logging", "logger"]
