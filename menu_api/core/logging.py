"""structlog setup for the menu service.

Per-request fields live in structlog's context variables. The HTTP middleware
binds ``request_id`` when a request arrives and it stays bound until the next
request replaces it, so fault handling and Sentry events still see it.
"""

from __future__ import annotations

import logging
import sys

import structlog
from structlog.contextvars import (
    bind_contextvars,
    clear_contextvars,
    get_contextvars,
    merge_contextvars,
)


def bind_request_id(request_id: str) -> None:
    clear_contextvars()
    bind_contextvars(request_id=request_id)


def current_request_id() -> str | None:
    return get_contextvars().get("request_id")


def configure_logging(level: str = "INFO") -> None:
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    # uvicorn and other stdlib loggers share stdout with structlog
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=numeric_level)

    structlog.configure(
        processors=[
            merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True, key="timestamp"),
            structlog.processors.format_exc_info,
            structlog.processors.EventRenamer("message"),
            structlog.processors.JSONRenderer(ensure_ascii=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
    )
