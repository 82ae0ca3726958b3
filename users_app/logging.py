from __future__ import annotations

import logging
from typing import Any

import structlog

# Header names whose values must never reach the logs.
SENSITIVE_HEADERS = frozenset({"authorization", "cookie", "proxy-authorization", "set-cookie"})


def _get_log_level(level: str) -> int:
    return getattr(logging, level.upper(), logging.INFO)


def setup_logging(
    level: str = "INFO",
    log_format: str = "json",
) -> None:
    """Configure structlog for JSON structured logging.

    - JSON lines with ISO/UTC timestamp, level, event, and bound fields
    - Includes contextvars so request_id and others flow automatically
    - Formats exception info in JSON if exc_info is attached
    - Routes stdlib/uvicorn records through the same renderer
    """

    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.format_exc_info,
    ]

    structlog.configure(
        processors=shared_processors
        + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    if log_format == "console":
        renderer = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer()

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler()
    handler.setFormatter(formatter)

    logging.basicConfig(
        level=_get_log_level(level),
        handlers=[handler],
        force=True,
    )


def sanitize_headers(headers: Any) -> dict[str, str]:
    """Return request headers as a plain dict without credential-bearing entries."""
    return {
        key: value for key, value in headers.items() if key.lower() not in SENSITIVE_HEADERS
    }
