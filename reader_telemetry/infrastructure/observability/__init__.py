"""Observability infrastructure for structured logging.

Usage:
    from reader_telemetry.infrastructure.observability import configure_structlog

    # At startup
    configure_structlog(environment="production")

    # Anywhere
    log = structlog.get_logger()
    log.info("statement_delivered", statement_id=...)

Every entry logged while an analytics session is active carries the
session's `reading_session_id`, bound by the analytics module through
structlog's contextvars.
"""

from reader_telemetry.infrastructure.observability.logging import (
    DEFAULT_LOG_LEVEL,
    LOG_LEVEL_ENV,
    configure_structlog,
    get_logger_for_component,
)

__all__: list[str] = [
    "DEFAULT_LOG_LEVEL",
    "LOG_LEVEL_ENV",
    "configure_structlog",
    "get_logger_for_component",
]
