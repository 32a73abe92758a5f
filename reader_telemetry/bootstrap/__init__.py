"""Bootstrap wiring: logging setup and analytics module assembly."""

from reader_telemetry.bootstrap.logging import configure_structlog
from reader_telemetry.bootstrap.telemetry import (
    create_analytics_module,
    create_statement_sink,
    load_telemetry_config,
)

__all__ = [
    "configure_structlog",
    "create_analytics_module",
    "create_statement_sink",
    "load_telemetry_config",
]
