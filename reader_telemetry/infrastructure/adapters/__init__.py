"""Statement sink adapters."""

from reader_telemetry.infrastructure.adapters.http_statement_sink import (
    HttpStatementSink,
)
from reader_telemetry.infrastructure.adapters.logging_statement_sink import (
    LoggingStatementSink,
)

__all__ = ["HttpStatementSink", "LoggingStatementSink"]
