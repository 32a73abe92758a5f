"""Diagnostic statement sink.

Used when network delivery is switched off: every statement is written to
the structured log in wire form and reported as accepted.
"""

from __future__ import annotations

from reader_telemetry.application.ports.statement_sink import StatementSinkProtocol
from reader_telemetry.domain.models.statement import Statement
from reader_telemetry.infrastructure.observability.logging import (
    get_logger_for_component,
)


class LoggingStatementSink(StatementSinkProtocol):
    """Writes statements to the log instead of the network."""

    def __init__(self) -> None:
        self._log = get_logger_for_component("logging_statement_sink")

    async def deliver(self, statement: Statement) -> bool:
        self._log.info(
            "statement_logged",
            statement_id=statement.id,
            statement=statement.to_dict(),
        )
        return True
