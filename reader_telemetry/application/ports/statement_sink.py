"""Statement sink port.

A sink accepts a completed Statement and reports whether it was taken.
Sinks let transport be swapped or disabled independently of statement
construction.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from reader_telemetry.domain.models.statement import Statement


class StatementSinkProtocol(Protocol):
    """Protocol for statement delivery.

    Implementations:
    - HttpStatementSink: POSTs to the ingestion endpoint
    - LoggingStatementSink: writes the statement to the structured log
    - StatementSinkStub: keeps statements in memory (tests)
    """

    async def deliver(self, statement: Statement) -> bool:
        """Deliver a statement.

        Implementations MUST NOT raise; failures are logged and reported
        through the return value.

        Args:
            statement: The completed statement.

        Returns:
            True if the statement was accepted, False otherwise.
        """
        ...
