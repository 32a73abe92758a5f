"""Statement sink stub.

Keeps delivered statements in memory and can be told to reject or to
raise, so callers' failure handling can be exercised.

Usage:
    sink = StatementSinkStub()
    await sink.deliver(statement)
    assert sink.delivered == [statement]

    failing = StatementSinkStub(accept=False)
    exploding = StatementSinkStub(error=ConnectionError("refused"))
"""

from __future__ import annotations

from reader_telemetry.application.ports.statement_sink import StatementSinkProtocol
from reader_telemetry.domain.models.statement import Statement


class StatementSinkStub(StatementSinkProtocol):
    """In-memory statement sink.

    Attributes:
        delivered: Statements accepted, in delivery order.
        rejected: Statements refused (accept=False).
        attempts: Number of deliver() calls, including failures.
    """

    def __init__(self, accept: bool = True, error: Exception | None = None) -> None:
        self._accept = accept
        self._error = error
        self.delivered: list[Statement] = []
        self.rejected: list[Statement] = []
        self.attempts = 0

    async def deliver(self, statement: Statement) -> bool:
        self.attempts += 1
        if self._error is not None:
            raise self._error
        if not self._accept:
            self.rejected.append(statement)
            return False
        self.delivered.append(statement)
        return True

    def clear(self) -> None:
        """Reset recorded statements (for test cleanup)."""
        self.delivered.clear()
        self.rejected.clear()
        self.attempts = 0
