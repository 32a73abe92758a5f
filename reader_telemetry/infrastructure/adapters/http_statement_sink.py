"""HTTP statement sink: delivers statements to the ingestion endpoint.

Each statement is wrapped in an IngestionEnvelope and POSTed as JSON over
HTTPS. Delivery is best-effort:

- 2xx: the raw response body is logged; it is not parsed or validated
- non-2xx or any transport error: one error line is logged and the
  statement is dropped

No retry, no backoff, no local queue. Nothing is ever raised to the
caller.
"""

from __future__ import annotations

import httpx
import structlog

from reader_telemetry.application.dtos.ingestion import IngestionEnvelope
from reader_telemetry.application.ports.statement_sink import StatementSinkProtocol
from reader_telemetry.domain.errors.configuration import TelemetryConfigurationError
from reader_telemetry.domain.models.statement import Statement

log = structlog.get_logger()

DEFAULT_TIMEOUT_SECONDS = 10.0

REQUEST_HEADERS: dict[str, str] = {
    "Accept": "application/json, text/plain",
    "Content-Type": "application/json;charset=UTF-8",
}


class HttpStatementSink(StatementSinkProtocol):
    """Statement sink backed by an HTTPS POST.

    Usage:
        sink = HttpStatementSink(
            endpoint="https://ingest.example.com/Analytics/IngestAction",
            api_key=config.api_key,
        )
        delivered = await sink.deliver(statement)
    """

    def __init__(
        self,
        endpoint: str,
        api_key: str,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        """Initialize the sink.

        Args:
            endpoint: Ingestion URL.
            api_key: Pre-shared key sent in every envelope.
            timeout_seconds: Per-request timeout.

        Raises:
            TelemetryConfigurationError: If api_key is empty.
        """
        if not api_key.strip():
            raise TelemetryConfigurationError(
                "HttpStatementSink requires a non-empty api_key"
            )
        self._endpoint = endpoint
        self._api_key = api_key
        self._timeout = timeout_seconds

    @property
    def endpoint(self) -> str:
        return self._endpoint

    async def deliver(self, statement: Statement) -> bool:
        """POST a statement to the ingestion endpoint.

        Args:
            statement: The completed statement.

        Returns:
            True if the endpoint answered 2xx, False otherwise.
        """
        try:
            payload = IngestionEnvelope.wrap(statement, self._api_key).to_wire()
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    self._endpoint,
                    json=payload,
                    headers=REQUEST_HEADERS,
                    timeout=self._timeout,
                )
        except Exception as e:
            log.error(
                "statement_delivery_failed",
                statement_id=statement.id,
                endpoint=self._endpoint,
                error=str(e),
            )
            return False

        if 200 <= response.status_code < 300:
            log.info(
                "statement_delivered",
                statement_id=statement.id,
                status_code=response.status_code,
                body=response.text,
            )
            return True

        log.error(
            "statement_delivery_failed",
            statement_id=statement.id,
            endpoint=self._endpoint,
            status_code=response.status_code,
        )
        return False
