"""Unit tests for HttpStatementSink.

Tests envelope construction, request headers and best-effort failure
handling against a mocked httpx.AsyncClient.
"""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from reader_telemetry.application.services.statement_builder import StatementBuilder
from reader_telemetry.domain.errors.configuration import TelemetryConfigurationError
from reader_telemetry.domain.models.publication import Publication
from reader_telemetry.domain.models.statement import Statement
from reader_telemetry.infrastructure.adapters.http_statement_sink import (
    DEFAULT_TIMEOUT_SECONDS,
    REQUEST_HEADERS,
    HttpStatementSink,
)

ENDPOINT = "https://ingest.example.com/Analytics/IngestAction"
CLIENT_PATH = "reader_telemetry.infrastructure.adapters.http_statement_sink.httpx.AsyncClient"
ENVELOPE_PATH = "reader_telemetry.infrastructure.adapters.http_statement_sink.IngestionEnvelope"
LOG_PATH = "reader_telemetry.infrastructure.adapters.http_statement_sink.log"


@pytest.fixture
def statement(publication: Publication) -> Statement:
    return StatementBuilder(publication).create_statement(
        "OpenBook", "https://ekitabu.com/verbs/OpenBook"
    )


def _response(status_code: int, text: str = "") -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.text = text
    return response


class TestHttpStatementSinkInit:
    """Tests for sink construction."""

    def test_defaults(self) -> None:
        sink = HttpStatementSink(endpoint=ENDPOINT, api_key="key")
        assert sink.endpoint == ENDPOINT
        assert DEFAULT_TIMEOUT_SECONDS == 10.0

    @pytest.mark.parametrize("api_key", ["", "   "])
    def test_empty_api_key_rejected(self, api_key: str) -> None:
        with pytest.raises(TelemetryConfigurationError, match="api_key"):
            HttpStatementSink(endpoint=ENDPOINT, api_key=api_key)


class TestDeliver:
    """Tests for HttpStatementSink.deliver."""

    @pytest.mark.asyncio
    async def test_posts_envelope(self, statement: Statement) -> None:
        """The body wraps the statement with the API key."""
        sink = HttpStatementSink(endpoint=ENDPOINT, api_key="test-key", timeout_seconds=3.0)

        with patch(CLIENT_PATH) as mock_client:
            post = AsyncMock(return_value=_response(200, "ok"))
            mock_client.return_value.__aenter__.return_value.post = post

            result = await sink.deliver(statement)

        assert result is True
        post.assert_awaited_once()
        args, kwargs = post.call_args
        assert args[0] == ENDPOINT
        assert kwargs["json"] == {"apiKey": "test-key", "json": statement.to_dict()}
        assert kwargs["headers"] == REQUEST_HEADERS
        assert kwargs["timeout"] == 3.0

    def test_headers(self) -> None:
        assert REQUEST_HEADERS["Content-Type"] == "application/json;charset=UTF-8"
        assert REQUEST_HEADERS["Accept"] == "application/json, text/plain"

    @pytest.mark.asyncio
    async def test_success_logs_raw_body(self, statement: Statement) -> None:
        sink = HttpStatementSink(endpoint=ENDPOINT, api_key="key")

        with patch(CLIENT_PATH) as mock_client, patch(LOG_PATH) as mock_log:
            mock_client.return_value.__aenter__.return_value.post = AsyncMock(
                return_value=_response(201, "not even json")
            )

            result = await sink.deliver(statement)

        assert result is True
        mock_log.info.assert_called_once()
        assert mock_log.info.call_args.kwargs["body"] == "not even json"
        mock_log.error.assert_not_called()

    @pytest.mark.asyncio
    async def test_rejected_send_logs_one_error(self, statement: Statement) -> None:
        """A network failure is logged once and swallowed."""
        sink = HttpStatementSink(endpoint=ENDPOINT, api_key="key")

        with patch(CLIENT_PATH) as mock_client, patch(LOG_PATH) as mock_log:
            mock_client.return_value.__aenter__.return_value.post = AsyncMock(
                side_effect=httpx.ConnectError("Connection refused")
            )

            result = await sink.deliver(statement)

        assert result is False
        mock_log.error.assert_called_once()
        assert mock_log.error.call_args.args[0] == "statement_delivery_failed"
        assert "Connection refused" in mock_log.error.call_args.kwargs["error"]

    @pytest.mark.asyncio
    async def test_unexpected_exception_swallowed(self, statement: Statement) -> None:
        sink = HttpStatementSink(endpoint=ENDPOINT, api_key="key")

        with patch(CLIENT_PATH) as mock_client, patch(LOG_PATH) as mock_log:
            mock_client.return_value.__aenter__.return_value.post = AsyncMock(
                side_effect=Exception("boom")
            )

            result = await sink.deliver(statement)

        assert result is False
        mock_log.error.assert_called_once()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status_code", [301, 400, 401, 500, 503])
    async def test_non_2xx_logs_one_error(
        self, statement: Statement, status_code: int
    ) -> None:
        sink = HttpStatementSink(endpoint=ENDPOINT, api_key="key")

        with patch(CLIENT_PATH) as mock_client, patch(LOG_PATH) as mock_log:
            mock_client.return_value.__aenter__.return_value.post = AsyncMock(
                return_value=_response(status_code, "nope")
            )

            result = await sink.deliver(statement)

        assert result is False
        mock_log.error.assert_called_once()
        assert mock_log.error.call_args.kwargs["status_code"] == status_code
        mock_log.info.assert_not_called()

    @pytest.mark.asyncio
    async def test_envelope_failure_logs_one_error(self, statement: Statement) -> None:
        """A statement that cannot be wrapped is dropped, not raised."""
        sink = HttpStatementSink(endpoint=ENDPOINT, api_key="key")

        with patch(ENVELOPE_PATH) as mock_envelope, patch(
            CLIENT_PATH
        ) as mock_client, patch(LOG_PATH) as mock_log:
            mock_envelope.wrap.side_effect = ValueError("statement has no id")

            result = await sink.deliver(statement)

        assert result is False
        mock_client.assert_not_called()
        mock_log.error.assert_called_once()
        assert mock_log.error.call_args.args[0] == "statement_delivery_failed"
        assert "statement has no id" in mock_log.error.call_args.kwargs["error"]
