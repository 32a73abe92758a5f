"""Unit tests for the ingestion delivery envelope."""

from __future__ import annotations

import pydantic
import pytest

from reader_telemetry.application.dtos.ingestion import IngestionEnvelope
from reader_telemetry.application.services.statement_builder import StatementBuilder
from reader_telemetry.domain.models.publication import Publication


class TestIngestionEnvelope:
    """Tests for IngestionEnvelope."""

    def test_wrap_uses_endpoint_field_names(self, publication: Publication) -> None:
        """The body is {"apiKey": ..., "json": <statement>}."""
        statement = StatementBuilder(publication).create_statement(
            "OpenBook", "https://ekitabu.com/verbs/OpenBook"
        )

        body = IngestionEnvelope.wrap(statement, "test-key").to_wire()

        assert set(body) == {"apiKey", "json"}
        assert body["apiKey"] == "test-key"
        assert body["json"] == statement.to_dict()

    def test_rejects_empty_api_key(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            IngestionEnvelope(apiKey="", json={"id": "abc"})

    def test_rejects_payload_without_id(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            IngestionEnvelope(apiKey="key", json={})

    def test_is_frozen(self) -> None:
        envelope = IngestionEnvelope(apiKey="key", json={"id": "abc"})
        with pytest.raises(pydantic.ValidationError):
            envelope.api_key = "other"  # type: ignore[misc]
