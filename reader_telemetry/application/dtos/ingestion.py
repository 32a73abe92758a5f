"""Delivery envelope for the ingestion endpoint.

The endpoint expects the statement wrapped together with the pre-shared
API key:

    {"apiKey": "<key>", "json": {<statement>}}
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from reader_telemetry.domain.models.statement import Statement


class IngestionEnvelope(BaseModel):
    """Envelope POSTed to the ingestion endpoint.

    Attributes:
        api_key: Pre-shared key identifying this reader deployment.
        statement: The statement payload, in wire form.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    api_key: str = Field(alias="apiKey", min_length=1)
    statement: dict[str, Any] = Field(alias="json")

    @field_validator("statement")
    @classmethod
    def statement_has_id(cls, v: dict[str, Any]) -> dict[str, Any]:
        """Reject payloads that are not serialized statements."""
        if not v.get("id"):
            raise ValueError("statement payload must carry an id")
        return v

    @classmethod
    def wrap(cls, statement: Statement, api_key: str) -> IngestionEnvelope:
        """Build an envelope around a completed statement.

        Args:
            statement: The statement to deliver.
            api_key: Pre-shared ingestion key.

        Returns:
            The envelope, ready for serialization.
        """
        return cls(apiKey=api_key, json=statement.to_dict())

    def to_wire(self) -> dict[str, Any]:
        """Return the request body with the endpoint's field names."""
        return self.model_dump(by_alias=True)
