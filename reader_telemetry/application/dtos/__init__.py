"""Application-layer DTOs."""

from reader_telemetry.application.dtos.ingestion import IngestionEnvelope

__all__ = ["IngestionEnvelope"]
