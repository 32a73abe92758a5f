"""Configuration module for reader telemetry.

Available Configurations:
- TelemetryConfig: ingestion endpoint, API key and the delivery toggle
"""

from reader_telemetry.config.telemetry_config import (
    DEFAULT_INGESTION_ENDPOINT,
    DEFAULT_TIMEOUT_SECONDS,
    TelemetryConfig,
)

__all__ = [
    "DEFAULT_INGESTION_ENDPOINT",
    "DEFAULT_TIMEOUT_SECONDS",
    "TelemetryConfig",
]
