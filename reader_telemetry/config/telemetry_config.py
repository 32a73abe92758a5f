"""Telemetry delivery configuration.

Resolved once at startup. The API key is always injected from the
environment (or a .env file loaded by the bootstrap layer).

Environment Variables:
- READER_TELEMETRY_ENABLED: "true"/"false"; whether statements go to the
  network. Required, there is no default.
- READER_TELEMETRY_ENDPOINT: Ingestion URL, must be https
  (default: https://localhost:5001/Analytics/IngestAction)
- READER_TELEMETRY_API_KEY: Pre-shared ingestion key. Required when
  delivery is enabled.
- READER_TELEMETRY_TIMEOUT: Request timeout in seconds (default: 10.0)
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from urllib.parse import urlparse

from reader_telemetry.domain.errors.configuration import TelemetryConfigurationError

DEFAULT_INGESTION_ENDPOINT = "https://localhost:5001/Analytics/IngestAction"
DEFAULT_TIMEOUT_SECONDS = 10.0

ENABLED_ENV = "READER_TELEMETRY_ENABLED"
ENDPOINT_ENV = "READER_TELEMETRY_ENDPOINT"
API_KEY_ENV = "READER_TELEMETRY_API_KEY"
TIMEOUT_ENV = "READER_TELEMETRY_TIMEOUT"

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


def _get_bool_env(key: str) -> bool:
    """Get a required boolean environment variable.

    Args:
        key: Environment variable name.

    Returns:
        Parsed boolean value.

    Raises:
        TelemetryConfigurationError: If unset or not a recognized boolean.
    """
    value = os.environ.get(key)
    if value is None:
        raise TelemetryConfigurationError(
            f"{key} must be set explicitly to true or false"
        )
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise TelemetryConfigurationError(f"{key} is not a boolean: '{value}'")


def _get_float_env(key: str, default: float) -> float:
    """Get float environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set or invalid.

    Returns:
        Parsed float value or default.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        return default


@dataclass(frozen=True)
class TelemetryConfig:
    """Configuration for statement delivery.

    Attributes:
        telemetry_enabled: Whether statements are POSTed to the endpoint.
                          When False they are only written to the log.
        endpoint: Ingestion URL. Must use https.
        api_key: Pre-shared key sent with every statement. Required when
                 delivery is enabled. Hidden from repr.
        timeout_seconds: Per-request timeout.
    """

    telemetry_enabled: bool
    endpoint: str = DEFAULT_INGESTION_ENDPOINT
    api_key: str = field(default="", repr=False)
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS

    def __post_init__(self) -> None:
        """Validate configuration values."""
        parsed = urlparse(self.endpoint)
        if parsed.scheme != "https" or not parsed.netloc:
            raise TelemetryConfigurationError(
                f"endpoint must be an https URL, got '{self.endpoint}'"
            )
        if self.timeout_seconds <= 0:
            raise TelemetryConfigurationError(
                f"timeout_seconds must be positive, got {self.timeout_seconds}"
            )
        if self.telemetry_enabled and not self.api_key:
            raise TelemetryConfigurationError(
                f"api_key is required when telemetry is enabled (set {API_KEY_ENV})"
            )

    @classmethod
    def from_environment(cls) -> TelemetryConfig:
        """Create config from environment variables.

        Returns:
            TelemetryConfig with values from the environment.

        Raises:
            TelemetryConfigurationError: If READER_TELEMETRY_ENABLED is
                missing, or any value fails validation.
        """
        return cls(
            telemetry_enabled=_get_bool_env(ENABLED_ENV),
            endpoint=os.environ.get(ENDPOINT_ENV, DEFAULT_INGESTION_ENDPOINT),
            api_key=os.environ.get(API_KEY_ENV, ""),
            timeout_seconds=_get_float_env(TIMEOUT_ENV, DEFAULT_TIMEOUT_SECONDS),
        )
