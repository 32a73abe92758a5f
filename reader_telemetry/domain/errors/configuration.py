"""Configuration errors raised while resolving telemetry settings."""

from reader_telemetry.domain.exceptions import TelemetryError


class TelemetryConfigurationError(TelemetryError):
    """Raised when telemetry configuration is missing or invalid.

    Surfaced at startup, before any statement is built.
    """

    pass
