"""Statement construction errors.

Raised before a statement exists, so a malformed statement is never
handed to a sink.
"""

from reader_telemetry.domain.exceptions import TelemetryError


class InvalidVerbError(TelemetryError, ValueError):
    """Raised when a verb label or verb URI is empty or malformed."""

    def __init__(self, message: str = "Invalid verb", verb_uri: str = "") -> None:
        """Initialize with the offending verb URI, if any.

        Args:
            message: Error description.
            verb_uri: The rejected verb URI.
        """
        self.verb_uri = verb_uri
        super().__init__(message)


class IncompleteStatementError(TelemetryError, ValueError):
    """Raised when a statement is missing its object id or name."""

    def __init__(self, field_name: str) -> None:
        self.field_name = field_name
        super().__init__(f"Statement object.{field_name} must be populated")
