"""Base exception classes for the reader telemetry domain layer."""


class TelemetryError(Exception):
    """Base exception for all telemetry errors.

    All telemetry-specific exceptions MUST inherit from this class so that
    hosts can contain every analytics failure with a single except clause.

    Subclasses:
    - InvalidVerbError
    - IncompleteStatementError
    - MissingAnchorError
    - InvalidLifecycleTransitionError
    - TelemetryConfigurationError
    """

    def __init__(self, message: str = "") -> None:
        """Initialize the exception with an optional message.

        Args:
            message: Human-readable error description.
        """
        super().__init__(message)
