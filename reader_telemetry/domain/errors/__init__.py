"""Domain errors for reader telemetry.

Provides specific exception classes for different failure scenarios.
All exceptions inherit from TelemetryError.
"""

from reader_telemetry.domain.errors.configuration import TelemetryConfigurationError
from reader_telemetry.domain.errors.lifecycle import (
    InvalidLifecycleTransitionError,
    MissingAnchorError,
)
from reader_telemetry.domain.errors.statement import (
    IncompleteStatementError,
    InvalidVerbError,
)

__all__: list[str] = [
    "IncompleteStatementError",
    "InvalidLifecycleTransitionError",
    "InvalidVerbError",
    "MissingAnchorError",
    "TelemetryConfigurationError",
]
