"""Unit tests for the telemetry error hierarchy."""

from reader_telemetry.domain.errors import (
    IncompleteStatementError,
    InvalidLifecycleTransitionError,
    InvalidVerbError,
    MissingAnchorError,
    TelemetryConfigurationError,
)
from reader_telemetry.domain.exceptions import TelemetryError


class TestErrorHierarchy:
    """All telemetry errors share one base class."""

    def test_all_inherit_from_telemetry_error(self) -> None:
        for error_cls in (
            IncompleteStatementError,
            InvalidLifecycleTransitionError,
            InvalidVerbError,
            MissingAnchorError,
            TelemetryConfigurationError,
        ):
            assert issubclass(error_cls, TelemetryError)

    def test_missing_anchor_message(self) -> None:
        error = MissingAnchorError("#positionSlider")
        assert error.selector == "#positionSlider"
        assert "#positionSlider" in str(error)

    def test_lifecycle_transition_message(self) -> None:
        error = InvalidLifecycleTransitionError("stopped", "active")
        assert error.current == "stopped"
        assert error.requested == "active"
        assert str(error) == "Invalid lifecycle transition: stopped -> active"
