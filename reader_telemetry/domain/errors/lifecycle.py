"""Analytics module lifecycle errors."""

from reader_telemetry.domain.exceptions import TelemetryError


class MissingAnchorError(TelemetryError):
    """Raised when a host anchor element cannot be located.

    The analytics module treats this as recoverable: the listener for
    that anchor is skipped and startup continues.
    """

    def __init__(self, selector: str) -> None:
        """Initialize with the selector that matched nothing.

        Args:
            selector: The element selector that was looked up.
        """
        self.selector = selector
        super().__init__(f"Anchor element not found: {selector}")


class InvalidLifecycleTransitionError(TelemetryError):
    """Raised when the module is driven through an illegal state change."""

    def __init__(self, current: str, requested: str) -> None:
        self.current = current
        self.requested = requested
        super().__init__(
            f"Invalid lifecycle transition: {current} -> {requested}"
        )
