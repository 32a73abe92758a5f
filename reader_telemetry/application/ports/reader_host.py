"""Reader host ports.

The analytics module touches the hosting reader only through these
narrow interfaces: a document to look anchors up in, elements that
accept click listeners, the click events themselves, the navigator it
registers with, and the annotation store it borrows.
"""

from __future__ import annotations

from typing import Any, Callable, Protocol


class InteractionEventProtocol(Protocol):
    """A user interaction event delivered to a listener."""

    def prevent_default(self) -> None:
        """Cancel the host's default action for this event."""
        ...

    def stop_propagation(self) -> None:
        """Stop the event from reaching ancestor elements."""
        ...


ClickHandler = Callable[[InteractionEventProtocol], None]


class EventTargetProtocol(Protocol):
    """An element that listeners can be attached to."""

    def add_event_listener(self, event_type: str, handler: ClickHandler) -> None:
        ...

    def remove_event_listener(self, event_type: str, handler: ClickHandler) -> None:
        ...


class DocumentProtocol(Protocol):
    """The host page the anchors live in."""

    def query_selector(self, selector: str) -> EventTargetProtocol | None:
        """Find the first element matching a selector.

        Args:
            selector: Element selector, e.g. "#positionSlider".

        Returns:
            The element, or None if nothing matches.
        """
        ...


class ReaderNavigatorProtocol(Protocol):
    """The host navigator; the module registers itself as its analytics handler."""

    analytics_module: Any


class AnnotatorProtocol(Protocol):
    """Annotation store reference, borrowed read-only.

    The module only holds on to it; no operation is called on it yet.
    """
