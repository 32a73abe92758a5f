"""Reader host stubs: a minimal page, its elements and click events.

Listeners are invoked synchronously by dispatch_event(), the way a
browser runs click handlers on the UI thread.

Usage:
    slider = ElementStub("positionSlider")
    document = DocumentStub({"#positionSlider": slider})

    event = ClickEventStub()
    slider.dispatch_event("click", event)
    assert event.default_prevented
"""

from __future__ import annotations

from typing import Any

from reader_telemetry.application.ports.reader_host import (
    ClickHandler,
    EventTargetProtocol,
    InteractionEventProtocol,
)


class ClickEventStub(InteractionEventProtocol):
    """Click event that records what listeners did to it."""

    def __init__(self) -> None:
        self.default_prevented = False
        self.propagation_stopped = False

    def prevent_default(self) -> None:
        self.default_prevented = True

    def stop_propagation(self) -> None:
        self.propagation_stopped = True


class ElementStub(EventTargetProtocol):
    """Element with a listener registry keyed by event type."""

    def __init__(self, element_id: str = "") -> None:
        self.element_id = element_id
        self._listeners: dict[str, list[ClickHandler]] = {}

    def add_event_listener(self, event_type: str, handler: ClickHandler) -> None:
        handlers = self._listeners.setdefault(event_type, [])
        if handler not in handlers:
            handlers.append(handler)

    def remove_event_listener(self, event_type: str, handler: ClickHandler) -> None:
        handlers = self._listeners.get(event_type, [])
        if handler in handlers:
            handlers.remove(handler)

    def listener_count(self, event_type: str) -> int:
        return len(self._listeners.get(event_type, []))

    def dispatch_event(self, event_type: str, event: InteractionEventProtocol) -> int:
        """Invoke every listener registered for the event type.

        Args:
            event_type: Event type, e.g. "click".
            event: The event passed to each listener.

        Returns:
            Number of listeners invoked.
        """
        handlers = list(self._listeners.get(event_type, []))
        for handler in handlers:
            handler(event)
        return len(handlers)


class DocumentStub:
    """Page whose elements are looked up by exact selector."""

    def __init__(self, elements: dict[str, ElementStub] | None = None) -> None:
        self._elements = dict(elements or {})
        self.queries: list[str] = []

    def query_selector(self, selector: str) -> ElementStub | None:
        self.queries.append(selector)
        return self._elements.get(selector)


class NavigatorStub:
    """Host navigator; records the analytics module registered on it."""

    def __init__(self) -> None:
        self.analytics_module: Any = None


class AnnotatorStub:
    """Opaque annotation store handed to the module."""
