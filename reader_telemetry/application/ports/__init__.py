"""Ports (interfaces) for the application layer.

Ports describe what the analytics module needs from the outside world:
a place to send statements, and the small slice of the reader host it
listens to.
"""

from reader_telemetry.application.ports.reader_host import (
    AnnotatorProtocol,
    ClickHandler,
    DocumentProtocol,
    EventTargetProtocol,
    InteractionEventProtocol,
    ReaderNavigatorProtocol,
)
from reader_telemetry.application.ports.statement_sink import StatementSinkProtocol

__all__: list[str] = [
    "AnnotatorProtocol",
    "ClickHandler",
    "DocumentProtocol",
    "EventTargetProtocol",
    "InteractionEventProtocol",
    "ReaderNavigatorProtocol",
    "StatementSinkProtocol",
]
