"""In-memory stubs for development and testing.

These stand in for the hosting reader and the ingestion endpoint so the
analytics module can run outside a browser.
"""

from reader_telemetry.infrastructure.stubs.reader_host_stub import (
    AnnotatorStub,
    ClickEventStub,
    DocumentStub,
    ElementStub,
    NavigatorStub,
)
from reader_telemetry.infrastructure.stubs.statement_sink_stub import (
    StatementSinkStub,
)

__all__: list[str] = [
    "AnnotatorStub",
    "ClickEventStub",
    "DocumentStub",
    "ElementStub",
    "NavigatorStub",
    "StatementSinkStub",
]
