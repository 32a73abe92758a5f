"""
Pytest configuration and shared fixtures for reader telemetry tests.

Testing Standards:
- All async tests use pytest.mark.asyncio (auto mode enabled in pyproject.toml)
- Use AsyncMock for async function mocking
- Unit tests go in tests/unit/
- Integration tests go in tests/integration/
"""

import pytest
import structlog

from reader_telemetry.application.services.analytics_module import (
    POSITION_SLIDER_SELECTOR,
    TIMELINE_CONTAINER_SELECTOR,
    AnalyticsModuleConfig,
)
from reader_telemetry.domain.models.publication import Publication, PublicationMetadata
from reader_telemetry.infrastructure.stubs import (
    AnnotatorStub,
    DocumentStub,
    ElementStub,
    NavigatorStub,
    StatementSinkStub,
)


@pytest.fixture
def anyio_backend() -> str:
    """Use asyncio as the async backend."""
    return "asyncio"


@pytest.fixture
def project_version() -> str:
    """Provide the current project version for tests."""
    from reader_telemetry import __version__

    return __version__


@pytest.fixture(autouse=True)
def clear_log_context() -> None:
    """Drop session context bound by earlier tests."""
    structlog.contextvars.clear_contextvars()


@pytest.fixture
def publication() -> Publication:
    return Publication(
        metadata=PublicationMetadata(title="Moby Dick", identifier="urn:isbn:123")
    )


@pytest.fixture
def timeline() -> ElementStub:
    return ElementStub("container-view-timeline")


@pytest.fixture
def slider() -> ElementStub:
    return ElementStub("positionSlider")


@pytest.fixture
def document(timeline: ElementStub, slider: ElementStub) -> DocumentStub:
    return DocumentStub(
        {
            TIMELINE_CONTAINER_SELECTOR: timeline,
            POSITION_SLIDER_SELECTOR: slider,
        }
    )


@pytest.fixture
def sink() -> StatementSinkStub:
    return StatementSinkStub()


@pytest.fixture
def navigator() -> NavigatorStub:
    return NavigatorStub()


@pytest.fixture
def module_config(
    publication: Publication,
    document: DocumentStub,
    sink: StatementSinkStub,
    navigator: NavigatorStub,
) -> AnalyticsModuleConfig:
    """Analytics module configuration wired to in-memory stubs."""
    return AnalyticsModuleConfig(
        annotator=AnnotatorStub(),
        delegate=navigator,
        publication=publication,
        document=document,
        sink=sink,
    )
