"""Application services for reader telemetry."""

from reader_telemetry.application.services.analytics_module import (
    ANCHOR_SELECTORS,
    POSITION_SLIDER_SELECTOR,
    TIMELINE_CONTAINER_SELECTOR,
    AnalyticsModule,
    AnalyticsModuleConfig,
)
from reader_telemetry.application.services.statement_builder import (
    StatementBuilder,
    generate_session_identity,
)

__all__ = [
    "ANCHOR_SELECTORS",
    "POSITION_SLIDER_SELECTOR",
    "TIMELINE_CONTAINER_SELECTOR",
    "AnalyticsModule",
    "AnalyticsModuleConfig",
    "StatementBuilder",
    "generate_session_identity",
]
