"""Bootstrap wiring for the analytics module.

Resolves telemetry configuration, picks the statement sink and starts
the module for a host reader:

    module = await create_analytics_module(
        annotator=annotator,
        delegate=navigator,
        publication=publication,
        document=document,
    )
"""

from __future__ import annotations

from typing import Any

import structlog
from dotenv import load_dotenv

from reader_telemetry.application.ports.reader_host import (
    AnnotatorProtocol,
    DocumentProtocol,
    ReaderNavigatorProtocol,
)
from reader_telemetry.application.ports.statement_sink import StatementSinkProtocol
from reader_telemetry.application.services.analytics_module import (
    AnalyticsModule,
    AnalyticsModuleConfig,
)
from reader_telemetry.config.telemetry_config import TelemetryConfig
from reader_telemetry.domain.models.publication import Publication
from reader_telemetry.infrastructure.adapters.http_statement_sink import (
    HttpStatementSink,
)
from reader_telemetry.infrastructure.adapters.logging_statement_sink import (
    LoggingStatementSink,
)

log = structlog.get_logger()


def load_telemetry_config() -> TelemetryConfig:
    """Load telemetry configuration from the environment and a .env file.

    Variables already present in the environment win over .env values.

    Raises:
        TelemetryConfigurationError: If the configuration is incomplete.
    """
    load_dotenv()
    return TelemetryConfig.from_environment()


def create_statement_sink(config: TelemetryConfig) -> StatementSinkProtocol:
    """Pick the statement sink for a configuration.

    Args:
        config: Resolved telemetry configuration.

    Returns:
        HttpStatementSink when delivery is enabled, LoggingStatementSink
        otherwise.
    """
    if config.telemetry_enabled:
        log.info("telemetry_delivery_enabled", endpoint=config.endpoint)
        return HttpStatementSink(
            endpoint=config.endpoint,
            api_key=config.api_key,
            timeout_seconds=config.timeout_seconds,
        )

    log.info("telemetry_delivery_disabled")
    return LoggingStatementSink()


async def create_analytics_module(
    *,
    annotator: AnnotatorProtocol,
    delegate: ReaderNavigatorProtocol,
    publication: Publication,
    document: DocumentProtocol,
    header_menu: Any | None = None,
    hide_layer: bool = False,
    telemetry_config: TelemetryConfig | None = None,
    sink: StatementSinkProtocol | None = None,
) -> AnalyticsModule:
    """Assemble and start an analytics module.

    Args:
        annotator: Annotation store reference.
        delegate: Host navigator.
        publication: The open publication.
        document: Host page holding the anchors.
        header_menu: Optional header element.
        hide_layer: Optional display flag.
        telemetry_config: Configuration; loaded from the environment if
            omitted. Ignored when sink is given.
        sink: Explicit statement sink, overriding the configured one.

    Returns:
        The started module.
    """
    if sink is None:
        config = telemetry_config or load_telemetry_config()
        sink = create_statement_sink(config)

    return await AnalyticsModule.create(
        AnalyticsModuleConfig(
            annotator=annotator,
            delegate=delegate,
            publication=publication,
            document=document,
            sink=sink,
            header_menu=header_menu,
            hide_layer=hide_layer,
        )
    )
