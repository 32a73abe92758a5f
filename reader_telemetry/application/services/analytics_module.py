"""Analytics module: the pluggable reader feature that emits telemetry.

The hosting reader drives every feature module through the same
contract:

    module = await AnalyticsModule.create(config)   # constructs + starts
    await module.handle_resize()
    await module.push(locator)
    await module.stop()

Lifecycle:
    UNINITIALIZED -> STARTING -> ACTIVE -> STOPPED

On start the module claims two anchors in the host page (the timeline
container and the position slider), attaches a click listener to each,
enters ACTIVE with a session identity that is reused for every statement
of the session, and emits one "OpenBook" statement.

Delivery is scheduled on the running event loop and never awaited by the
lifecycle methods, so start() and push() return promptly whatever the
ingestion endpoint does. Telemetry failures are logged, never raised to
the host.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Any

import structlog

from reader_telemetry.application.ports.reader_host import (
    AnnotatorProtocol,
    DocumentProtocol,
    EventTargetProtocol,
    InteractionEventProtocol,
    ReaderNavigatorProtocol,
)
from reader_telemetry.application.ports.statement_sink import StatementSinkProtocol
from reader_telemetry.application.services.statement_builder import (
    StatementBuilder,
    generate_session_identity,
)
from reader_telemetry.domain.errors.lifecycle import (
    InvalidLifecycleTransitionError,
    MissingAnchorError,
)
from reader_telemetry.domain.exceptions import TelemetryError
from reader_telemetry.domain.models.module_state import ModuleState, can_transition
from reader_telemetry.domain.models.publication import Locator, Publication
from reader_telemetry.domain.models.statement import OPEN_BOOK, Statement

log = structlog.get_logger()

TIMELINE_CONTAINER_SELECTOR = "#container-view-timeline"
POSITION_SLIDER_SELECTOR = "#positionSlider"
ANCHOR_SELECTORS: tuple[str, ...] = (
    TIMELINE_CONTAINER_SELECTOR,
    POSITION_SLIDER_SELECTOR,
)

CLICK_EVENT = "click"


@dataclass
class AnalyticsModuleConfig:
    """Configuration handed to AnalyticsModule.create().

    Attributes:
        annotator: Annotation store reference (borrowed, read-only).
        delegate: Host navigator; the module registers itself on it.
        publication: The open publication (borrowed, read-only).
        document: Host page used to look the anchors up.
        sink: Where built statements are delivered.
        header_menu: Optional header element.
        hide_layer: Optional display flag.
    """

    annotator: AnnotatorProtocol
    delegate: ReaderNavigatorProtocol
    publication: Publication
    document: DocumentProtocol
    sink: StatementSinkProtocol
    header_menu: Any | None = None
    hide_layer: bool = False


class AnalyticsModule:
    """Lifecycle manager for reader interaction telemetry.

    Owns its anchor references and listener bindings exclusively. The
    publication and annotator are borrowed from the host and never
    mutated.
    """

    def __init__(self, config: AnalyticsModuleConfig) -> None:
        """Initialize the module without starting it.

        Hosts should use create() instead.

        Args:
            config: Module configuration.
        """
        self._annotator = config.annotator
        self._delegate = config.delegate
        self._publication = config.publication
        self._document = config.document
        self._sink = config.sink
        self._header_menu = config.header_menu
        self._hide_layer = config.hide_layer

        self._state = ModuleState.UNINITIALIZED
        self._session_identity: str | None = None
        self._builder: StatementBuilder | None = None
        self._anchors: dict[str, EventTargetProtocol] = {}
        self._click_handler = self.handle_slider
        self._pending: set[asyncio.Task[bool]] = set()

    @classmethod
    async def create(cls, config: AnalyticsModuleConfig) -> AnalyticsModule:
        """Construct and start an analytics module.

        Missing anchors do not fail creation; the module starts without
        the corresponding listener.

        Args:
            config: Module configuration.

        Returns:
            The started module, registered on config.delegate.
        """
        module = cls(config)
        await module.start()
        return module

    # ------------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------------

    @property
    def state(self) -> ModuleState:
        return self._state

    @property
    def session_identity(self) -> str | None:
        """Actor identity of the current session, set on entering ACTIVE."""
        return self._session_identity

    @property
    def attached_anchors(self) -> tuple[str, ...]:
        """Selectors of the anchors that currently carry a listener."""
        return tuple(self._anchors)

    @property
    def pending_deliveries(self) -> int:
        return len(self._pending)

    @property
    def annotator(self) -> AnnotatorProtocol:
        return self._annotator

    @property
    def publication(self) -> Publication:
        return self._publication

    @property
    def header_menu(self) -> Any | None:
        return self._header_menu

    @property
    def hide_layer(self) -> bool:
        return self._hide_layer

    # ------------------------------------------------------------------
    # Host module contract
    # ------------------------------------------------------------------

    async def start(self) -> None:
        """Claim the anchors, activate the session and emit OpenBook."""
        self._transition(ModuleState.STARTING)
        self._delegate.analytics_module = self

        for selector in ANCHOR_SELECTORS:
            try:
                element = self._find_anchor(selector)
            except MissingAnchorError as e:
                log.warning(
                    "analytics_anchor_missing",
                    selector=e.selector,
                    detail="listener not attached",
                )
                continue
            element.add_event_listener(CLICK_EVENT, self._click_handler)
            self._anchors[selector] = element

        self._activate()

        verb_name, verb_uri = OPEN_BOOK
        try:
            self.emit(verb_name, verb_uri)
        except TelemetryError as e:
            log.error("open_statement_failed", error=str(e))

    async def stop(self) -> None:
        """Detach both click listeners and enter STOPPED.

        Only an ACTIVE module changes state. Otherwise stop() detaches
        whatever a failed start() left attached and logs the call.
        """
        if self._state is not ModuleState.ACTIVE:
            log.debug("analytics_module_stop_skipped", state=self._state.value)
            self._detach_listeners()
            return

        log.info("analytics_module_stop", anchors=list(self._anchors))
        self._detach_listeners()
        self._transition(ModuleState.STOPPED)

        # Another module in this context may own the bound session
        bound = structlog.contextvars.get_contextvars().get("reading_session_id")
        if bound == self._session_identity:
            structlog.contextvars.unbind_contextvars("reading_session_id")

    async def handle_resize(self) -> None:
        await self.setup()

    async def setup(self) -> None:
        """Re-layout hook; nothing to lay out yet."""
        log.debug("analytics_module_setup", state=self._state.value)

    async def push(self, locator: Locator) -> None:
        """Accept a reading-position update from the host.

        Only surfaced to the diagnostic log for now. Never raises.

        Args:
            locator: The new reading position.
        """
        # TODO: emit a position-changed statement once the verb URI is agreed with the ingestion side
        log.debug(
            "reading_position_pushed",
            href=getattr(locator, "href", None),
            display_info=getattr(locator, "display_info", None),
            state=self._state.value,
        )

    # ------------------------------------------------------------------
    # Interaction handling
    # ------------------------------------------------------------------

    def handle_slider(self, event: InteractionEventProtocol) -> None:
        """Click handler shared by the timeline container and the slider.

        Swallows the click so the host does not act on it. This is where
        position-scrubbed statements will be emitted.
        """
        event.prevent_default()
        event.stop_propagation()

    def emit(self, verb_name: str, verb_uri: str) -> Statement:
        """Build a statement and schedule its delivery.

        Delivery runs in the background; this method does not wait for
        it.

        Args:
            verb_name: Human-readable verb label.
            verb_uri: URI naming the action type.

        Returns:
            The built statement.

        Raises:
            InvalidLifecycleTransitionError: If the module is not ACTIVE.
            InvalidVerbError: If the verb inputs are malformed.
        """
        if self._builder is None or self._state is not ModuleState.ACTIVE:
            raise InvalidLifecycleTransitionError(self._state.value, "emit")

        statement = self._builder.create_statement(verb_name, verb_uri)
        self._schedule_delivery(statement)
        return statement

    async def wait_for_pending_deliveries(self) -> None:
        """Wait until every scheduled delivery has finished."""
        if self._pending:
            await asyncio.gather(*self._pending, return_exceptions=True)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _transition(self, requested: ModuleState) -> None:
        if not can_transition(self._state, requested):
            raise InvalidLifecycleTransitionError(self._state.value, requested.value)
        log.debug(
            "analytics_module_transition",
            from_state=self._state.value,
            to_state=requested.value,
        )
        self._state = requested

    def _activate(self) -> None:
        self._session_identity = generate_session_identity()
        self._builder = StatementBuilder(
            self._publication, actor_name=self._session_identity
        )
        structlog.contextvars.bind_contextvars(
            reading_session_id=self._session_identity
        )
        self._transition(ModuleState.ACTIVE)
        log.info(
            "analytics_module_active",
            publication_id=self._publication.identifier,
            anchors=list(self._anchors),
        )

    def _detach_listeners(self) -> None:
        for element in self._anchors.values():
            element.remove_event_listener(CLICK_EVENT, self._click_handler)
        self._anchors.clear()

    def _find_anchor(self, selector: str) -> EventTargetProtocol:
        element = self._document.query_selector(selector)
        if element is None:
            raise MissingAnchorError(selector)
        return element

    def _schedule_delivery(self, statement: Statement) -> None:
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            log.warning(
                "statement_dropped",
                statement_id=statement.id,
                reason="no running event loop",
            )
            return
        task = loop.create_task(self._deliver(statement))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def _deliver(self, statement: Statement) -> bool:
        try:
            return await self._sink.deliver(statement)
        except Exception as e:
            log.error(
                "statement_sink_error",
                statement_id=statement.id,
                error=str(e),
            )
            return False
