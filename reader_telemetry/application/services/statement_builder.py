"""Statement builder.

Assembles fully-populated statements from the current host context: the
open publication, the session's actor identity, and a verb name/URI pair.

The builder never delivers anything. It logs each statement it creates
at debug level and returns it; the analytics module decides where the
statement goes.
"""

from __future__ import annotations

import threading
import time

import structlog
from uuid6 import uuid7

from reader_telemetry.domain.models.publication import Publication
from reader_telemetry.domain.models.statement import (
    Actor,
    Statement,
    StatementObject,
    Verb,
    validate_verb,
)

log = structlog.get_logger()

# Last timestamp issued in this process, shared by every builder
_last_timestamp = 0
_timestamp_lock = threading.Lock()


def generate_session_identity() -> str:
    """Generate an opaque identity for one reading session.

    Returns:
        A time-ordered UUIDv7 string.
    """
    return str(uuid7())


def _next_timestamp() -> int:
    """Return current epoch seconds, never lower than the last one issued."""
    global _last_timestamp
    with _timestamp_lock:
        now = max(int(time.time()), _last_timestamp)
        _last_timestamp = now
        return now


class StatementBuilder:
    """Builds statements for one publication and one session identity.

    Usage:
        builder = StatementBuilder(publication, actor_name=session_id)
        statement = builder.create_statement(
            "OpenBook", "https://ekitabu.com/verbs/OpenBook"
        )
    """

    def __init__(self, publication: Publication, actor_name: str | None = None) -> None:
        """Initialize the builder.

        Args:
            publication: The open publication, read-only.
            actor_name: Session identity to stamp on every statement.
                A fresh one is generated if omitted.
        """
        self._publication = publication
        self._actor = Actor(name=actor_name or generate_session_identity())

    @property
    def actor_name(self) -> str:
        return self._actor.name

    def create_statement(self, verb_name: str, verb_uri: str) -> Statement:
        """Create a statement for the open publication.

        Args:
            verb_name: Human-readable verb label, e.g. "OpenBook".
            verb_uri: URI naming the action type.

        Returns:
            A fully-populated, immutable Statement.

        Raises:
            InvalidVerbError: If either verb input is empty or the URI
                is malformed. Checked before the statement is built.
            IncompleteStatementError: If the publication has no title
                or identifier.
        """
        validate_verb(verb_name, verb_uri)

        statement = Statement(
            actor=self._actor,
            object=StatementObject(
                id=self._publication.identifier,
                name=self._publication.title,
            ),
            verb=Verb(id=verb_uri, display=verb_name),
            timestamp=str(_next_timestamp()),
        )

        log.debug(
            "statement_created",
            statement_id=statement.id,
            verb=verb_name,
            object_id=statement.object.id,
            timestamp=statement.timestamp,
        )
        return statement
