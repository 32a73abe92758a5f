"""Statement model for interaction telemetry.

A Statement records one actor-verb-object interaction, modeled after
experience-tracking (xAPI) telemetry records:

    actor   - who acted (the reading session)
    verb    - what was done, identified by a URI plus a display label
    object  - what it was done to (the open publication)

Statements are immutable after creation. They are built by the
StatementBuilder, handed to a sink and then discarded.

Wire format (Statement.to_dict()):
    {
        "id": "6f1c...",
        "timestamp": "1700000000",
        "stored": null,
        "version": "2.0.0",
        "actor": {"objectType": "Agent", "name": "...", "mbox": ""},
        "activity": {},
        "object": {"id": "urn:isbn:123", "type": "Publication", "name": "Moby Dick"},
        "verb": {"id": "https://ekitabu.com/verbs/OpenBook", "display": "OpenBook"}
    }
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any
from urllib.parse import urlparse
from uuid import uuid4

from reader_telemetry.domain.errors.statement import (
    IncompleteStatementError,
    InvalidVerbError,
)

# Protocol version tag carried by every statement
STATEMENT_VERSION: str = "2.0.0"

# Object type used for publications
PUBLICATION_OBJECT_TYPE: str = "Publication"

# Well-known verbs as (display, uri) pairs
OPEN_BOOK: tuple[str, str] = ("OpenBook", "https://ekitabu.com/verbs/OpenBook")


def validate_verb(display: str, verb_id: str) -> None:
    """Validate a verb label and verb URI.

    Args:
        display: Human-readable verb label.
        verb_id: URI naming the action type.

    Raises:
        InvalidVerbError: If the label is blank, or the URI is not an
            absolute URI with a scheme and a network location.
    """
    if not isinstance(display, str) or not display.strip():
        raise InvalidVerbError("Verb display label must be a non-empty string")
    if not isinstance(verb_id, str) or not verb_id.strip():
        raise InvalidVerbError("Verb URI must be a non-empty string")
    parsed = urlparse(verb_id)
    if not parsed.scheme or not parsed.netloc or any(c.isspace() for c in verb_id):
        raise InvalidVerbError(
            f"Verb URI is not a well-formed absolute URI: '{verb_id}'",
            verb_uri=verb_id,
        )


@dataclass(frozen=True)
class Actor:
    """Subject performing the action.

    Attributes:
        name: Display or session identity string.
        mbox: Optional contact identifier, empty by default.
        object_type: xAPI object type, always "Agent".
    """

    name: str
    mbox: str = ""
    object_type: str = "Agent"

    def to_dict(self) -> dict[str, Any]:
        return {"objectType": self.object_type, "name": self.name, "mbox": self.mbox}


@dataclass(frozen=True)
class Activity:
    """Free-form context placeholder, reserved for future contextual data."""

    def to_dict(self) -> dict[str, Any]:
        return {}


@dataclass(frozen=True)
class StatementObject:
    """Target of the action.

    Attributes:
        id: Stable identifier of the target (a publication identifier).
        name: Human-readable label (a publication title).
        type: Object type label.
    """

    id: str
    name: str
    type: str = PUBLICATION_OBJECT_TYPE

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "type": self.type, "name": self.name}


@dataclass(frozen=True)
class Verb:
    """The action performed.

    Attributes:
        id: URI naming the action type.
        display: Human-readable label.

    Raises:
        InvalidVerbError: On construction with a blank label or a
            malformed URI.
    """

    id: str
    display: str

    def __post_init__(self) -> None:
        validate_verb(self.display, self.id)

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "display": self.display}


@dataclass(frozen=True)
class Statement:
    """One completed interaction record.

    Attributes:
        actor: Who acted.
        object: What was acted upon.
        verb: What was done.
        timestamp: Integer string, seconds since epoch at creation.
        id: Globally unique identifier, random per statement.
        stored: Server-assigned persistence time, None at creation.
        version: Protocol version tag.
        activity: Context placeholder.

    Raises:
        IncompleteStatementError: If object.id or object.name is empty.
    """

    actor: Actor
    object: StatementObject
    verb: Verb
    timestamp: str
    id: str = field(default_factory=lambda: str(uuid4()))
    stored: str | None = None
    version: str = STATEMENT_VERSION
    activity: Activity = field(default_factory=Activity)

    def __post_init__(self) -> None:
        if not self.object.id:
            raise IncompleteStatementError("id")
        if not self.object.name:
            raise IncompleteStatementError("name")

    def to_dict(self) -> dict[str, Any]:
        """Convert the statement to its wire representation.

        Returns:
            JSON-serializable dict with xAPI-style field names.
        """
        return {
            "id": self.id,
            "timestamp": self.timestamp,
            "stored": self.stored,
            "version": self.version,
            "actor": self.actor.to_dict(),
            "activity": self.activity.to_dict(),
            "object": self.object.to_dict(),
            "verb": self.verb.to_dict(),
        }
