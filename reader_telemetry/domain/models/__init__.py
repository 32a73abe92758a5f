"""Domain models for reader telemetry."""

from reader_telemetry.domain.models.module_state import (
    VALID_TRANSITIONS,
    ModuleState,
    can_transition,
)
from reader_telemetry.domain.models.publication import (
    Locations,
    Locator,
    Publication,
    PublicationMetadata,
)
from reader_telemetry.domain.models.statement import (
    OPEN_BOOK,
    STATEMENT_VERSION,
    Activity,
    Actor,
    Statement,
    StatementObject,
    Verb,
    validate_verb,
)

__all__ = [
    "OPEN_BOOK",
    "STATEMENT_VERSION",
    "VALID_TRANSITIONS",
    "Activity",
    "Actor",
    "Locations",
    "Locator",
    "ModuleState",
    "Publication",
    "PublicationMetadata",
    "Statement",
    "StatementObject",
    "Verb",
    "can_transition",
    "validate_verb",
]
