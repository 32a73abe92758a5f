"""Lifecycle states of the analytics module.

    UNINITIALIZED -> STARTING -> ACTIVE -> STOPPED

There is no way back to ACTIVE from STOPPED; a restart requires a new
module instance.
"""

from enum import Enum


class ModuleState(str, Enum):
    """Lifecycle state of an analytics module.

    Values:
        UNINITIALIZED: Constructed, not started.
        STARTING: Locating anchors and attaching listeners.
        ACTIVE: Listening and emitting statements.
        STOPPED: Listeners detached; terminal.
    """

    UNINITIALIZED = "uninitialized"
    STARTING = "starting"
    ACTIVE = "active"
    STOPPED = "stopped"


VALID_TRANSITIONS: dict[ModuleState, frozenset[ModuleState]] = {
    ModuleState.UNINITIALIZED: frozenset({ModuleState.STARTING}),
    ModuleState.STARTING: frozenset({ModuleState.ACTIVE}),
    ModuleState.ACTIVE: frozenset({ModuleState.STOPPED}),
    ModuleState.STOPPED: frozenset(),
}


def can_transition(current: ModuleState, requested: ModuleState) -> bool:
    """Check whether a lifecycle transition is allowed.

    Args:
        current: The state the module is in.
        requested: The state the module would move to.

    Returns:
        True if the transition is part of the lifecycle.
    """
    return requested in VALID_TRANSITIONS[current]
