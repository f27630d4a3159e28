"""
Work item states and repository outcomes.

Centralized definitions so repositories, schemas and the API agree on the
stored and returned values.
"""

from enum import Enum


class State(str, Enum):
    """Lifecycle state of a work item."""
    NEW = "New"
    ACTIVE = "Active"
    RESOLVED = "Resolved"
    CLOSED = "Closed"
    REMOVED = "Removed"


class Outcome(str, Enum):
    """Result of a mutating repository operation.

    Expected business conditions are reported through these values instead
    of exceptions; callers branch on the returned member.
    """
    CREATED = "Created"
    UPDATED = "Updated"
    DELETED = "Deleted"
    CONFLICT = "Conflict"
    NOT_FOUND = "NotFound"
    BAD_REQUEST = "BadRequest"


# States in which a delete is refused
SETTLED_STATES = frozenset({State.RESOLVED, State.CLOSED, State.REMOVED})
