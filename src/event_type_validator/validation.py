"""Event type validation.

Classifies caller-supplied event type labels against ``EventCategory``.
All three functions are pure: they never raise, never log and hold no state,
so they are safe to call from any thread.
"""

from __future__ import annotations

from typing import Any

from event_type_validator.models import EventCategory

_VALID_EVENT_TYPES: tuple[str, ...] = tuple(category.value for category in EventCategory)
_VALID_EVENT_TYPE_SET: frozenset[str] = frozenset(_VALID_EVENT_TYPES)

INVALID_EVENT_TYPE_MESSAGE = "Invalid event type. Must be one of: " + ", ".join(_VALID_EVENT_TYPES)


def is_valid_event_type(candidate: Any) -> bool:
    """Check whether a label is one of the allowed event types.

    Matching is exact and case-sensitive; no trimming is applied.

    Args:
        candidate: The event type to check.

    Returns:
        True if valid, False otherwise.
    """
    if isinstance(candidate, EventCategory):
        return True
    return isinstance(candidate, str) and candidate in _VALID_EVENT_TYPE_SET


def get_valid_event_types() -> list[str]:
    """Get the list of valid event types, in declaration order."""
    return list(_VALID_EVENT_TYPES)


def validate_event_type(candidate: Any) -> str | None:
    """Validate an event type and describe the problem if it is invalid.

    Args:
        candidate: The event type to validate.

    Returns:
        Error message if invalid, None if valid.
    """
    if not is_valid_event_type(candidate):
        return INVALID_EVENT_TYPE_MESSAGE
    return None
