"""Event category enumeration."""

from enum import Enum


class EventCategory(str, Enum):
    """Event category enumeration.

    Member order is significant: it is the order in which valid event
    types are listed to callers.
    """

    FESTIVAL = "festival"
    STUDY_CIRCLE = "study_circle"
    KIRTAN = "kirtan"
    SEMINAR = "seminar"
    WORKSHOP = "workshop"
    SPIRITUAL = "spiritual"
    OTHER = "other"
