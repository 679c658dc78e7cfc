"""Data models for Event Type Validator.

This module contains the event category enumeration and the Pydantic
models for event request payloads.
"""

from event_type_validator.models.category import EventCategory
from event_type_validator.models.event import EventCreateRequest, EventUpdateRequest

__all__ = ["EventCategory", "EventCreateRequest", "EventUpdateRequest"]
