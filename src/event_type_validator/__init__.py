"""Event Type Validator - canonical event categories and their validation.

This package owns the closed set of event categories accepted by the
learning-management backend, and provides helpers to classify labels and
validate admin event request payloads against it.
"""

__version__ = "0.1.0"

from event_type_validator.config import Settings, get_settings
from event_type_validator.models import EventCategory
from event_type_validator.validation import (
    get_valid_event_types,
    is_valid_event_type,
    validate_event_type,
)

__all__ = [
    "EventCategory",
    "Settings",
    "get_settings",
    "get_valid_event_types",
    "is_valid_event_type",
    "validate_event_type",
    "__version__",
]
