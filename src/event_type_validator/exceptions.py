"""Custom exceptions for Event Type Validator."""


class EventTypeValidatorError(Exception):
    """Base exception for all Event Type Validator errors."""


class ConfigurationError(EventTypeValidatorError):
    """Exception raised for configuration related errors."""


class EventPayloadError(EventTypeValidatorError):
    """Exception raised when an event request payload is rejected.

    The message is suitable for returning to the client as-is.
    """
