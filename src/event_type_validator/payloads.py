"""Helpers for parsing admin event request bodies into internal models.

Bodies arrive as decoded JSON using the client's camelCase keys. Parsing
applies the same checks, in the same order, as the create and update event
handlers, and raises ``EventPayloadError`` with the message the client
should see.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from datetime import datetime
from typing import Any

import pydantic

from event_type_validator.exceptions import EventPayloadError
from event_type_validator.models import EventCategory, EventCreateRequest, EventUpdateRequest
from event_type_validator.validation import validate_event_type

_REQUIRED_CREATE_FIELDS = ("title", "type", "description", "location", "date", "time")

# Extended ISO 8601 only; compact forms such as 20240826 are rejected.
_DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
_TIME_RE = re.compile(r"[0-9]{2}:[0-9]{2}(:[0-9]{2}(\.[0-9]{1,6})?)?(Z|[+-][0-9]{2}:[0-9]{2})?")


def _parse_starts_at(date: Any, time: Any) -> datetime | None:
    if not isinstance(date, str) or not isinstance(time, str):
        return None
    if not _DATE_RE.fullmatch(date) or not _TIME_RE.fullmatch(time):
        return None
    try:
        return datetime.fromisoformat(f"{date}T{time}")
    except ValueError:
        return None


def _checked_type(value: Any) -> EventCategory:
    error = validate_event_type(value)
    if error:
        raise EventPayloadError(error)
    return EventCategory(value)


def parse_create_request(body: Mapping[str, Any]) -> EventCreateRequest:
    """Convert a create-event request body to EventCreateRequest.

    Args:
        body: Decoded JSON request body.

    Returns:
        EventCreateRequest: Validated request.

    Raises:
        EventPayloadError: If a required field is missing, the event type is
            not allowed, or the date and time do not parse.
    """
    if not all(body.get(name) for name in _REQUIRED_CREATE_FIELDS):
        raise EventPayloadError("All event fields are required.")

    event_type = _checked_type(body["type"])

    starts_at = _parse_starts_at(body["date"], body["time"])
    if starts_at is None:
        raise EventPayloadError("Invalid date or time format provided.")

    try:
        return EventCreateRequest(
            title=body["title"],
            type=event_type,
            description=body["description"],
            location=body["location"],
            starts_at=starts_at,
            cta_name=body.get("ctaName"),
            cta_link=body.get("ctaLink"),
        )
    except pydantic.ValidationError as e:
        raise EventPayloadError("Invalid event payload.") from e


def parse_update_request(body: Mapping[str, Any]) -> EventUpdateRequest:
    """Convert an update-event request body to EventUpdateRequest.

    Empty values for title, type, description and location are ignored.
    The call-to-action fields are applied whenever their key is present,
    so an explicit null clears them. The start time changes only when both
    date and time are supplied.

    Args:
        body: Decoded JSON request body.

    Returns:
        EventUpdateRequest: Validated partial update.

    Raises:
        EventPayloadError: If the event type is not allowed, or the date and
            time do not parse.
    """
    fields: dict[str, Any] = {}

    if body.get("title"):
        fields["title"] = body["title"]
    if body.get("type"):
        fields["type"] = _checked_type(body["type"])
    if body.get("description"):
        fields["description"] = body["description"]
    if body.get("location"):
        fields["location"] = body["location"]
    if "ctaName" in body:
        fields["cta_name"] = body["ctaName"]
    if "ctaLink" in body:
        fields["cta_link"] = body["ctaLink"]

    if body.get("date") and body.get("time"):
        starts_at = _parse_starts_at(body["date"], body["time"])
        if starts_at is None:
            raise EventPayloadError("Invalid date or time format.")
        fields["starts_at"] = starts_at

    try:
        return EventUpdateRequest(**fields)
    except pydantic.ValidationError as e:
        raise EventPayloadError("Invalid event payload.") from e
