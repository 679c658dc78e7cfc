"""Event request payload models.

These mirror what an admin submits when creating or editing an event. The
date and time the client sends separately are already combined into
``starts_at`` by the time a model is built.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from event_type_validator.models.category import EventCategory


class EventCreateRequest(BaseModel):
    """A validated request to create an event."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(description="Event title")
    type: EventCategory = Field(description="Event category")
    description: str = Field(description="Event description")
    location: str = Field(description="Where the event takes place")
    starts_at: datetime = Field(description="Combined event date and time")
    cta_name: str | None = Field(default=None, description="Call-to-action button label")
    cta_link: str | None = Field(default=None, description="Call-to-action URL")


class EventUpdateRequest(BaseModel):
    """A validated partial update to an existing event.

    Only fields the client actually supplied are set; see ``changes``.
    """

    model_config = ConfigDict(frozen=True)

    title: str | None = Field(default=None, description="New event title")
    type: EventCategory | None = Field(default=None, description="New event category")
    description: str | None = Field(default=None, description="New event description")
    location: str | None = Field(default=None, description="New event location")
    starts_at: datetime | None = Field(default=None, description="New combined date and time")
    # Explicit null clears the call-to-action, so these may be set to None.
    cta_name: str | None = Field(default=None, description="New call-to-action label")
    cta_link: str | None = Field(default=None, description="New call-to-action URL")

    def changes(self) -> dict[str, Any]:
        """Return only the fields supplied in the update.

        Returns:
            Mapping of field name to new value.
        """
        return self.model_dump(exclude_unset=True)
