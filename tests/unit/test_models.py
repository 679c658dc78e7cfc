"""Unit tests for data models."""

from datetime import datetime

import pydantic
import pytest

from event_type_validator.models import EventCategory, EventCreateRequest, EventUpdateRequest


class TestEventCategory:
    """Test suite for EventCategory enumeration."""

    def test_members_compare_equal_to_labels(self) -> None:
        """Members are str-valued and compare equal to their labels."""
        assert EventCategory.STUDY_CIRCLE == "study_circle"
        assert EventCategory("kirtan") is EventCategory.KIRTAN

    def test_unknown_label_is_rejected(self) -> None:
        """Constructing from an unknown label fails."""
        with pytest.raises(ValueError):
            EventCategory("Festival")


class TestEventCreateRequest:
    """Test suite for EventCreateRequest model."""

    def test_event_create_request_creation(self) -> None:
        """Test creating an EventCreateRequest instance."""
        request = EventCreateRequest(
            title="Gita Study",
            type="study_circle",
            description="Chapter 2 discussion",
            location="Room 4",
            starts_at=datetime(2024, 9, 1, 10, 0),
        )

        assert request.type is EventCategory.STUDY_CIRCLE
        assert request.cta_name is None
        assert request.cta_link is None

    def test_type_validation(self) -> None:
        """Unknown event types are rejected by the model."""
        with pytest.raises(pydantic.ValidationError):
            EventCreateRequest(
                title="Party",
                type="party",
                description="Not allowed",
                location="Anywhere",
                starts_at=datetime(2024, 9, 1, 10, 0),
            )


class TestEventUpdateRequest:
    """Test suite for EventUpdateRequest model."""

    def test_changes_only_include_set_fields(self) -> None:
        """Unset fields are left out of changes."""
        update = EventUpdateRequest(title="New title", cta_link=None)

        assert update.changes() == {"title": "New title", "cta_link": None}

    def test_empty_update(self) -> None:
        """An update with nothing supplied has no changes."""
        assert EventUpdateRequest().changes() == {}
