"""Pytest configuration and shared fixtures."""

import pytest


@pytest.fixture(autouse=True)
def fresh_settings():
    """Make each test read settings from its own environment."""
    from event_type_validator.config import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def canonical_event_types() -> list[str]:
    """Provide the expected event types in their fixed order."""
    return ["festival", "study_circle", "kirtan", "seminar", "workshop", "spiritual", "other"]


@pytest.fixture
def invalid_event_type_message() -> str:
    """Provide the exact message returned for a rejected event type."""
    return (
        "Invalid event type. Must be one of: "
        "festival, study_circle, kirtan, seminar, workshop, spiritual, other"
    )


@pytest.fixture
def sample_create_body() -> dict:
    """Provide a complete create-event request body."""
    return {
        "title": "Janmashtami Celebration",
        "type": "festival",
        "description": "Evening programme with kirtan and prasadam.",
        "location": "Main Hall",
        "date": "2024-08-26",
        "time": "18:30",
        "ctaName": "Register",
        "ctaLink": "https://example.com/register",
    }
