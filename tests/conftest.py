"""Shared fixtures for icsprose tests."""

from collections.abc import Generator
from typing import Any

import pytest


@pytest.fixture
def single_event_ics() -> str:
    """A minimal calendar with one event carrying only SUMMARY and DTSTART."""
    return (
        "BEGIN:VCALENDAR\r\n"
        "VERSION:2.0\r\n"
        "BEGIN:VEVENT\r\n"
        "SUMMARY:Team Standup\r\n"
        "DTSTART:20240115T090000Z\r\n"
        "END:VEVENT\r\n"
        "END:VCALENDAR\r\n"
    )


@pytest.fixture
def full_event_ics() -> str:
    """An Outlook-style event exercising every recognized property."""
    return "\n".join(
        [
            "BEGIN:VCALENDAR",
            "PRODID:-//Test//EN",
            "BEGIN:VEVENT",
            "UID:abc-123@example.com",
            "SUMMARY:Quarterly Planning",
            "DESCRIPTION:Agenda:\\nReview goals\\, budget",
            "LOCATION:Room 4",
            "DTSTART:20240115T090000Z",
            "DTEND:20240115T103000Z",
            "CREATED:20240101T120000Z",
            "LAST-MODIFIED:20240102T120000Z",
            "RRULE:FREQ=WEEKLY;COUNT=4;BYDAY=MO",
            "STATUS:CONFIRMED",
            "ORGANIZER;CN=Alice Smith:mailto:alice@example.com",
            "ATTENDEE;CN=Bob Jones;ROLE=REQ-PARTICIPANT;PARTSTAT=ACCEPTED:mailto:bob@example.com",
            "ATTENDEE;ROLE=OPT-PARTICIPANT;PARTSTAT=NEEDS-ACTION:mailto:carol@example.com",
            "TRANSP:OPAQUE",
            "END:VEVENT",
            "END:VCALENDAR",
        ]
    )


@pytest.fixture
def two_event_ics() -> str:
    """Two sequential events in source order."""
    return "\n".join(
        [
            "BEGIN:VCALENDAR",
            "BEGIN:VEVENT",
            "SUMMARY:First",
            "DTSTART:20240115",
            "END:VEVENT",
            "BEGIN:VEVENT",
            "SUMMARY:Second",
            "DTSTART:20240116",
            "END:VEVENT",
            "END:VCALENDAR",
        ]
    )


@pytest.fixture(autouse=True)
def clean_test_environment(monkeypatch: Any) -> Generator[None, Any, None]:
    """Ensure icsprose environment overrides do not leak between tests."""
    for name in ("ICSPROSE_DEBUG", "ICSPROSE_LOG_LEVEL", "ICSPROSE_DISPLAY_TIMEZONE"):
        monkeypatch.delenv(name, raising=False)
    yield
