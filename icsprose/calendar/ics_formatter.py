"""Markdown rendering of extracted events for LLM prompts."""

import logging
from collections.abc import Sequence

from icsprose.calendar.ics_models import Event, Person

logger = logging.getLogger(__name__)

NO_EVENTS_MESSAGE = "No calendar events found in this ICS file."
UNTITLED_EVENT = "Untitled Event"
EVENT_SEPARATOR = "---\n\n"

STATUS_LABELS = {
    "CONFIRMED": "Confirmed",
    "TENTATIVE": "Tentative",
    "CANCELLED": "Cancelled",
}


def format_attendee(attendee: Person) -> str:
    """Render an attendee as ``name <email> (role) - status``, omitting absent parts."""
    info = attendee.name or ""
    if attendee.email:
        info += f" <{attendee.email}>" if info else attendee.email
    if attendee.role:
        info += f" ({attendee.role})"
    if attendee.status:
        info += f" - {attendee.status}"
    return info


def format_event(event: Event, number: int) -> str:
    """Render one event block (without the trailing separator)."""
    parts = [f"## Event {number}: {event.title or UNTITLED_EVENT}\n\n"]

    if event.start_date:
        when = event.start_date
        if event.end_date:
            when = f"{when} to {event.end_date}"
        parts.append(f"**When**: {when}\n\n")

    if event.location:
        parts.append(f"**Where**: {event.location}\n\n")

    if event.description:
        parts.append(f"**Description**:\n{event.description}\n\n")

    if event.recurrence:
        parts.append(f"**Recurrence**: {event.recurrence}\n\n")

    if event.status:
        parts.append(f"**Status**: {STATUS_LABELS.get(event.status, event.status)}\n\n")

    if event.organizer:
        organizer = event.organizer
        parts.append(f"**Organizer**: {organizer.name or ''} <{organizer.email}>\n\n")

    if event.attendees:
        parts.append("**Attendees**:\n")
        parts.extend(f"- {format_attendee(attendee)}\n" for attendee in event.attendees)
        parts.append("\n")

    if event.uid:
        parts.append(f"**UID**: {event.uid}\n\n")

    return "".join(parts)


def format_events(events: Sequence[Event]) -> str:
    """Render events as a single Markdown document.

    Args:
        events: Events in source order

    Returns:
        Document with a count header and one numbered section per event,
        or NO_EVENTS_MESSAGE when there are none
    """
    if not events:
        return NO_EVENTS_MESSAGE

    count = len(events)
    header = (
        "# Calendar Events\n\n"
        f"Found {count} event{'s' if count > 1 else ''} in the calendar file.\n\n"
    )
    body = EVENT_SEPARATOR.join(
        format_event(event, number) for number, event in enumerate(events, start=1)
    )
    logger.debug("Formatted %d event(s) into %d characters", count, len(header) + len(body))
    return header + body
