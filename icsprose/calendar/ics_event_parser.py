"""VEVENT extraction from unfolded ICS content lines.

The extractor is a two-state fold over logical lines: outside an event the
only line that matters is ``BEGIN:VEVENT``; inside, each property line is
dispatched by name into a per-event accumulator that becomes an immutable
:class:`Event` at ``END:VEVENT``.
"""

import logging
from collections.abc import Callable, Iterable
from typing import Any, Optional

from icsprose.calendar.ics_datetime_utils import DEFAULT_DISPLAY_TIMEZONE, format_ics_date
from icsprose.calendar.ics_models import Event, PropertyLine
from icsprose.calendar.ics_person_parser import parse_attendee, parse_organizer
from icsprose.calendar.ics_rrule_formatter import format_recurrence_rule

logger = logging.getLogger(__name__)

BEGIN_EVENT = "BEGIN:VEVENT"
END_EVENT = "END:VEVENT"

PropertyHandler = Callable[[dict[str, Any], PropertyLine], None]


def split_property_line(line: str) -> Optional[PropertyLine]:
    """Split ``NAME[;PARAMS]:VALUE`` into its parts.

    Args:
        line: Logical content line

    Returns:
        PropertyLine, or None when the line has no colon or no property name
    """
    colon_index = line.find(":")
    if colon_index <= 0:
        return None

    name, _, params = line[:colon_index].partition(";")
    if not name:
        return None

    return PropertyLine(name=name, params=params, value=line[colon_index + 1 :])


def unescape_text(value: str) -> str:
    """Decode ICS TEXT escapes: ``\\n`` then ``\\,`` then ``\\\\``."""
    return value.replace("\\n", "\n").replace("\\,", ",").replace("\\\\", "\\")


class ICSEventExtractor:
    """Builds Event records from logical ICS lines."""

    def __init__(self, display_timezone: str = DEFAULT_DISPLAY_TIMEZONE):
        """Initialize the extractor.

        Args:
            display_timezone: IANA timezone used to render floating date-times
        """
        self.display_timezone = display_timezone
        self._handlers = self._build_handlers()

    def _build_handlers(self) -> dict[str, PropertyHandler]:
        tz = self.display_timezone

        def set_field(field: str, convert: Callable[[str], str] = str) -> PropertyHandler:
            def handler(fields: dict[str, Any], prop: PropertyLine) -> None:
                fields[field] = convert(prop.value)

            return handler

        def format_date(value: str) -> str:
            return format_ics_date(value, tz)

        def add_attendee(fields: dict[str, Any], prop: PropertyLine) -> None:
            # Frozen into a tuple when the Event is built
            fields.setdefault("attendees", []).append(parse_attendee(prop.value, prop.params))

        def set_organizer(fields: dict[str, Any], prop: PropertyLine) -> None:
            fields["organizer"] = parse_organizer(prop.value, prop.params)

        return {
            "SUMMARY": set_field("title"),
            "DESCRIPTION": set_field("description", unescape_text),
            "LOCATION": set_field("location"),
            "DTSTART": set_field("start_date", format_date),
            "DTEND": set_field("end_date", format_date),
            "CREATED": set_field("created", format_date),
            "LAST-MODIFIED": set_field("last_modified", format_date),
            "RRULE": set_field("recurrence", lambda v: format_recurrence_rule(v, tz)),
            "ATTENDEE": add_attendee,
            "ORGANIZER": set_organizer,
            "UID": set_field("uid"),
            "STATUS": set_field("status"),
        }

    def apply_property(self, fields: dict[str, Any], prop: PropertyLine) -> None:
        """Record one property into an event accumulator.

        Args:
            fields: Accumulator of Event keyword arguments
            prop: Parsed property line
        """
        handler = self._handlers.get(prop.name)
        if handler is not None:
            handler(fields, prop)
        else:
            fields.setdefault("other_properties", {})[prop.name] = prop.value

    def extract_events(self, lines: Iterable[str]) -> list[Event]:
        """Extract events from logical lines in source order.

        Lines outside BEGIN/END pairs and lines without a colon are ignored.
        An event left open at the end of input is dropped.

        Args:
            lines: Unfolded logical lines

        Returns:
            Finalized events in the order their BEGIN:VEVENT appeared
        """
        events: list[Event] = []
        current: Optional[dict[str, Any]] = None
        skipped = 0

        for line in lines:
            if line == BEGIN_EVENT:
                if current is not None:
                    logger.debug("Nested %s; discarding unfinished event", BEGIN_EVENT)
                current = {}
                continue

            if line == END_EVENT:
                if current is not None:
                    events.append(Event(**current))
                    current = None
                continue

            if current is None:
                continue

            prop = split_property_line(line)
            if prop is None:
                skipped += 1
                continue

            self.apply_property(current, prop)

        if current is not None:
            logger.debug("Input ended inside an event; dropping it")

        logger.debug("Extracted %d event(s), skipped %d malformed line(s)", len(events), skipped)
        return events


def extract_events(
    lines: Iterable[str], display_timezone: str = DEFAULT_DISPLAY_TIMEZONE
) -> list[Event]:
    """Convenience wrapper around :class:`ICSEventExtractor`."""
    return ICSEventExtractor(display_timezone).extract_events(lines)
