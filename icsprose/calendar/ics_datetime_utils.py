"""DateTime parsing and formatting utilities for ICS calendar processing.

ICS values are read positionally (``YYYYMMDD`` or ``YYYYMMDDTHHMMSS[Z]``)
rather than through ``strptime`` so that short forms such as
``20240115T0900`` still parse with seconds defaulting to zero.
"""

import logging
from datetime import datetime, timezone
from typing import NamedTuple
from zoneinfo import ZoneInfo

from icsprose.exceptions import ICSDateError

logger = logging.getLogger(__name__)

DEFAULT_DISPLAY_TIMEZONE = "UTC"

WEEKDAY_NAMES = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


class ParsedICSDate(NamedTuple):
    """Result of positional ICS date parsing."""

    instant: datetime
    has_time: bool
    is_utc: bool


def _slice_int(value: str, start: int, end: int, field: str) -> int:
    part = value[start:end]
    if len(part) != end - start or not part.isdecimal():
        raise ICSDateError(f"Invalid {field} in ICS date {value!r}", value=value)
    return int(part)


def parse_ics_date(value: str) -> ParsedICSDate:
    """Parse an ICS date or date-time value into a UTC instant.

    Args:
        value: ICS value, e.g. ``20240115``, ``20240115T090000`` or ``20240115T090000Z``

    Returns:
        ParsedICSDate with a timezone-aware UTC instant

    Raises:
        ICSDateError: If a positional field is missing, non-numeric or out of range
    """
    is_utc = value.endswith("Z")
    has_time = "T" in value

    year = _slice_int(value, 0, 4, "year")
    month = _slice_int(value, 4, 6, "month")
    day = _slice_int(value, 6, 8, "day")
    hour = minute = second = 0

    if has_time:
        hour = _slice_int(value, 9, 11, "hour")
        minute = _slice_int(value, 11, 13, "minute")
        if len(value) >= 15:
            second = _slice_int(value, 13, 15, "second")

    try:
        instant = datetime(year, month, day, hour, minute, second, tzinfo=timezone.utc)
    except ValueError as e:
        raise ICSDateError(f"Invalid ICS date {value!r}: {e}", value=value) from e

    return ParsedICSDate(instant=instant, has_time=has_time, is_utc=is_utc)


def format_clock(dt: datetime) -> str:
    """Format a time as a zero-padded 12-hour clock, e.g. ``09:05 AM``."""
    hour12 = dt.hour % 12 or 12
    meridiem = "AM" if dt.hour < 12 else "PM"
    return f"{hour12:02d}:{dt.minute:02d} {meridiem}"


def format_long_date(dt: datetime) -> str:
    """Format a date as ``Monday, January 15, 2024`` without relying on the locale."""
    return f"{WEEKDAY_NAMES[dt.weekday()]}, {MONTH_NAMES[dt.month - 1]} {dt.day}, {dt.year}"


def format_ics_date(value: str, display_timezone: str = DEFAULT_DISPLAY_TIMEZONE) -> str:
    """Render an ICS date or date-time value as readable text.

    UTC values (trailing ``Z``) are shown in UTC. Floating values are treated
    as UTC instants and shown in ``display_timezone`` with its short name.

    Args:
        value: Raw ICS date or date-time value
        display_timezone: IANA timezone name used for floating values

    Returns:
        e.g. ``Monday, January 15, 2024 at 09:00 AM UTC``; the raw value when
        it cannot be parsed
    """
    try:
        parsed = parse_ics_date(value)
    except ICSDateError as e:
        logger.debug("Leaving malformed date unformatted: %s", e.message)
        return value

    if not parsed.has_time:
        return format_long_date(parsed.instant)

    if parsed.is_utc:
        local = parsed.instant
        label = "UTC"
    else:
        local = parsed.instant.astimezone(ZoneInfo(display_timezone))
        label = local.tzname() or display_timezone

    return f"{format_long_date(local)} at {format_clock(local)} {label}"
