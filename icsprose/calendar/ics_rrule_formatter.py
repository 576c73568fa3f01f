"""Natural-language rendering of RRULE values."""

import logging
import re
from collections.abc import Callable, Sequence
from typing import Optional

from icsprose.calendar.ics_datetime_utils import (
    DEFAULT_DISPLAY_TIMEZONE,
    MONTH_NAMES,
    format_ics_date,
)

logger = logging.getLogger(__name__)

DAY_NAMES = {
    "MO": "Monday",
    "TU": "Tuesday",
    "WE": "Wednesday",
    "TH": "Thursday",
    "FR": "Friday",
    "SA": "Saturday",
    "SU": "Sunday",
}

_BYDAY_RE = re.compile(r"^([+-]?\d+)?([A-Z]{2})$")


def get_ordinal(n: int) -> str:
    """Return ``n`` with its English ordinal suffix (1st, 2nd, 3rd, 11th, 21st...)."""
    if 11 <= n % 100 <= 13:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")
    return f"{n}{suffix}"


def format_list(items: Sequence[str]) -> str:
    """Join items as ``A``, ``A and B`` or ``A, B, and C``."""
    if not items:
        return ""
    if len(items) == 1:
        return items[0]
    if len(items) == 2:
        return f"{items[0]} and {items[1]}"
    return f"{', '.join(items[:-1])}, and {items[-1]}"


def _relative_ordinal(n: int) -> str:
    """Ordinal counted from the start (positive) or the end (negative) of a period."""
    if n == -1:
        return "last"
    if n < 0:
        return f"{get_ordinal(-n)} to last"
    return get_ordinal(n)


def _format_weekday(entry: str) -> str:
    match = _BYDAY_RE.match(entry)
    if not match:
        return entry
    number, code = match.groups()
    day = DAY_NAMES.get(code, code)
    if number is None:
        return day
    return f"the {_relative_ordinal(int(number))} {day}"


def _format_month_day(entry: str) -> str:
    try:
        return _relative_ordinal(int(entry))
    except ValueError:
        return entry


def _format_month(entry: str) -> str:
    try:
        index = int(entry)
    except ValueError:
        return entry
    if 1 <= index <= len(MONTH_NAMES):
        return MONTH_NAMES[index - 1]
    return entry


def format_recurrence_rule(
    rrule: str, display_timezone: str = DEFAULT_DISPLAY_TIMEZONE
) -> str:
    """Describe an RRULE value in plain English.

    Parts are rendered in the order they appear, so
    ``FREQ=WEEKLY;BYDAY=MO,WE,FR`` becomes
    ``Repeats weekly on Monday, Wednesday, and Friday``. Unknown keys are
    ignored.

    Args:
        rrule: RRULE property value
        display_timezone: Timezone used when rendering a floating UNTIL value

    Returns:
        Human-readable recurrence description
    """
    handlers: dict[str, Callable[[str], Optional[str]]] = {
        "FREQ": lambda v: f"Repeats {v.lower()}",
        "INTERVAL": lambda v: f"every {v}" if v != "1" else None,
        "COUNT": lambda v: f"for {v} occurrences",
        "UNTIL": lambda v: f"until {format_ics_date(v, display_timezone)}",
        "BYDAY": lambda v: f"on {format_list([_format_weekday(d) for d in v.split(',')])}",
        "BYMONTHDAY": lambda v: (
            f"on the {format_list([_format_month_day(d) for d in v.split(',')])} of the month"
        ),
        "BYMONTH": lambda v: f"in {format_list([_format_month(m) for m in v.split(',')])}",
    }

    fragments = []
    for part in rrule.split(";"):
        key, _, value = part.partition("=")
        handler = handlers.get(key)
        if handler is None:
            if key:
                logger.debug("Ignoring RRULE part %s", key)
            continue
        fragment = handler(value)
        if fragment:
            fragments.append(fragment)

    return " ".join(fragments)
