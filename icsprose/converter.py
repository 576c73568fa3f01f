"""Top-level ICS to readable text conversion.

This is the single boundary where pipeline failures are caught; callers get
plain text either way and splice it into a prompt as-is.
"""

import logging
from typing import Optional

from icsprose.calendar.ics_datetime_utils import DEFAULT_DISPLAY_TIMEZONE
from icsprose.calendar.ics_event_parser import ICSEventExtractor
from icsprose.calendar.ics_formatter import format_events
from icsprose.calendar.ics_models import Event
from icsprose.calendar.ics_unfolder import unfold_lines

logger = logging.getLogger(__name__)

ERROR_TEMPLATE = "Error parsing ICS file: {reason}\n\nPlease check that the ICS file is valid."


def parse_ics(ics_content: str, display_timezone: str = DEFAULT_DISPLAY_TIMEZONE) -> list[Event]:
    """Unfold raw ICS text and extract its events.

    Args:
        ics_content: Raw ICS text
        display_timezone: IANA timezone used to render floating date-times

    Returns:
        Events in source order
    """
    lines = unfold_lines(ics_content)
    logger.debug("Unfolded ICS content into %d logical line(s)", len(lines))
    return ICSEventExtractor(display_timezone).extract_events(lines)


def convert_ics_to_readable_text(
    ics_content: str, display_timezone: Optional[str] = None
) -> str:
    """Convert raw ICS text into an LLM-friendly Markdown document.

    Never raises: any failure is logged and returned as an error message.

    Args:
        ics_content: Raw ICS text
        display_timezone: IANA timezone for floating date-times (default UTC)

    Returns:
        Formatted document, or an ``Error parsing ICS file: ...`` message
    """
    try:
        events = parse_ics(ics_content, display_timezone or DEFAULT_DISPLAY_TIMEZONE)
        return format_events(events)
    except Exception as e:
        logger.exception("Failed to convert ICS content")
        return ERROR_TEMPLATE.format(reason=e)
