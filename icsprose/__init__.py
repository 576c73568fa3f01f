"""icsprose - turn iCalendar text into readable prose for LLM prompts.

Typical use::

    from icsprose import convert_ics_to_readable_text

    prompt_block = convert_ics_to_readable_text(raw_ics)
"""

__version__ = "0.1.0"

import logging
import sys
from typing import Optional

from colorlog import ColoredFormatter

from icsprose.calendar.ics_formatter import format_events
from icsprose.calendar.ics_models import Event, Person
from icsprose.converter import convert_ics_to_readable_text, parse_ics

__all__ = [
    "Event",
    "Person",
    "convert_ics_to_readable_text",
    "format_events",
    "parse_ics",
]


def _init_logging(level_name: Optional[str]) -> None:
    """Initialize root logging to stream to console.

    Installs a colorized stderr handler only when the root logger has none,
    so embedding applications keep their own configuration.
    """
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler(stream=sys.stderr)
        # HH:MM:SS  LEVEL   logger.name: message
        fmt = "%(asctime)s %(log_color)s%(levelname)-7s%(reset)s %(name)s: %(message)s"
        log_colors = {
            "DEBUG": "cyan",
            "INFO": "green",
            "WARNING": "yellow",
            "ERROR": "red",
            "CRITICAL": "bold_red",
        }
        handler.setFormatter(ColoredFormatter(fmt, datefmt="%H:%M:%S", log_colors=log_colors))
        root.addHandler(handler)

    level = logging.INFO
    if isinstance(level_name, str):
        level = getattr(logging, level_name.upper(), logging.INFO)
    root.setLevel(level)
    logging.getLogger(__name__).debug(
        "Logging initialized at level %s", logging.getLevelName(level)
    )
