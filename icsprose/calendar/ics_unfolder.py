"""Line unfolding for raw iCalendar text."""

import logging

logger = logging.getLogger(__name__)

FOLD_MARKERS = (" ", "\t")


def unfold_lines(ics_content: str) -> list[str]:
    """Split raw ICS text into logical content lines.

    Carriage returns are removed, the text is split on line feeds, and every
    physical line starting with a single space or tab is appended (without
    that character) to the previous logical line.

    Args:
        ics_content: Raw ICS text

    Returns:
        Logical lines in source order
    """
    lines: list[str] = []
    dropped = 0

    for physical in ics_content.replace("\r", "").split("\n"):
        if physical.startswith(FOLD_MARKERS):
            if lines:
                lines[-1] += physical[1:]
            else:
                # Continuation with nothing to fold into
                dropped += 1
            continue
        lines.append(physical)

    if dropped:
        logger.debug("Dropped %d leading continuation line(s)", dropped)

    return lines
