"""Attendee and organizer parsing for ICS calendar processing.

The email always comes from the property value (its ``mailto:`` URI, else the
text after its last colon). CN, PARTSTAT and ROLE are searched in the value
first, so loosely written feeds (``CN=Jane;mailto:jane@example.com;ROLE=CHAIR``)
work, and then in the property parameters, as RFC 5545 writes them
(``ATTENDEE;CN=Jane;PARTSTAT=ACCEPTED:mailto:jane@example.com``).
"""

import logging
import re
from typing import Optional

from icsprose.calendar.ics_models import Person

logger = logging.getLogger(__name__)

# Each pattern captures up to the next ";" or ":"
PARAM_PATTERNS = {
    "CN": re.compile(r"CN=([^;:]+)", re.IGNORECASE),
    "MAILTO": re.compile(r"mailto:([^;:]+)", re.IGNORECASE),
    "PARTSTAT": re.compile(r"PARTSTAT=([^;:]+)", re.IGNORECASE),
    "ROLE": re.compile(r"ROLE=([^;:]+)", re.IGNORECASE),
}

PARTSTAT_LABELS = {
    "ACCEPTED": "Accepted",
    "DECLINED": "Declined",
    "TENTATIVE": "Tentative",
    "NEEDS-ACTION": "Needs Action",
    "DELEGATED": "Delegated",
}

ROLE_LABELS = {
    "REQ-PARTICIPANT": "Required",
    "OPT-PARTICIPANT": "Optional",
    "NON-PARTICIPANT": "Non-Participant",
    "CHAIR": "Chair",
}


def find_param(name: str, text: str) -> Optional[str]:
    """Return the first capture for parameter ``name`` in ``text``, or None.

    Args:
        name: One of the keys of PARAM_PATTERNS
        text: Raw attendee/organizer text

    Returns:
        Captured value or None when absent
    """
    match = PARAM_PATTERNS[name].search(text)
    return match.group(1) if match else None


def _param_with_fallback(name: str, value: str, params: str) -> Optional[str]:
    # The value wins; property parameters fill in what it lacks
    found = find_param(name, value)
    if found is None and params:
        found = find_param(name, params)
    return found


def _parse_identity(value: str, params: str) -> tuple[Optional[str], str]:
    name = _param_with_fallback("CN", value, params)
    if name is not None:
        name = name.strip('"')

    # Parameters such as SENT-BY or DELEGATED-FROM hold other addresses,
    # so the email only ever comes from the value
    email = find_param("MAILTO", value)
    if email is None:
        email = value[value.rfind(":") + 1 :]

    return name, email


def parse_attendee(value: str, params: str = "") -> Person:
    """Parse an ATTENDEE value into a Person with status and role labels.

    Args:
        value: Property value, e.g. ``mailto:jane@example.com``
        params: Property parameters, e.g. ``CN=Jane;PARTSTAT=ACCEPTED``

    Returns:
        Person with the email from the value and name/status/role from the
        value or, failing that, the parameters
    """
    name, email = _parse_identity(value, params)

    status = _param_with_fallback("PARTSTAT", value, params)
    if status is not None:
        status = PARTSTAT_LABELS.get(status, status)

    role = _param_with_fallback("ROLE", value, params)
    if role is not None:
        role = ROLE_LABELS.get(role, role)

    return Person(name=name, email=email, status=status, role=role)


def parse_organizer(value: str, params: str = "") -> Person:
    """Parse an ORGANIZER value into a Person (name and email only)."""
    name, email = _parse_identity(value, params)
    return Person(name=name, email=email)
