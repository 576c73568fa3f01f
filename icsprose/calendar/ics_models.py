"""Data models for ICS calendar processing."""

from typing import NamedTuple, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class PropertyLine(NamedTuple):
    """A logical content line split into its parts.

    ``params`` is the text between the first ``;`` of the name and the colon,
    or an empty string when the property carries no parameters.
    """

    name: str
    params: str
    value: str


class Person(BaseModel):
    """Calendar event attendee or organizer."""

    name: Optional[str] = Field(default=None, description="Common name (CN)")
    email: str = Field(default="", description="Email address")
    status: Optional[str] = Field(default=None, description="Participation status (attendees only)")
    role: Optional[str] = Field(default=None, description="Participation role (attendees only)")

    model_config = ConfigDict(frozen=True)


class Event(BaseModel):
    """Calendar event decoded from a VEVENT block.

    Date fields hold already-rendered human text, not datetime objects.
    """

    title: Optional[str] = Field(default=None, description="SUMMARY")
    description: Optional[str] = Field(default=None, description="Unescaped DESCRIPTION")
    location: Optional[str] = Field(default=None, description="LOCATION")
    start_date: Optional[str] = Field(default=None, description="Formatted DTSTART")
    end_date: Optional[str] = Field(default=None, description="Formatted DTEND")
    created: Optional[str] = Field(default=None, description="Formatted CREATED")
    last_modified: Optional[str] = Field(default=None, description="Formatted LAST-MODIFIED")
    recurrence: Optional[str] = Field(default=None, description="Human-readable RRULE")
    attendees: tuple[Person, ...] = Field(default=(), description="Attendees in source order")
    organizer: Optional[Person] = Field(default=None, description="Event organizer")
    uid: Optional[str] = Field(default=None, description="UID")
    status: Optional[str] = Field(default=None, description="Raw STATUS value")
    other_properties: dict[str, str] = Field(
        default_factory=dict, description="Unrecognized property name -> raw value"
    )

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)
