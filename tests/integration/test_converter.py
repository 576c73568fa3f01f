"""End-to-end tests for ICS to readable text conversion."""

import pytest

import icsprose
from icsprose import converter
from icsprose.converter import convert_ics_to_readable_text, parse_ics

pytestmark = pytest.mark.integration


class TestConvertICSToReadableText:
    """Tests for the full unfold, extract and format pipeline."""

    def test_single_event(self, single_event_ics):
        output = convert_ics_to_readable_text(single_event_ics)
        assert output.count("## Event 1:") == 1
        assert "## Event 1: Team Standup\n\n" in output
        assert "**When**: Monday, January 15, 2024 at 09:00 AM UTC\n\n" in output
        assert "Found 1 event in the calendar file." in output

    def test_no_events(self):
        text = "BEGIN:VCALENDAR\nVERSION:2.0\nEND:VCALENDAR\n"
        assert convert_ics_to_readable_text(text) == "No calendar events found in this ICS file."

    def test_empty_string(self):
        assert convert_ics_to_readable_text("") == "No calendar events found in this ICS file."

    def test_folded_summary_matches_unfolded(self):
        folded = "BEGIN:VEVENT\r\nSUMMARY:Quarterly Pl\r\n anning Review\r\nEND:VEVENT\r\n"
        unfolded = "BEGIN:VEVENT\r\nSUMMARY:Quarterly Planning Review\r\nEND:VEVENT\r\n"
        assert parse_ics(folded) == parse_ics(unfolded)
        assert parse_ics(folded)[0].title == "Quarterly Planning Review"

    def test_folded_attendee_parameters(self):
        text = (
            "BEGIN:VEVENT\n"
            "ATTENDEE;CN=Jane Doe;ROLE=CHAIR;PARTSTAT=ACC\n"
            " EPTED:mailto:jane@example.com\n"
            "END:VEVENT\n"
        )
        attendee = parse_ics(text)[0].attendees[0]
        assert attendee.status == "Accepted"
        assert attendee.email == "jane@example.com"

    def test_description_unescaping(self):
        text = "BEGIN:VEVENT\nDESCRIPTION:Line1\\nLine2\\, comma\nEND:VEVENT\n"
        output = convert_ics_to_readable_text(text)
        assert "**Description**:\nLine1\nLine2, comma\n\n" in output
        assert "\\" not in output

    def test_two_events_in_order(self, two_event_ics):
        output = convert_ics_to_readable_text(two_event_ics)
        first = output.index("## Event 1: First")
        separator = output.index("---\n\n")
        second = output.index("## Event 2: Second")
        assert first < separator < second
        assert output.count("---") == 1
        assert output.endswith("**When**: Tuesday, January 16, 2024\n\n")

    def test_full_event(self, full_event_ics):
        output = convert_ics_to_readable_text(full_event_ics)
        assert output == (
            "# Calendar Events\n\n"
            "Found 1 event in the calendar file.\n\n"
            "## Event 1: Quarterly Planning\n\n"
            "**When**: Monday, January 15, 2024 at 09:00 AM UTC to "
            "Monday, January 15, 2024 at 10:30 AM UTC\n\n"
            "**Where**: Room 4\n\n"
            "**Description**:\nAgenda:\nReview goals, budget\n\n"
            "**Recurrence**: Repeats weekly for 4 occurrences on Monday\n\n"
            "**Status**: Confirmed\n\n"
            "**Organizer**: Alice Smith <alice@example.com>\n\n"
            "**Attendees**:\n"
            "- Bob Jones <bob@example.com> (Required) - Accepted\n"
            "- carol@example.com (Optional) - Needs Action\n"
            "\n"
            "**UID**: abc-123@example.com\n\n"
        )

    def test_full_event_structured_fields(self, full_event_ics):
        event = parse_ics(full_event_ics)[0]
        assert event.created == "Monday, January 1, 2024 at 12:00 PM UTC"
        assert event.last_modified == "Tuesday, January 2, 2024 at 12:00 PM UTC"
        assert event.other_properties == {"TRANSP": "OPAQUE"}

    def test_display_timezone(self):
        text = "BEGIN:VEVENT\nDTSTART:20240701T160000\nEND:VEVENT\n"
        output = convert_ics_to_readable_text(text, "America/New_York")
        assert "**When**: Monday, July 1, 2024 at 12:00 PM EDT\n\n" in output

    def test_malformed_date_does_not_fail(self):
        text = "BEGIN:VEVENT\nSUMMARY:Odd\nDTSTART:2024\nEND:VEVENT\n"
        assert "**When**: 2024\n\n" in convert_ics_to_readable_text(text)

    def test_pipeline_failure_becomes_error_text(self, monkeypatch, single_event_ics):
        def explode(events):
            raise RuntimeError("boom")

        monkeypatch.setattr(converter, "format_events", explode)
        assert convert_ics_to_readable_text(single_event_ics) == (
            "Error parsing ICS file: boom\n\nPlease check that the ICS file is valid."
        )

    def test_unknown_timezone_becomes_error_text(self):
        text = "BEGIN:VEVENT\nDTSTART:20240115T090000\nEND:VEVENT\n"
        output = convert_ics_to_readable_text(text, "Not/AZone")
        assert output.startswith("Error parsing ICS file: ")

    def test_repeated_calls_are_independent(self, single_event_ics, two_event_ics):
        first = convert_ics_to_readable_text(single_event_ics)
        convert_ics_to_readable_text(two_event_ics)
        assert convert_ics_to_readable_text(single_event_ics) == first


def test_package_exports():
    """The public API is importable from the package root."""
    assert icsprose.convert_ics_to_readable_text is convert_ics_to_readable_text
    assert icsprose.parse_ics is parse_ics
    assert icsprose.format_events([]) == "No calendar events found in this ICS file."
