from __future__ import annotations

import pytest

from boarding_pass.domain.pipeline.models import CandidateRecord
from boarding_pass.domain.pipeline.parser import match_field, parse_response


def test_parse_minimal_response() -> None:
    text = "Flight: 6E6252\nAirline: IndiGo\nDeparture Code: HYD\nArrival Code: IXC\nSeat: 24D"
    rec = parse_response(text)

    assert rec == CandidateRecord(
        flight_number="6E6252",
        airline="IndiGo",
        departure_code="HYD",
        arrival_code="IXC",
        seat="24D",
    )
    assert rec.passenger_name is None
    assert rec.departure_date is None


def test_specific_departure_keys_win_over_shorter_phrases() -> None:
    text = "\n".join(
        [
            "Departure City: Hyderabad",
            "Departure Code: HYD",
            "Departure Time: 06:10",
            "Departure Date: 15 Jan 2025",
            "Departure Airport: Rajiv Gandhi International",
            "Arrival Time: 08:45",
            "Boarding Time: 05:30",
        ]
    )
    rec = parse_response(text)

    assert rec.departure_city == "Hyderabad"
    assert rec.departure_code == "HYD"
    assert rec.departure_time == "06:10"
    assert rec.departure_date == "15 Jan 2025"
    assert rec.departure_airport == "Rajiv Gandhi International"
    assert rec.arrival_time == "08:45"
    assert rec.boarding_time == "05:30"


def test_match_field_prefers_longest_phrase() -> None:
    assert match_field("Flight Number") == "flight_number"
    assert match_field("Flight Date") == "departure_date"
    assert match_field("Passenger Name") == "passenger_name"
    assert match_field("Airline Name") == "airline"
    assert match_field("Seat Number") == "seat"
    assert match_field("PNR") == "confirmation_code"
    assert match_field("Baggage") is None


def test_value_keeps_text_after_first_colon() -> None:
    rec = parse_response("Departure Time: 10:30 AM")
    assert rec.departure_time == "10:30 AM"


def test_first_present_value_wins() -> None:
    rec = parse_response("Gate: null\nGate: C109\nGate: B23")
    assert rec.gate == "C109"


def test_lines_without_colon_are_ignored() -> None:
    rec = parse_response("Flight 6E6252\nSeat 24D")
    assert rec.is_empty()


def test_unrecognizable_response_yields_empty_record() -> None:
    rec = parse_response("I could not find a boarding pass in this text.")
    assert rec.is_empty()
    assert parse_response("").is_empty()


def test_markdown_formatted_response() -> None:
    text = "**Flight Number:** **UA546**\n**Confirmation Code:** `ABC123`\nTerminal: null"
    rec = parse_response(text)
    assert rec.flight_number == "UA546"
    assert rec.confirmation_code == "ABC123"
    assert rec.terminal is None


def test_generic_phrases_match_whole_labels_only() -> None:
    assert match_field("Date") == "departure_date"
    assert match_field("**Date**") == "departure_date"
    assert match_field("Flight") == "flight_number"
    assert match_field("Name") == "passenger_name"
    assert match_field("Arrival Date") is None
    assert match_field("Flight Duration") is None
    assert match_field("Airport Name") is None


@pytest.mark.parametrize(
    "lines,field,expected",
    [
        (["Arrival Date: 2025-01-20", "Departure Date: 2025-01-15"], "departure_date", "2025-01-15"),
        (["Flight Duration: 2h 30m", "Flight Number: 6E6252"], "flight_number", "6E6252"),
        (["Airport Name: Rajiv Gandhi", "Passenger Name: SMITH/JOHN"], "passenger_name", "SMITH/JOHN"),
    ],
)
def test_unrelated_labels_do_not_claim_fields(lines: list[str], field: str, expected: str) -> None:
    for ordering in (lines, list(reversed(lines))):
        rec = parse_response("\n".join(ordering))
        assert getattr(rec, field) == expected
