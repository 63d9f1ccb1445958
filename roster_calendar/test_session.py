"""End-to-end tests of the roster session: classification, dating and dedup."""

from __future__ import annotations

import sys
from datetime import date, datetime, time, timedelta
from pathlib import Path

import pytest
from dateutil import tz

PROJECT_ROOT = Path(__file__).resolve().parent
PARENT_ROOT = PROJECT_ROOT.parent
if str(PARENT_ROOT) not in sys.path:
    sys.path.insert(0, str(PARENT_ROOT))

from roster_calendar.scraper import event_builder
from roster_calendar.scraper.models import AllDayEvent, TimedEvent
from roster_calendar.scraper.session import RosterSession


def make_session(**kwargs) -> RosterSession:
    session = RosterSession(**kwargs)
    session.set_anchor("Period: 01Jan24")
    return session


def wall_clock(moment: datetime) -> tuple[date, time]:
    return moment.date(), moment.time()


def test_scenario_flight_and_check_in():
    session = make_session(duty_titles={"C/I": "Check-In"})
    for line in ("Mon01", "EW 123 BER 0600 0800 PMI", "C/I BER 0530"):
        session.feed_line(line)

    assert len(session.events) == 2, f"Expected 2 events, got {session.events}"
    flight, check_in = session.events

    assert isinstance(flight, TimedEvent)
    assert flight.title == "EW 123 BER-PMI"
    assert flight.location_code == "BER"
    assert wall_clock(flight.start) == (date(2024, 1, 1), time(6, 0))
    assert wall_clock(flight.end) == (date(2024, 1, 1), time(8, 0))

    assert isinstance(check_in, TimedEvent)
    assert check_in.title == "Check-In"
    assert check_in.location_code == "BER"
    assert wall_clock(check_in.start) == (date(2024, 1, 1), time(5, 30))
    assert check_in.end - check_in.start == timedelta(minutes=30)


def test_scenario_off_day():
    session = make_session(duty_titles={"OFF": "Day Off"})
    event = session.feed_line("OFF")

    assert isinstance(event, AllDayEvent)
    assert event.title == "Day Off"
    assert event.day == date(2024, 1, 1)
    assert session.events == [event]


def test_unknown_off_code_keeps_raw_title():
    session = make_session(duty_titles={"OFF": "Day Off"})
    event = session.feed_line("KCC-FLD")
    assert event is not None and event.title == "KCC-FLD"


def test_overnight_flight_ends_next_day():
    session = make_session()
    session.feed_line("Wed03")
    event = session.feed_line("EW 9471 DUS 2350 0130 HER")

    assert wall_clock(event.start) == (date(2024, 1, 3), time(23, 50))
    assert wall_clock(event.end) == (date(2024, 1, 4), time(1, 30))
    assert event.end >= event.start


def test_duty_without_location():
    session = make_session(duty_titles={"Pick Up": "Hotel Pick Up"})
    event = session.feed_line("Pick Up 0415")
    assert event.title == "Hotel Pick Up"
    assert event.location_code is None
    assert event.timezone_name == "UTC"


def test_identical_line_emits_once():
    session = make_session()
    first = session.feed_line("EW 123 BER 0600 0800 PMI")
    second = session.feed_line("EW 123 BER 0600 0800 PMI")

    assert first is not None
    assert second is None, "Duplicate line must not emit a second event"
    assert len(session.events) == 1
    assert len(session.dedup) == 1


def test_overlapping_columns_emit_once():
    session = make_session(duty_titles={"OFF": "Day Off"})
    session.feed_block("Tue02\nOFF")
    session.feed_block("Tue02\nOFF\nWed03\nOFF")

    days = [event.day for event in session.events]
    assert days == [date(2024, 1, 2), date(2024, 1, 3)], f"Got {days}"


def test_same_title_different_start_is_not_duplicate():
    session = make_session()
    session.feed_line("S/U CGN 0500")
    session.feed_line("S/U CGN 1100")
    assert len(session.events) == 2


def test_stop_marker_excludes_footer_lines():
    session = make_session()
    session.feed_block("Mon01\nOFF\nHotels\nU\nEW 555 BER 1000 1200 PMI")
    assert [event.title for event in session.events] == ["OFF"]


def test_day_markers_roll_month():
    session = RosterSession()
    session.set_anchor("Period: 28Jan24")
    session.feed_block("Sun28\nOFF\nThu01\nVAC")

    assert [(e.title, e.day) for e in session.events] == [
        ("OFF", date(2024, 1, 28)),
        ("VAC", date(2024, 2, 1)),
    ]
    assert session.current_date == date(2024, 2, 1)


def test_invalid_time_skips_only_that_event():
    session = make_session()
    assert session.feed_line("C/I BER 2561") is None
    assert session.feed_line("EW 123 BER 0600 2400 PMI") is None

    event = session.feed_line("C/I BER 0530")
    assert event is not None
    assert len(session.events) == 1


def test_feed_line_collapses_repeated_spaces():
    session = make_session()
    event = session.feed_line("  EW  123 BER   0600 0800  PMI ")
    assert event is not None, "Extra whitespace must not hide a flight"
    assert event.title == "EW 123 BER-PMI"


def test_unexpected_build_failure_skips_only_that_event(monkeypatch):
    session = make_session()

    def broken_uid():
        raise RuntimeError("uid source unavailable")

    monkeypatch.setattr(event_builder, "new_uid", broken_uid)
    assert session.feed_line("OFF") is None
    assert session.events == []

    monkeypatch.undo()
    event = session.feed_line("OFF")
    assert event is not None, "A failed build must not consume the dedup key"
    assert len(session.events) == 1


def test_location_timezone_applied_to_instant():
    session = make_session(location_zones={"BER": "Europe/Berlin"})
    event = session.feed_line("EW 123 BER 0600 0800 PMI")

    assert event.timezone_name == "Europe/Berlin"
    assert event.start.utcoffset() == timedelta(hours=1)
    assert event.start.time() == time(6, 0)


def test_unknown_timezone_falls_back():
    session = make_session(location_zones={"BER": "Mars/Olympus_Mons"})
    event = session.feed_line("C/I BER 0530")
    assert event.timezone_name == "Europe/Berlin"


def test_legacy_mode_uses_process_local_zone():
    session = make_session(
        location_zones={"BER": "Europe/Berlin"},
        apply_location_timezone=False,
    )
    event = session.feed_line("EW 123 BER 0600 0800 PMI")

    assert isinstance(event.start.tzinfo, tz.tzlocal)
    assert event.timezone_name == "Europe/Berlin"
    assert event.start.time() == time(6, 0)


def test_unique_ids():
    session = make_session()
    session.feed_block("Mon01\nOFF\nTue02\nOFF\nWed03\nOFF")
    uids = {event.uid for event in session.events}
    assert len(uids) == 3


def test_feeding_before_anchor_fails():
    session = RosterSession()
    with pytest.raises(RuntimeError):
        session.feed_line("OFF")


if __name__ == "__main__":
    sys.exit(pytest.main([__file__, "-v"]))
