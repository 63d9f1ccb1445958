"""Tests for period anchor resolution and day-marker date rollover."""

from __future__ import annotations

import sys
from datetime import date
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent
PARENT_ROOT = PROJECT_ROOT.parent
if str(PARENT_ROOT) not in sys.path:
    sys.path.insert(0, str(PARENT_ROOT))

from roster_calendar.scraper.date_cursor import DateCursor
from roster_calendar.scraper.period_anchor import PeriodAnchorError, resolve_period_anchor


def test_period_anchor_from_header():
    """Period: 01Jan24 anchors the run on January 1, 2024."""
    anchor = resolve_period_anchor("Crew Roster\nPeriod: 01Jan24 - 31Jan24\nName: X")
    assert anchor == date(2024, 1, 1), f"Expected 2024-01-01, got {anchor}"


def test_period_anchor_mid_month():
    assert resolve_period_anchor("Period:  15Sep25") == date(2025, 9, 15)


@pytest.mark.parametrize(
    "header",
    [
        "",
        None,
        "No period here",
        "Period: 01jan24",  # month abbreviations are case-sensitive
        "Period: 31Feb24",
    ],
)
def test_period_anchor_missing_is_fatal(header):
    with pytest.raises(PeriodAnchorError):
        resolve_period_anchor(header)


def test_same_month_only_day_changes():
    cursor = DateCursor(date(2024, 3, 5))
    assert cursor.advance_to_day(5)
    assert cursor.current == date(2024, 3, 5)
    assert cursor.advance_to_day(17)
    assert cursor.current == date(2024, 3, 17), f"Got {cursor.current}"


def test_smaller_day_rolls_month():
    cursor = DateCursor(date(2024, 3, 30))
    assert cursor.advance_to_day(2)
    assert cursor.current == date(2024, 4, 2), f"Got {cursor.current}"


def test_rollover_from_month_end_into_shorter_month():
    cursor = DateCursor(date(2024, 1, 31))
    assert cursor.advance_to_day(1)
    assert cursor.current == date(2024, 2, 1)


def test_december_rolls_into_next_year():
    cursor = DateCursor(date(2024, 12, 30))
    assert cursor.advance_to_day(2)
    assert cursor.current == date(2025, 1, 2), f"Got {cursor.current}"


def test_invalid_day_keeps_cursor():
    cursor = DateCursor(date(2024, 4, 29))
    assert not cursor.advance_to_day(31), "April has no 31st"
    assert cursor.current == date(2024, 4, 29)

    assert not cursor.advance_to_day(0)
    assert cursor.current == date(2024, 4, 29)


def test_invalid_rollover_target_keeps_cursor():
    cursor = DateCursor(date(2024, 1, 31))
    # rolls to February, which has no 30th
    assert not cursor.advance_to_day(30)
    assert cursor.current == date(2024, 1, 31)


if __name__ == "__main__":
    sys.exit(pytest.main([__file__, "-v"]))
