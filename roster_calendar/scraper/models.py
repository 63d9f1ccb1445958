"""Shared data models for the duty roster parser."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Optional, Tuple, Union


# ---------------------------------------------------------------------------
# Line classifications
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class DayMarker:
    """Weekday + day-of-month header such as ``Mon01``."""

    day_of_month: int


@dataclass(frozen=True, slots=True)
class Flight:
    """Flight leg line, e.g. ``EW 123 BER 0600 0800 PMI``."""

    number: str
    departure_code: str
    arrival_code: str
    start_time: str  # raw "HHMM"
    end_time: str  # raw "HHMM"


@dataclass(frozen=True, slots=True)
class Duty:
    """Ground duty with a single clock reading (check-in, pick up, standby)."""

    type_code: str
    time: str  # raw "HHMM"
    location_code: Optional[str] = None


@dataclass(frozen=True, slots=True)
class OffDuty:
    """Whole-day code such as OFF or VAC."""

    code: str
    location_code: Optional[str] = None


@dataclass(frozen=True, slots=True)
class Unrecognized:
    line: str


LineClassification = Union[DayMarker, Flight, Duty, OffDuty, Unrecognized]


# ---------------------------------------------------------------------------
# Event records
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class TimedEvent:
    """Calendar entry with a start and end instant."""

    title: str
    start: datetime
    end: datetime
    uid: str
    location_code: Optional[str] = None
    timezone_name: Optional[str] = None

    @property
    def day(self) -> date:
        return self.start.date()


@dataclass(slots=True)
class AllDayEvent:
    """Calendar entry covering a whole date."""

    title: str
    day: date
    uid: str


EventRecord = Union[TimedEvent, AllDayEvent]

# (date, title, start time-of-day); time is None for all-day events
DedupKey = Tuple[date, str, Optional[time]]
