"""Turn classified roster lines into calendar event records."""

from __future__ import annotations

import uuid
from datetime import date, datetime, timedelta
from typing import Mapping, Optional

from roster_calendar import config
from roster_calendar.scraper import parse_utils
from roster_calendar.scraper.models import (
    AllDayEvent,
    DedupKey,
    Duty,
    EventRecord,
    Flight,
    OffDuty,
    TimedEvent,
)


def new_uid() -> str:
    return str(uuid.uuid4())


def flight_title(flight: Flight, carrier: str = config.CARRIER_MARKER) -> str:
    return f"{carrier} {flight.number} {flight.departure_code}-{flight.arrival_code}"


def lookup_title(code: str, duty_titles: Mapping[str, str]) -> str:
    """Display title for a duty or off-duty code, falling back to the code itself."""
    return duty_titles.get(code, code)


def dedup_key(event: EventRecord) -> DedupKey:
    """Composite key used to emit each logical occurrence only once."""
    if isinstance(event, AllDayEvent):
        return (event.day, event.title, None)
    return (event.day, event.title, event.start.time())


def build_timed_event(
    title: str,
    day: date,
    start_raw: str,
    end_raw: Optional[str],
    location_code: Optional[str],
    location_zones: Mapping[str, str],
    apply_location_timezone: bool = config.APPLY_LOCATION_TIMEZONE,
) -> TimedEvent:
    """Build a timed event from raw ``HHMM`` readings on ``day``.

    Without an end reading the event lasts DUTY_DURATION_MINUTES. An end
    reading earlier than the start means the event ends the next day.
    Raises ValueError on malformed times.
    """
    start_clock = parse_utils.parse_hhmm(start_raw)
    naive_start = datetime.combine(day, start_clock)

    if end_raw is None:
        naive_end = naive_start + timedelta(minutes=config.DUTY_DURATION_MINUTES)
    else:
        end_clock = parse_utils.parse_hhmm(end_raw)
        naive_end = datetime.combine(day, end_clock)
        if end_clock < start_clock:
            naive_end += timedelta(days=1)

    timezone_name = parse_utils.resolve_timezone_name(location_code, location_zones)
    instant_zone = timezone_name if apply_location_timezone else None

    return TimedEvent(
        title=title,
        start=parse_utils.localize(naive_start, instant_zone),
        end=parse_utils.localize(naive_end, instant_zone),
        uid=new_uid(),
        location_code=location_code or None,
        timezone_name=timezone_name,
    )


def build_event(
    classification,
    day: date,
    duty_titles: Mapping[str, str],
    location_zones: Mapping[str, str],
    carrier: str = config.CARRIER_MARKER,
    apply_location_timezone: bool = config.APPLY_LOCATION_TIMEZONE,
) -> Optional[EventRecord]:
    """Synthesize the event for a non day-marker classification.

    Returns None for classifications that never produce an event.
    """
    if isinstance(classification, Flight):
        return build_timed_event(
            flight_title(classification, carrier),
            day,
            classification.start_time,
            classification.end_time,
            classification.departure_code,
            location_zones,
            apply_location_timezone,
        )

    if isinstance(classification, Duty):
        return build_timed_event(
            lookup_title(classification.type_code, duty_titles),
            day,
            classification.time,
            None,
            classification.location_code,
            location_zones,
            apply_location_timezone,
        )

    if isinstance(classification, OffDuty):
        return AllDayEvent(
            title=lookup_title(classification.code, duty_titles),
            day=day,
            uid=new_uid(),
        )

    return None
