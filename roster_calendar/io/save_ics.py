"""iCalendar output for synthesized roster events."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from ics import Calendar, Event

from roster_calendar import config
from roster_calendar.scraper.models import AllDayEvent, EventRecord

logger = logging.getLogger(__name__)


def to_ics_event(record: EventRecord) -> Event:
    if isinstance(record, AllDayEvent):
        event = Event(name=record.title, begin=record.day, uid=record.uid)
        event.make_all_day()
        return event
    return Event(
        name=record.title,
        begin=record.start,
        end=record.end,
        uid=record.uid,
        location=record.location_code,
    )


def build_calendar(records: Iterable[EventRecord]) -> Calendar:
    """Build an ics Calendar holding one VEVENT per record."""
    calendar = Calendar(creator=config.CALENDAR_CREATOR)
    for record in records:
        calendar.events.add(to_ics_event(record))
    return calendar


def serialize_calendar(records: Iterable[EventRecord]) -> str:
    return "".join(build_calendar(records).serialize_iter())


def save_calendar_ics(records: Iterable[EventRecord], output_path: Path = config.OUTPUT_ICS) -> Path:
    """Write the events to an .ics file and return its path."""
    output_path = Path(output_path)
    content = serialize_calendar(records)
    with open(output_path, "w", encoding="utf-8", newline="") as handle:
        handle.write(content)
    logger.info(f"Wrote calendar to {output_path}")
    return output_path
