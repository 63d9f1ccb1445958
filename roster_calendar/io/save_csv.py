"""CSV export of synthesized roster events."""

from __future__ import annotations

from datetime import date, datetime
from pathlib import Path
from typing import Iterable, List

import pandas as pd

from roster_calendar import config
from roster_calendar.io import dedupe
from roster_calendar.scraper.models import AllDayEvent, EventRecord

CSV_COLUMNS = ["uid", "title", "location", "start", "end", "all_day", "timezone"]


def _ensure_iso(value):
    if value is None:
        return None
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return str(value)


def event_to_row(record: EventRecord) -> dict:
    if isinstance(record, AllDayEvent):
        return {
            "uid": record.uid,
            "title": record.title,
            "location": None,
            "start": _ensure_iso(record.day),
            "end": None,
            "all_day": True,
            "timezone": None,
        }
    return {
        "uid": record.uid,
        "title": record.title,
        "location": record.location_code,
        "start": _ensure_iso(record.start),
        "end": _ensure_iso(record.end),
        "all_day": False,
        "timezone": record.timezone_name,
    }


def prepare_rows_for_csv(records: Iterable[EventRecord]) -> List[dict]:
    rows = [event_to_row(record) for record in records]
    return dedupe.dedupe_by_key(rows, keys=("start", "title"))


def save_events_csv(records: Iterable[EventRecord], output_path: Path = config.OUTPUT_CSV) -> Path:
    """Save events to a CSV file, one row per event, sorted by start then title."""
    prepared_rows = prepare_rows_for_csv(records)
    if not prepared_rows:
        raise RuntimeError("No events to save.")

    df = pd.DataFrame(prepared_rows, columns=CSV_COLUMNS)
    # starts carry different UTC offsets; order by the instant, not the text
    df["_start_utc"] = pd.to_datetime(df["start"], utc=True, format="ISO8601")
    df.sort_values(by=["_start_utc", "title"], inplace=True, ignore_index=True)
    df.drop(columns="_start_utc", inplace=True)

    output_path = Path(output_path)
    df.to_csv(output_path, index=False)
    return output_path
