"""Parsing helpers for roster times and timezones."""

from __future__ import annotations

import logging
from datetime import datetime, time, tzinfo
from typing import Mapping, Optional

import pytz
from dateutil import tz

from roster_calendar import config

logger = logging.getLogger(__name__)


def clean_text(value: Optional[str]) -> Optional[str]:
    """Normalize whitespace and strip strings."""
    if value is None:
        return None
    return " ".join(value.split()).strip() or None


def split_lines(block: Optional[str]) -> list[str]:
    """Return the whitespace-normalized, non-empty lines of a text block."""
    if not block:
        return []
    lines = (clean_text(line) for line in block.splitlines())
    return [line for line in lines if line]


def parse_hhmm(raw_text: str) -> time:
    """Parse a four digit ``HHMM`` clock reading.

    Raises ValueError for anything that is not a valid time of day.
    """
    if len(raw_text) != 4 or not raw_text.isdigit():
        raise ValueError(f"Not an HHMM time: {raw_text!r}")
    return datetime.strptime(raw_text, "%H%M").time()


def resolve_timezone_name(
    location_code: Optional[str],
    location_zones: Mapping[str, str],
) -> str:
    """Map a location code to a tz database name.

    Missing or empty codes use the primary default; identifiers the tz
    database does not know use the secondary default.
    """
    name = location_zones.get(location_code, config.DEFAULT_TIMEZONE) if location_code else config.DEFAULT_TIMEZONE
    try:
        pytz.timezone(name)
    except pytz.UnknownTimeZoneError:
        logger.warning(f"Unknown timezone {name!r} for {location_code!r}, using {config.FALLBACK_TIMEZONE}")
        return config.FALLBACK_TIMEZONE
    return name


def localize(naive: datetime, timezone_name: Optional[str]) -> datetime:
    """Attach a zone to a naive wall-clock datetime.

    With a timezone name the wall-clock time is read in that zone; without
    one it is read in the process-local zone.
    """
    if timezone_name is None:
        return naive.replace(tzinfo=local_zone())
    return pytz.timezone(timezone_name).localize(naive)


def local_zone() -> tzinfo:
    return tz.tzlocal()
