"""Extract the roster period start date from the first page header."""

from __future__ import annotations

import logging
import re
from datetime import date
from typing import Optional

from roster_calendar import config

logger = logging.getLogger(__name__)

_PERIOD_PATTERN = re.compile(r"Period:\s+([0-9]{2})([A-Za-z]{3})([0-9]{2})")


class PeriodAnchorError(RuntimeError):
    """Raised when no usable roster period start date is found."""


def resolve_period_anchor(header_text: Optional[str]) -> date:
    """Return the first date of the roster period, e.g. ``Period: 01Jan24``.

    Raises PeriodAnchorError when the header carries no valid period date;
    nothing downstream can be dated without it.
    """
    match = _PERIOD_PATTERN.search(header_text or "")
    if match is None:
        raise PeriodAnchorError("Could not find period start date in header")

    day = int(match.group(1))
    month_text = match.group(2)
    year = 2000 + int(match.group(3))

    if month_text not in config.MONTH_ABBREVIATIONS:
        raise PeriodAnchorError(f"Unknown month abbreviation: {month_text!r}")
    month = config.MONTH_ABBREVIATIONS.index(month_text) + 1

    try:
        anchor = date(year, month, day)
    except ValueError as exc:
        raise PeriodAnchorError(f"Invalid period start date {match.group(0)!r}: {exc}") from exc

    logger.info(f"Base date set: {anchor.isoformat()}")
    return anchor
