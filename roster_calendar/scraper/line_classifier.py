"""Pattern rules that classify a single roster line."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

from roster_calendar import config
from roster_calendar.scraper.models import (
    DayMarker,
    Duty,
    Flight,
    LineClassification,
    OffDuty,
    Unrecognized,
)


@dataclass(frozen=True)
class LineRule:
    name: str
    pattern: re.Pattern
    build: Callable[[re.Match], LineClassification]


def _alternation(tokens: Sequence[str]) -> str:
    # longest first so DISP_FIX wins over DISP
    return "|".join(re.escape(token) for token in sorted(tokens, key=len, reverse=True))


def build_rules(carrier: str = config.CARRIER_MARKER) -> List[LineRule]:
    """Return the classification rules in priority order."""
    weekdays = _alternation(config.WEEKDAY_ABBREVIATIONS)
    duties = _alternation(config.DUTY_MARKERS)
    off_codes = _alternation(config.OFF_DUTY_CODES)

    return [
        LineRule(
            "day",
            re.compile(rf"^(?:{weekdays})(\d{{2}})"),
            lambda m: DayMarker(day_of_month=int(m.group(1))),
        ),
        LineRule(
            "flight",
            re.compile(
                rf"{re.escape(carrier)}\s?(\d{{2,4}})\s([A-Z]{{3}})\s(\d{{4}})\s(\d{{4}})\s([A-Z]{{3}})"
            ),
            lambda m: Flight(
                number=m.group(1),
                departure_code=m.group(2),
                start_time=m.group(3),
                end_time=m.group(4),
                arrival_code=m.group(5),
            ),
        ),
        LineRule(
            "duty",
            re.compile(rf"({duties})\s?([A-Z]{{3}})?\s?(\d{{4}})"),
            lambda m: Duty(type_code=m.group(1), location_code=m.group(2), time=m.group(3)),
        ),
        LineRule(
            "off",
            re.compile(rf"^({off_codes})(?:\s?([A-Z]{{3}}))?\b"),
            lambda m: OffDuty(code=m.group(1), location_code=m.group(2)),
        ),
    ]


DEFAULT_RULES = build_rules()


def classify_line(line: str, rules: Optional[Sequence[LineRule]] = None) -> LineClassification:
    """Classify one trimmed line; the first matching rule wins."""
    for rule in rules if rules is not None else DEFAULT_RULES:
        match = rule.pattern.search(line)
        if match:
            return rule.build(match)
    return Unrecognized(line=line)
