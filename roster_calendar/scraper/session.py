"""Per-run parsing state for one roster document."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Iterable, List, Mapping, Optional, Sequence

from roster_calendar import config
from roster_calendar.filters.stop_markers import apply_stop_markers
from roster_calendar.io.dedupe import DedupSet
from roster_calendar.io.lookup_tables import EMPTY_TABLE
from roster_calendar.scraper import event_builder, parse_utils
from roster_calendar.scraper.date_cursor import DateCursor
from roster_calendar.scraper.line_classifier import LineRule, build_rules, classify_line
from roster_calendar.scraper.models import AllDayEvent, DayMarker, EventRecord, Unrecognized
from roster_calendar.scraper.period_anchor import resolve_period_anchor

logger = logging.getLogger(__name__)


@dataclass
class RosterSession:
    """Everything one parsing run reads and mutates.

    The cursor is created by :meth:`set_anchor`; lines fed before that raise
    RuntimeError. ``events`` is the append-only calendar for the run.
    """

    duty_titles: Mapping[str, str] = field(default_factory=lambda: EMPTY_TABLE)
    location_zones: Mapping[str, str] = field(default_factory=lambda: EMPTY_TABLE)
    carrier: str = config.CARRIER_MARKER
    apply_location_timezone: bool = config.APPLY_LOCATION_TIMEZONE
    cursor: Optional[DateCursor] = None
    dedup: DedupSet = field(default_factory=DedupSet)
    events: List[EventRecord] = field(default_factory=list)
    rules: Sequence[LineRule] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.rules = build_rules(self.carrier)

    @property
    def current_date(self) -> Optional[date]:
        return self.cursor.current if self.cursor else None

    def set_anchor(self, header_text: Optional[str]) -> date:
        """Initialise the cursor from the period header. Raises PeriodAnchorError."""
        anchor = resolve_period_anchor(header_text)
        self.cursor = DateCursor(anchor)
        return anchor

    def feed_block(
        self,
        text: Optional[str],
        stop_markers: Iterable[str] = config.STOP_MARKERS,
    ) -> List[EventRecord]:
        """Stop-filter a column block and feed its lines in order."""
        emitted = []
        for line in parse_utils.split_lines(apply_stop_markers(text, stop_markers)):
            event = self.feed_line(line)
            if event is not None:
                emitted.append(event)
        return emitted

    def feed_line(self, line: str) -> Optional[EventRecord]:
        """Classify one line and emit its event, if any and not yet seen."""
        if self.cursor is None:
            raise RuntimeError("Period anchor must be set before feeding roster lines")

        line = parse_utils.clean_text(line)
        if not line:
            return None

        classification = classify_line(line, self.rules)
        if isinstance(classification, DayMarker):
            self.cursor.advance_to_day(classification.day_of_month)
            return None
        if isinstance(classification, Unrecognized):
            return None

        try:
            event = event_builder.build_event(
                classification,
                self.cursor.current,
                self.duty_titles,
                self.location_zones,
                carrier=self.carrier,
                apply_location_timezone=self.apply_location_timezone,
            )
        except Exception as exc:
            logger.warning(f"Error parsing event on line {line!r}: {exc}")
            return None
        if event is None:
            return None

        key = event_builder.dedup_key(event)
        if key in self.dedup:
            logger.debug(f"Duplicate skipped: {event.title} on {event.day.isoformat()}")
            return None
        self.dedup.insert(key)
        self.events.append(event)

        if isinstance(event, AllDayEvent):
            logger.info(f" + Added all-day: {event.title} on {event.day.isoformat()}")
        else:
            logger.info(f" + Added: {event.title} on {event.day.isoformat()}")
        return event
