"""CLI orchestrator for the duty roster to calendar converter."""

from __future__ import annotations

import logging
from collections import Counter
from pathlib import Path
from typing import Optional

from roster_calendar import config
from roster_calendar.io import lookup_tables, parse_output, save_csv, save_ics
from roster_calendar.scraper import pdf_regions
from roster_calendar.scraper.models import AllDayEvent
from roster_calendar.scraper.period_anchor import PeriodAnchorError
from roster_calendar.scraper.session import RosterSession

logger = logging.getLogger(__name__)


def build_session() -> RosterSession:
    """Load the lookup tables and return a fresh session."""
    return RosterSession(
        duty_titles=lookup_tables.load_duty_titles(config.DUTY_TABLE_PATH),
        location_zones=lookup_tables.load_location_zones(config.LOCATION_TABLE_PATH),
        apply_location_timezone=config.APPLY_LOCATION_TIMEZONE,
    )


def parse_roster(pdf_path: Path, session: Optional[RosterSession] = None) -> RosterSession:
    """Run the full roster parse for one PDF and return the filled session.

    Raises FileNotFoundError for a missing input and PeriodAnchorError when
    the first page carries no period start date.
    """
    session = session or build_session()

    with pdf_regions.open_roster(pdf_path) as pdf:
        logger.info(f"Processing {Path(pdf_path).name} ({len(pdf.pages)} pages)")
        session.set_anchor(pdf_regions.period_header_text(pdf))

        for page_number, blocks in pdf_regions.iter_column_blocks(pdf):
            before = len(session.events)
            for block in blocks:
                session.feed_block(block, config.STOP_MARKERS)
            logger.info(f"Page {page_number}: {len(session.events) - before} events")

    return session


def print_csv_summary(csv_path: Path) -> None:
    """Print a summary of the exported events CSV."""
    df = parse_output.parse_events_csv(csv_path)
    summary = parse_output.get_events_summary(df)
    print(f"Events: {summary['total_events']} ({summary['all_day_events']} all-day)")
    if summary["date_range"]:
        print(f"Date Range: {summary['date_range']['start']} to {summary['date_range']['end']}")
    if summary["titles"]:
        print("Top Titles:")
        for title, count in sorted(summary["titles"].items(), key=lambda x: x[1], reverse=True)[:10]:
            print(f"  - {title}: {count}")


def main_run() -> None:
    """Convert the fixed input roster into the fixed output calendar.

    A missing input or period date is reported on the console and ends the
    run without writing anything.
    """
    try:
        session = parse_roster(config.INPUT_PDF)
    except FileNotFoundError:
        print(f"Error: {config.INPUT_PDF.name} not found.")
        return
    except PeriodAnchorError as exc:
        print(f"Critical Error: Could not find period start date! ({exc})")
        return

    output_path = save_ics.save_calendar_ics(session.events, config.OUTPUT_ICS)
    print(f"\nSUCCESS! Saved {len(session.events)} events to {output_path}")

    kinds = Counter("all-day" if isinstance(e, AllDayEvent) else "timed" for e in session.events)
    print("Event distribution:", dict(kinds))

    if config.EXPORT_CSV:
        if not session.events:
            print("No events to export as CSV.")
            return
        csv_path = save_csv.save_events_csv(session.events, config.OUTPUT_CSV)
        print(f"Saved CSV to {csv_path}")
        print_csv_summary(csv_path)


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    try:
        main_run()
    except Exception:
        logger.exception("Roster conversion failed")


if __name__ == "__main__":
    main()
