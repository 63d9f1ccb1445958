"""
Roster Calendar - duty roster PDF to iCalendar converter

Reads the left and right schedule columns of each roster page, keeps a
running current date across day-marker lines, and turns flight, duty and
off-duty lines into calendar events.

Usage:
    from roster_calendar import RosterSession

    session = RosterSession(duty_titles={"C/I": "Check-In"})
    session.set_anchor("Period: 01Jan24")
    session.feed_block("Mon01\\nC/I BER 0530")
    session.events
"""

from roster_calendar.scraper.period_anchor import PeriodAnchorError
from roster_calendar.scraper.session import RosterSession

__all__ = ["PeriodAnchorError", "RosterSession"]
