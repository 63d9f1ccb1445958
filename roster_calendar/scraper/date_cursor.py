"""Running "current date" for roster lines that only carry a day of month."""

from __future__ import annotations

import logging
from datetime import date

from dateutil.relativedelta import relativedelta

logger = logging.getLogger(__name__)


class DateCursor:
    """Mutable current date, moved forward by day-marker lines."""

    def __init__(self, anchor: date):
        self.current = anchor

    def advance_to_day(self, day_of_month: int) -> bool:
        """Move to ``day_of_month``, rolling into the next month when it is smaller.

        Returns False and leaves the cursor untouched if the target date does
        not exist (e.g. the 31st of a 30-day month).
        """
        if day_of_month < self.current.day:
            base = self.current.replace(day=1) + relativedelta(months=1)
        else:
            base = self.current

        try:
            self.current = base.replace(day=day_of_month)
        except ValueError:
            logger.warning(f"Invalid date for day {day_of_month} after {self.current.isoformat()}, skipping update")
            return False
        return True

    def __repr__(self) -> str:
        return f"DateCursor({self.current.isoformat()})"
