"""
Fasting progress service.

Combines the Ramadan calendar with stored check-ins to summarize
progress as of a given date.
"""

import logging

from common.utils.dates import compare_iso, days_between
from puasa.checkin.models import CheckinStatus
from puasa.checkin.services.checkin_store import CheckinStore
from puasa.progress.models import ProgressSummary
from puasa.ramadan.calendar import RamadanCalendar

logger = logging.getLogger(__name__)


class ProgressService:
    """
    Read-only progress summaries over a Ramadan window.
    """

    def __init__(self, calendar: RamadanCalendar, store: CheckinStore):
        """
        Initialize ProgressService.

        Args:
            calendar: Configured Ramadan calendar
            store: Check-in store
        """
        self._calendar = calendar
        self._store = store

    async def compute_summary(self, year: int, as_of_date: str) -> ProgressSummary:
        """
        Summarize progress for ``year`` as of ``as_of_date``.

        daysSoFar is the 1-based day of the window on as_of_date, clamped
        to [0, totalDays]. fastingCount counts fasting check-ins dated in
        [startDate, as_of_date], so later check-ins never count early.

        Args:
            year: Gregorian year of the window
            as_of_date: YYYY-MM-DD cut-off date

        Returns:
            ProgressSummary, ok=False with reason "unsupported_year"
            when the year has no window
        """
        window = self._calendar.lookup(year)
        if window is None:
            logger.debug(f"No Ramadan window configured for {year}")
            return ProgressSummary.unsupported_year()

        total_days = window.lengthDays
        start = window.startDate

        days_so_far = 0
        if compare_iso(as_of_date, start) >= 0:
            elapsed = days_between(start, as_of_date) + 1
            days_so_far = min(max(elapsed, 0), total_days)

        checkins = await self._store.list_for_year(year)
        fasting_count = sum(
            1
            for c in checkins
            if compare_iso(c.date, start) >= 0
            and compare_iso(c.date, as_of_date) <= 0
            and c.status == CheckinStatus.FASTING
        )

        return ProgressSummary(
            ok=True,
            totalDays=total_days,
            daysSoFar=days_so_far,
            fastingCount=fasting_count,
            startDate=start,
        )
