"""
Ramadan day seeding service.

Persists the numbered days of a window so other tools can query them
from the shared database.
"""

import logging
from typing import Any, Dict, List

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import BulkWriteError, DuplicateKeyError

from puasa.ramadan.calendar import RamadanCalendar, UNSUPPORTED_YEAR
from puasa.ramadan.models import RamadanWindow

logger = logging.getLogger(__name__)

DUPLICATE_KEY = 11000


class RamadanDaysService:
    """
    Seeds and reads the ramadanDays collection.
    """

    def __init__(self, db: AsyncIOMotorDatabase, calendar: RamadanCalendar):
        """
        Initialize RamadanDaysService.

        Args:
            db: MongoDB database connection
            calendar: Configured Ramadan calendar
        """
        self._calendar = calendar
        self._days_collection = db["ramadanDays"]

    async def seed(self, year: int) -> Dict[str, Any]:
        """
        Insert every day of the year's window, once.

        Seeding is skipped when any day already exists for the year.

        Args:
            year: Gregorian year

        Returns:
            dict with ok, seeded, startDate and lengthDays,
            or ok=False with reason "unsupported_year"
        """
        window = self._calendar.lookup(year)
        if window is None:
            return {"ok": False, "reason": UNSUPPORTED_YEAR}

        existing = await self._days_collection.find_one({"year": year})
        if existing:
            logger.info(f"Ramadan days for {year} already seeded")
            return self._result(window, seeded=False)

        documents = [
            {"year": day.year, "dateISO": day.date, "dayNumber": day.dayNumber}
            for day in self._calendar.list_days(year)
        ]
        try:
            await self._days_collection.insert_many(documents)
        except DuplicateKeyError:
            logger.info(f"Ramadan days for {year} were seeded concurrently")
            return self._result(window, seeded=False)
        except BulkWriteError as e:
            write_errors = e.details.get("writeErrors", [])
            if not write_errors or any(err.get("code") != DUPLICATE_KEY for err in write_errors):
                raise
            # Another run inserted the same days first
            logger.info(f"Ramadan days for {year} were seeded concurrently")
            return self._result(window, seeded=False)

        logger.info(f"Seeded {len(documents)} Ramadan days for {year}")
        return self._result(window, seeded=True)

    @staticmethod
    def _result(window: RamadanWindow, seeded: bool) -> Dict[str, Any]:
        return {
            "ok": True,
            "seeded": seeded,
            "startDate": window.startDate,
            "lengthDays": window.lengthDays,
        }

    async def get_days(self, year: int) -> List[Dict[str, Any]]:
        """
        Read the seeded days of a year, ordered by day number.

        Args:
            year: Gregorian year

        Returns:
            List of {year, date, dayNumber} dicts
        """
        cursor = self._days_collection.find({"year": year})
        cursor = cursor.sort("dayNumber", 1)
        documents = await cursor.to_list(length=None)

        return [
            {"year": d["year"], "date": d["dateISO"], "dayNumber": d["dayNumber"]}
            for d in documents
        ]
