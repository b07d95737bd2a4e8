#!/usr/bin/env python3
"""
Seed script for the ramadanDays collection.

This script:
1. Loads the Ramadan calendar (built-in table plus RAMADAN_WINDOWS)
2. Inserts one document per window day for the requested year
3. Does nothing if the year was already seeded

Usage:
    python scripts/seed_ramadan_days.py 2026

Environment variables (or .env):
    MONGODB_URI - MongoDB connection string
    MONGODB_DATABASE - Database name (default: waktunya_puasa)
    RAMADAN_WINDOWS - Optional extra windows as JSON
"""

import argparse
import asyncio
import os
import sys

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from common.database import MongoDB
from puasa.config import settings
from puasa.ramadan.calendar import RamadanCalendar
from puasa.ramadan.models import RamadanDayDocument
from puasa.ramadan.services.ramadan_days_service import RamadanDaysService


async def seed_days(year: int) -> int:
    """Seed the days of ``year``. Returns a process exit code."""
    calendar = RamadanCalendar.from_config(settings.RAMADAN_WINDOWS)

    print(f"Connecting to database: {settings.MONGODB_DATABASE}")
    db = MongoDB()
    await db.connect(
        uri=settings.MONGODB_URI,
        database_name=settings.MONGODB_DATABASE,
        document_models=[RamadanDayDocument],
    )

    try:
        service = RamadanDaysService(db=db.db, calendar=calendar)
        result = await service.seed(year)

        if not result["ok"]:
            print(f"ERROR: no Ramadan window configured for {year}")
            print(f"Supported years: {calendar.supported_years()}")
            return 1

        if result["seeded"]:
            print(f"Seeded {result['lengthDays']} days starting {result['startDate']}")
        else:
            print(f"{year} was already seeded. Nothing to do.")

        days = await service.get_days(year)
        print(f"ramadanDays now holds {len(days)} days for {year}")
        return 0
    finally:
        await db.disconnect()


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed Ramadan days into MongoDB")
    parser.add_argument("year", type=int, help="Gregorian year, e.g. 2026")
    args = parser.parse_args()

    sys.exit(asyncio.run(seed_days(args.year)))


if __name__ == "__main__":
    main()
