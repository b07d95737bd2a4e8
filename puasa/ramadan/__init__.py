"""
Ramadan Calendar

Configured Ramadan windows per year, day listing and day seeding.
"""

from puasa.ramadan.calendar import RamadanCalendar, UNSUPPORTED_YEAR
from puasa.ramadan.services.ramadan_days_service import RamadanDaysService

__all__ = [
    "RamadanCalendar",
    "RamadanDaysService",
    "UNSUPPORTED_YEAR",
]
