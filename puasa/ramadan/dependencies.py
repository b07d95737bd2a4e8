"""
FastAPI dependencies for the Ramadan calendar.
"""

from typing import Optional

from puasa.ramadan.calendar import RamadanCalendar


_ramadan_calendar: Optional[RamadanCalendar] = None


def init_ramadan_services(calendar: RamadanCalendar) -> None:
    """
    Register the calendar loaded at startup.

    Args:
        calendar: Configured Ramadan calendar
    """
    global _ramadan_calendar

    _ramadan_calendar = calendar


def get_ramadan_calendar() -> RamadanCalendar:
    """Get the Ramadan calendar instance."""
    if _ramadan_calendar is None:
        raise RuntimeError("Ramadan calendar not initialized. Call init_ramadan_services first.")
    return _ramadan_calendar
