"""
Ramadan calendar pipeline functions.
"""

from typing import Dict, Any

from puasa.ramadan.calendar import RamadanCalendar, UNSUPPORTED_YEAR


def get_window_pipeline(calendar: RamadanCalendar, year: int) -> Dict[str, Any]:
    """
    Describe the configured window of a year.

    Returns:
        dict with ok, year and window bounds, or ok=False with reason
    """
    window = calendar.lookup(year)
    if window is None:
        return {"ok": False, "year": year, "reason": UNSUPPORTED_YEAR}

    return {
        "ok": True,
        "year": year,
        "startDate": window.startDate,
        "endDate": window.endDate,
        "lengthDays": window.lengthDays,
    }


def get_days_pipeline(calendar: RamadanCalendar, year: int) -> Dict[str, Any]:
    """
    List the numbered days of a year's window.

    Returns:
        dict with ok, year and days (empty with reason when unsupported)
    """
    if calendar.lookup(year) is None:
        return {"ok": False, "year": year, "days": [], "reason": UNSUPPORTED_YEAR}

    return {
        "ok": True,
        "year": year,
        "days": [day.model_dump() for day in calendar.list_days(year)],
    }
