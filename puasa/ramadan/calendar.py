"""
Ramadan calendar configuration.

Ramadan start dates follow the lunar calendar and are announced, not
computed, so each supported year is an explicit table entry. Adding a
year means adding an entry here or in RAMADAN_WINDOWS.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional

from common.utils.dates import add_days, is_iso_date
from puasa.ramadan.models import RamadanWindow, RamadanDay

logger = logging.getLogger(__name__)


UNSUPPORTED_YEAR = "unsupported_year"

RAMADAN_CONFIG_BY_YEAR: Dict[int, Dict[str, Any]] = {
    2026: {"startDate": "2026-02-19", "lengthDays": 29},
}


class RamadanCalendar:
    """
    Immutable year -> window lookup table.

    Built once at startup and passed to the services that need it.
    """

    def __init__(self, windows: Mapping[int, RamadanWindow]):
        self._windows: Dict[int, RamadanWindow] = dict(windows)

    @classmethod
    def from_config(
        cls,
        overrides: Optional[Mapping[Any, Mapping[str, Any]]] = None,
    ) -> "RamadanCalendar":
        """
        Build the calendar from the built-in table plus overrides.

        Args:
            overrides: Mapping of year (int or str) to
                {"startDate": "YYYY-MM-DD", "lengthDays": int}

        Returns:
            RamadanCalendar

        Raises:
            ValueError: If any entry is malformed
        """
        windows: Dict[int, RamadanWindow] = {
            year: _parse_window(year, entry)
            for year, entry in RAMADAN_CONFIG_BY_YEAR.items()
        }
        overridden: set = set()
        errors: List[str] = []

        for key, entry in (overrides or {}).items():
            try:
                window = _parse_window(key, entry)
            except ValueError as e:
                errors.append(str(e))
                continue
            if window.year in overridden:
                errors.append(f"Duplicate Ramadan window for year {window.year}")
                continue
            overridden.add(window.year)
            windows[window.year] = window

        if errors:
            raise ValueError("Invalid Ramadan windows:\n- " + "\n- ".join(errors))

        logger.debug(f"Ramadan calendar loaded for years: {sorted(windows)}")
        return cls(windows)

    def lookup(self, year: int) -> Optional[RamadanWindow]:
        """Get the window for ``year``, or None if the year is unsupported."""
        return self._windows.get(year)

    def supported_years(self) -> List[int]:
        return sorted(self._windows)

    def list_days(self, year: int) -> List[RamadanDay]:
        """
        Enumerate the days of a window.

        Returns:
            Days numbered 1..lengthDays, empty for an unsupported year
        """
        window = self.lookup(year)
        if window is None:
            return []

        return [
            RamadanDay(
                year=year,
                date=add_days(window.startDate, offset),
                dayNumber=offset + 1,
            )
            for offset in range(window.lengthDays)
        ]


def _parse_window(key: Any, entry: Mapping[str, Any]) -> RamadanWindow:
    """Validate a single raw table entry."""
    try:
        year = int(key)
    except (TypeError, ValueError):
        raise ValueError(f"Year key {key!r} is not an integer")

    if not isinstance(entry, Mapping):
        raise ValueError(f"Entry for {year} must be an object")

    start = entry.get("startDate")
    if not isinstance(start, str) or not is_iso_date(start):
        raise ValueError(f"startDate for {year} must be a YYYY-MM-DD date")
    if int(start[:4]) != year:
        raise ValueError(f"startDate {start} does not fall in {year}")

    length = entry.get("lengthDays")
    if isinstance(length, bool) or not isinstance(length, int) or length <= 0:
        raise ValueError(f"lengthDays for {year} must be a positive integer")

    return RamadanWindow(year=year, startDate=start, lengthDays=length)
