"""
FastAPI dependencies for Progress system.

Provides dependency injection for progress-related services.
"""

from typing import Optional

from puasa.checkin.services.checkin_store import CheckinStore
from puasa.progress.services.progress_service import ProgressService
from puasa.ramadan.calendar import RamadanCalendar


_progress_service: Optional[ProgressService] = None


def init_progress_services(
    calendar: RamadanCalendar,
    store: CheckinStore,
) -> None:
    """
    Initialize progress services.

    Called once at application startup.

    Args:
        calendar: Configured Ramadan calendar
        store: Check-in store the summaries are read from
    """
    global _progress_service

    _progress_service = ProgressService(calendar=calendar, store=store)


def get_progress_service() -> ProgressService:
    """Get progress service instance."""
    if _progress_service is None:
        raise RuntimeError("Progress services not initialized.")
    return _progress_service
