"""
FastAPI dependencies for Check-in system.

Provides dependency injection for check-in-related services.
"""

from typing import Optional

from common.utils.dates import DEFAULT_TIMEZONE
from puasa.checkin.services.checkin_service import CheckInService
from puasa.checkin.services.checkin_store import CheckinStore


_checkin_service: Optional[CheckInService] = None


def init_checkin_services(
    store: CheckinStore,
    default_timezone: str = DEFAULT_TIMEZONE,
) -> None:
    """
    Initialize check-in services with the configured store.

    Called once at application startup.

    Args:
        store: Check-in persistence backend (local or MongoDB)
        default_timezone: Fall-back zone for date resolution
    """
    global _checkin_service

    _checkin_service = CheckInService(store=store, default_timezone=default_timezone)


def get_checkin_service() -> CheckInService:
    """Get check-in service instance."""
    if _checkin_service is None:
        raise RuntimeError("Check-in services not initialized. Call init_checkin_services first.")
    return _checkin_service
