"""
Check-in system pipeline functions.

Stateless orchestration logic for check-in operations.
"""

import logging
from typing import Optional, Dict, Any

from puasa.checkin.models import CheckinRecord, CheckinStatus
from puasa.checkin.services.checkin_service import CheckInService

logger = logging.getLogger(__name__)


async def submit_checkin_pipeline(
    checkin_service: CheckInService,
    year: int,
    date: str,
    status: CheckinStatus,
    reason: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Orchestrates the check-in submission flow.

    Args:
        checkin_service: For validation and persistence
        year: Ramadan year
        date: YYYY-MM-DD day being checked in
        status: fasting or not_fasting
        reason: Free text, required when not fasting

    Returns:
        {"ok": True} or {"ok": False, "reason": "locked" | "reason_too_short"}
    """
    result = await checkin_service.submit(year, date, status, reason)

    if result.ok:
        return {"ok": True}
    return {"ok": False, "reason": result.reason.value}


async def get_checkin_pipeline(
    checkin_service: CheckInService,
    year: int,
    date: str,
) -> Optional[Dict[str, Any]]:
    """
    Get the check-in stored for a day.

    Args:
        checkin_service: For data retrieval
        year: Ramadan year
        date: YYYY-MM-DD

    Returns:
        Formatted check-in dict or None
    """
    checkin = await checkin_service.get_checkin(year, date)
    return _format_checkin(checkin) if checkin else None


def get_allowed_dates_pipeline(
    checkin_service: CheckInService,
    time_zone: Optional[str] = None,
) -> Dict[str, str]:
    """
    Get the dates offered for check-in in the caller's zone.

    Args:
        checkin_service: For date resolution
        time_zone: Optional IANA zone

    Returns:
        dict with timeZone, todayISO, yesterdayISO
    """
    return checkin_service.get_allowed_dates(time_zone)


def _format_checkin(checkin: CheckinRecord) -> Dict[str, Any]:
    """Format check-in record for API response."""
    return {
        "year": checkin.year,
        "date": checkin.date,
        "status": checkin.status.value,
        "reason": checkin.reason,
        "createdAt": checkin.createdAt,
    }
