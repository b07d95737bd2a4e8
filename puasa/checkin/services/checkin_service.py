"""
Check-in submission service.

Handles the write-once check-in workflow and single-record lookups.
"""

import logging
from datetime import datetime, timezone
from typing import Dict, Optional

from common.utils.dates import DEFAULT_TIMEZONE, add_days, resolve_timezone, to_iso_date
from common.utils.exceptions import ServiceUnavailableException
from puasa.checkin.models import (
    CheckinRecord,
    CheckinStatus,
    RejectionReason,
    SubmitResult,
)
from puasa.checkin.services.checkin_store import CheckinStore, StorageError
from puasa.checkin.services.reason_validator import ReasonValidator

logger = logging.getLogger(__name__)


class CheckInService:
    """
    Validates and persists fasting check-ins.

    A (year, date) key moves from unanswered to answered exactly once;
    every later submission for it is refused as locked.
    """

    def __init__(self, store: CheckinStore, default_timezone: str = DEFAULT_TIMEZONE):
        """
        Initialize CheckInService.

        Args:
            store: Check-in persistence backend
            default_timezone: Zone used when a caller gives none or an invalid one
        """
        self._store = store
        self._default_timezone = default_timezone

    async def submit(
        self,
        year: int,
        date: str,
        status: CheckinStatus,
        reason: Optional[str] = None,
    ) -> SubmitResult:
        """
        Record the check-in for a day if none exists yet.

        Args:
            year: Ramadan year the check-in belongs to
            date: YYYY-MM-DD day being checked in
            status: fasting or not_fasting
            reason: Required (5+ chars) when not fasting, ignored otherwise

        Returns:
            SubmitResult; rejected with "locked" or "reason_too_short"

        Raises:
            ServiceUnavailableException: The store could not persist the record
        """
        status = CheckinStatus(status)

        existing = await self._store.get(year, date)
        if existing is not None:
            logger.info(f"Check-in for {date} ({year}) is locked")
            return SubmitResult.rejected(RejectionReason.LOCKED)

        is_valid, error = ReasonValidator.validate(status, reason)
        if not is_valid:
            logger.debug(f"Rejected check-in for {date}: {error}")
            return SubmitResult.rejected(RejectionReason.REASON_TOO_SHORT)

        record = CheckinRecord(
            year=year,
            date=date,
            status=status,
            reason=ReasonValidator.normalize(status, reason),
            createdAt=datetime.now(timezone.utc),
        )

        try:
            result = await self._store.insert_if_absent(record)
        except StorageError as e:
            raise ServiceUnavailableException(
                message="Check-in could not be saved, please try again",
                code="STORAGE_UNAVAILABLE",
            ) from e

        if not result.inserted:
            # Another submission won the race between get and insert
            logger.warning(f"Concurrent check-in for {date} ({year}) lost the insert race")
            return SubmitResult.rejected(RejectionReason.LOCKED)

        logger.info(f"Check-in stored for {date} ({year}): {status.value}")
        return SubmitResult.accepted()

    async def get_checkin(self, year: int, date: str) -> Optional[CheckinRecord]:
        """
        Get the stored check-in for a day.

        Args:
            year: Ramadan year
            date: YYYY-MM-DD

        Returns:
            CheckinRecord or None
        """
        return await self._store.get(year, date)

    def get_allowed_dates(
        self,
        time_zone: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> Dict[str, str]:
        """
        Days a user is offered for check-in: today and yesterday.

        Args:
            time_zone: Caller's IANA zone, falls back to the default zone
            now: Current instant, defaults to the system clock

        Returns:
            dict with timeZone, todayISO and yesterdayISO
        """
        zone = resolve_timezone(time_zone, self._default_timezone).zone
        today = to_iso_date(now or datetime.now(timezone.utc), zone)

        return {
            "timeZone": zone,
            "todayISO": today,
            "yesterdayISO": add_days(today, -1),
        }
