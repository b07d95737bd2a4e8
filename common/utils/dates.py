"""
ISO calendar-date helpers.

Dates travel through the system as fixed-width ``YYYY-MM-DD`` strings.
Because the format is zero-padded, plain string comparison orders them
chronologically, and day arithmetic is done on naive ``date`` objects so
no local-time DST shift can leak in.

Example:
    from common.utils.dates import to_iso_date, add_days

    today = to_iso_date(datetime.now(timezone.utc), "Asia/Kuala_Lumpur")
    yesterday = add_days(today, -1)
"""

import logging
import re
from datetime import date, datetime, timedelta, timezone
from typing import Optional

import pytz

logger = logging.getLogger(__name__)

DEFAULT_TIMEZONE = "Asia/Kuala_Lumpur"

ISO_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def resolve_timezone(name: Optional[str], default: str = DEFAULT_TIMEZONE):
    """
    Resolve an IANA time zone name to a tzinfo.

    Falls back to ``default`` when the name is missing or unknown.

    Args:
        name: IANA zone name such as "Asia/Jakarta", or None
        default: Zone used when ``name`` cannot be resolved

    Returns:
        pytz timezone instance
    """
    if name:
        try:
            return pytz.timezone(name)
        except pytz.UnknownTimeZoneError:
            logger.warning(f"Unknown time zone '{name}', falling back to {default}")
    return pytz.timezone(default)


def is_valid_timezone(name: Optional[str]) -> bool:
    """Check whether ``name`` is a known IANA time zone."""
    if not name:
        return False
    try:
        pytz.timezone(name)
        return True
    except pytz.UnknownTimeZoneError:
        return False


def to_iso_date(
    instant: datetime,
    time_zone: Optional[str] = None,
    default: str = DEFAULT_TIMEZONE,
) -> str:
    """
    Render a point in time as the calendar day it falls on in a time zone.

    Naive datetimes are treated as UTC.

    Args:
        instant: Point in time
        time_zone: IANA zone whose day boundary is used
        default: Zone used when ``time_zone`` is invalid or missing

    Returns:
        YYYY-MM-DD string
    """
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=timezone.utc)

    tz = resolve_timezone(time_zone, default)
    return instant.astimezone(tz).strftime("%Y-%m-%d")


def is_iso_date(value: str) -> bool:
    """Check that ``value`` is a real calendar date in YYYY-MM-DD form."""
    if not isinstance(value, str) or not ISO_DATE_PATTERN.match(value):
        return False
    try:
        date.fromisoformat(value)
    except ValueError:
        return False
    return True


def parse_iso_date(value: str) -> date:
    """
    Parse a YYYY-MM-DD string.

    Raises:
        ValueError: If the string is not a valid ISO calendar date
    """
    if not is_iso_date(value):
        raise ValueError(f"Invalid ISO date: {value!r}")
    return date.fromisoformat(value)


def compare_iso(a: str, b: str) -> int:
    """Compare two ISO date strings, returning -1, 0 or 1."""
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def add_days(date_iso: str, days: int) -> str:
    """Shift an ISO date by ``days`` calendar days (negative goes back)."""
    shifted = parse_iso_date(date_iso) + timedelta(days=days)
    return shifted.isoformat()


def days_between(start_iso: str, end_iso: str) -> int:
    """Whole days from ``start_iso`` to ``end_iso`` (negative if end is earlier)."""
    return (parse_iso_date(end_iso) - parse_iso_date(start_iso)).days
