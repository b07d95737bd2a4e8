"""
Progress system pipeline functions.
"""

import logging
from datetime import datetime, timezone
from typing import Optional, Dict, Any

from common.utils.dates import DEFAULT_TIMEZONE, to_iso_date
from puasa.progress.services.progress_service import ProgressService

logger = logging.getLogger(__name__)


async def get_progress_pipeline(
    progress_service: ProgressService,
    year: Optional[int] = None,
    as_of_date: Optional[str] = None,
    time_zone: Optional[str] = None,
    default_timezone: str = DEFAULT_TIMEZONE,
) -> Dict[str, Any]:
    """
    Summarize fasting progress.

    Missing as_of_date means today in the caller's zone; missing year
    means the year of the as-of date.

    Args:
        progress_service: For summary computation
        year: Window year
        as_of_date: YYYY-MM-DD cut-off
        time_zone: Caller's IANA zone
        default_timezone: Zone used when time_zone is missing or invalid

    Returns:
        Summary dict including the as-of date used
    """
    if as_of_date is None:
        as_of_date = to_iso_date(datetime.now(timezone.utc), time_zone, default_timezone)

    if year is None:
        year = int(as_of_date[:4])

    summary = await progress_service.compute_summary(year, as_of_date)

    return {**summary.model_dump(), "asOfDate": as_of_date}
