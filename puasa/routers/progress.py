"""
FastAPI router for Progress system endpoints.
"""

import logging
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Query

from common.utils.dates import is_iso_date
from common.utils.exceptions import ValidationException
from puasa.config import settings
from puasa.dependencies import get_progress_service
from puasa.progress.services.progress_service import ProgressService
from puasa.schemas.progress import ProgressSummaryResponse
from puasa.pipelines import progress as pipelines

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/progress", tags=["progress"])


@router.get("", response_model=ProgressSummaryResponse)
async def get_progress(
    progress_service: Annotated[ProgressService, Depends(get_progress_service)],
    year: Optional[int] = Query(None, description="Window year, defaults to the as-of year"),
    asOfDate: Optional[str] = Query(None, description="YYYY-MM-DD, defaults to today"),
    timeZone: Optional[str] = Query(None, description="IANA time zone used for today"),
):
    """
    Get fasting progress for a Ramadan window.

    Unsupported years return ok=false with reason "unsupported_year"
    and zeroed counters.
    """
    if asOfDate is not None and not is_iso_date(asOfDate):
        raise ValidationException(
            message="asOfDate must be a valid YYYY-MM-DD date",
            code="INVALID_DATE",
        )

    result = await pipelines.get_progress_pipeline(
        progress_service=progress_service,
        year=year,
        as_of_date=asOfDate,
        time_zone=timeZone,
        default_timezone=settings.DEFAULT_TIMEZONE,
    )

    return ProgressSummaryResponse(**result)
