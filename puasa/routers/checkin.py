"""
FastAPI router for Check-in system endpoints.

Provides endpoints for submitting and reading fasting check-ins.
"""

import logging
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Query

from common.utils.dates import is_iso_date
from common.utils.exceptions import ValidationException
from puasa.dependencies import get_checkin_service
from puasa.checkin.services.checkin_service import CheckInService
from puasa.schemas.checkin import (
    SubmitCheckinRequest,
    SubmitCheckinResponse,
    CheckinResponse,
    AllowedDatesResponse,
)
from puasa.pipelines import checkin as pipelines

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/checkin", tags=["checkin"])


@router.post("", response_model=SubmitCheckinResponse, response_model_exclude_none=True)
async def submit_checkin(
    body: SubmitCheckinRequest,
    checkin_service: Annotated[CheckInService, Depends(get_checkin_service)],
):
    """
    Submit a fasting check-in for a day.

    A day can be answered once; later submissions return ok=false
    with reason "locked".
    """
    result = await pipelines.submit_checkin_pipeline(
        checkin_service=checkin_service,
        year=body.year,
        date=body.date,
        status=body.status,
        reason=body.reason,
    )

    return SubmitCheckinResponse(**result)


@router.get("/allowed-dates", response_model=AllowedDatesResponse)
async def get_allowed_dates(
    checkin_service: Annotated[CheckInService, Depends(get_checkin_service)],
    timeZone: Optional[str] = Query(None, description="IANA time zone, e.g. Asia/Jakarta"),
):
    """Get today's and yesterday's date in the caller's time zone."""
    result = pipelines.get_allowed_dates_pipeline(
        checkin_service=checkin_service,
        time_zone=timeZone,
    )

    return AllowedDatesResponse(**result)


@router.get("/{year}/{date}", response_model=Optional[CheckinResponse])
async def get_checkin(
    year: int,
    date: str,
    checkin_service: Annotated[CheckInService, Depends(get_checkin_service)],
):
    """
    Get the check-in stored for a day.

    Returns null when the day has not been answered.
    """
    if not is_iso_date(date):
        raise ValidationException(
            message="date must be a valid YYYY-MM-DD date",
            code="INVALID_DATE",
        )

    result = await pipelines.get_checkin_pipeline(
        checkin_service=checkin_service,
        year=year,
        date=date,
    )

    return CheckinResponse(**result) if result else None
