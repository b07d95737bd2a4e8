"""
FastAPI router for Ramadan calendar endpoints.
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from puasa.dependencies import get_ramadan_calendar
from puasa.ramadan.calendar import RamadanCalendar
from puasa.schemas.ramadan import RamadanWindowResponse, RamadanDaysResponse
from puasa.pipelines import ramadan as pipelines

router = APIRouter(prefix="/ramadan", tags=["ramadan"])


@router.get("/{year}", response_model=RamadanWindowResponse)
async def get_window(
    year: int,
    calendar: Annotated[RamadanCalendar, Depends(get_ramadan_calendar)],
):
    """Get the configured Ramadan window for a year."""
    return RamadanWindowResponse(**pipelines.get_window_pipeline(calendar, year))


@router.get("/{year}/days", response_model=RamadanDaysResponse)
async def get_days(
    year: int,
    calendar: Annotated[RamadanCalendar, Depends(get_ramadan_calendar)],
):
    """List the numbered days of a year's Ramadan window."""
    return RamadanDaysResponse(**pipelines.get_days_pipeline(calendar, year))
