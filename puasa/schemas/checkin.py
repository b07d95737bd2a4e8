"""
Pydantic models for Check-in system request/response validation.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from common.utils.dates import is_iso_date
from puasa.checkin.models import CheckinStatus, RejectionReason


# =============================================================================
# Request Schemas
# =============================================================================

class SubmitCheckinRequest(BaseModel):
    """POST /api/v1/checkin"""
    year: int = Field(..., ge=1900, le=2999)
    date: str = Field(..., description="YYYY-MM-DD")
    status: CheckinStatus
    reason: Optional[str] = Field(None, max_length=500)

    @field_validator("date")
    @classmethod
    def date_must_be_iso(cls, value: str) -> str:
        if not is_iso_date(value):
            raise ValueError("date must be a valid YYYY-MM-DD date")
        return value


# =============================================================================
# Response Schemas
# =============================================================================

class SubmitCheckinResponse(BaseModel):
    """Response for POST /api/v1/checkin"""
    ok: bool
    reason: Optional[RejectionReason] = None


class CheckinResponse(BaseModel):
    """A stored check-in."""
    year: int
    date: str
    status: CheckinStatus
    reason: Optional[str] = None
    createdAt: datetime


class AllowedDatesResponse(BaseModel):
    """Response for GET /api/v1/checkin/allowed-dates"""
    timeZone: str
    todayISO: str
    yesterdayISO: str
