"""
Pydantic models for Progress system responses.
"""

from typing import Optional

from pydantic import BaseModel


class ProgressSummaryResponse(BaseModel):
    """Response for GET /api/v1/progress"""
    ok: bool
    totalDays: int
    daysSoFar: int
    fastingCount: int
    startDate: Optional[str] = None
    asOfDate: str
    reason: Optional[str] = None
