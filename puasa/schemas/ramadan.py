"""
Pydantic models for Ramadan calendar responses.
"""

from typing import List, Optional

from pydantic import BaseModel


class RamadanWindowResponse(BaseModel):
    """Response for GET /api/v1/ramadan/{year}"""
    ok: bool
    year: int
    startDate: Optional[str] = None
    endDate: Optional[str] = None
    lengthDays: Optional[int] = None
    reason: Optional[str] = None


class RamadanDayResponse(BaseModel):
    year: int
    date: str
    dayNumber: int


class RamadanDaysResponse(BaseModel):
    """Response for GET /api/v1/ramadan/{year}/days"""
    ok: bool
    year: int
    days: List[RamadanDayResponse]
    reason: Optional[str] = None
