"""
Models for the Progress system.
"""

from typing import Optional

from pydantic import BaseModel


class ProgressSummary(BaseModel):
    """Fasting progress for a Ramadan window as of a given date."""

    ok: bool
    totalDays: int
    daysSoFar: int
    fastingCount: int
    startDate: Optional[str] = None
    reason: Optional[str] = None

    @classmethod
    def unsupported_year(cls) -> "ProgressSummary":
        return cls(
            ok=False,
            totalDays=0,
            daysSoFar=0,
            fastingCount=0,
            startDate=None,
            reason="unsupported_year",
        )
