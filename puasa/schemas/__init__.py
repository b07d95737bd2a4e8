"""
Request and response schemas for the HTTP API.
"""

from puasa.schemas.checkin import (
    SubmitCheckinRequest,
    SubmitCheckinResponse,
    CheckinResponse,
    AllowedDatesResponse,
)
from puasa.schemas.progress import ProgressSummaryResponse
from puasa.schemas.ramadan import (
    RamadanWindowResponse,
    RamadanDayResponse,
    RamadanDaysResponse,
)

__all__ = [
    "SubmitCheckinRequest",
    "SubmitCheckinResponse",
    "CheckinResponse",
    "AllowedDatesResponse",
    "ProgressSummaryResponse",
    "RamadanWindowResponse",
    "RamadanDayResponse",
    "RamadanDaysResponse",
]
