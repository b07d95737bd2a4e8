"""
Models for the Ramadan calendar.

A window is the configured Ramadan date range for one Gregorian year.
"""

from beanie import Document
from pydantic import BaseModel, ConfigDict, Field
from pymongo import ASCENDING, IndexModel

from common.utils.dates import add_days


class RamadanWindow(BaseModel):
    """Configured Ramadan range for a year. Immutable."""

    model_config = ConfigDict(frozen=True)

    year: int
    startDate: str = Field(..., description="YYYY-MM-DD")
    lengthDays: int = Field(..., gt=0)

    @property
    def endDate(self) -> str:
        """Last day of the window (inclusive)."""
        return add_days(self.startDate, self.lengthDays - 1)

    def contains(self, date_iso: str) -> bool:
        return self.startDate <= date_iso <= self.endDate


class RamadanDay(BaseModel):
    """One day of a window, numbered from 1."""

    year: int
    date: str
    dayNumber: int


class RamadanDayDocument(Document):
    """Persisted day of a seeded window."""

    year: int
    dateISO: str
    dayNumber: int

    class Settings:
        name = "ramadanDays"
        indexes = [
            IndexModel([("year", ASCENDING)], name="by_year"),
            IndexModel(
                [("year", ASCENDING), ("dateISO", ASCENDING)],
                name="by_year_date",
                unique=True,
            ),
        ]
