"""
Models for the fasting check-in system.

A check-in is written once per (year, date) and never changed afterwards.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional

from beanie import Document
from pydantic import BaseModel, ConfigDict, Field
from pymongo import ASCENDING, IndexModel


MIN_REASON_LENGTH = 5

ALREADY_EXISTS = "already_exists"


class CheckinStatus(str, Enum):
    FASTING = "fasting"
    NOT_FASTING = "not_fasting"


class RejectionReason(str, Enum):
    LOCKED = "locked"
    REASON_TOO_SHORT = "reason_too_short"


class CheckinRecord(BaseModel):
    """A stored daily fasting check-in."""

    model_config = ConfigDict(frozen=True)

    year: int
    date: str = Field(..., description="YYYY-MM-DD")
    status: CheckinStatus
    reason: Optional[str] = None
    createdAt: datetime

    def to_document(self) -> Dict[str, Any]:
        """Persisted layout shared by every store."""
        document: Dict[str, Any] = {
            "year": self.year,
            "dateISO": self.date,
            "status": self.status.value,
            "createdAt": self.createdAt,
        }
        if self.reason is not None:
            document["reason"] = self.reason
        return document

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> "CheckinRecord":
        return cls(
            year=document["year"],
            date=document["dateISO"],
            status=document["status"],
            reason=document.get("reason"),
            createdAt=document["createdAt"],
        )


class InsertResult(BaseModel):
    """Outcome of CheckinStore.insert_if_absent."""

    inserted: bool
    reason: Optional[str] = None

    @classmethod
    def ok(cls) -> "InsertResult":
        return cls(inserted=True)

    @classmethod
    def already_exists(cls) -> "InsertResult":
        return cls(inserted=False, reason=ALREADY_EXISTS)


class SubmitResult(BaseModel):
    """Outcome of a check-in submission."""

    ok: bool
    reason: Optional[RejectionReason] = None

    @classmethod
    def accepted(cls) -> "SubmitResult":
        return cls(ok=True)

    @classmethod
    def rejected(cls, reason: RejectionReason) -> "SubmitResult":
        return cls(ok=False, reason=reason)


class FastCheckinDocument(Document):
    """
    Beanie model for the fastCheckins collection.

    Declares the unique (year, dateISO) index that makes inserts atomic.
    Reads and writes go through the raw Motor collection.
    """

    year: int
    dateISO: str
    status: CheckinStatus
    reason: Optional[str] = None
    createdAt: datetime

    class Settings:
        name = "fastCheckins"
        indexes = [
            IndexModel([("year", ASCENDING)], name="by_year"),
            IndexModel(
                [("year", ASCENDING), ("dateISO", ASCENDING)],
                name="by_year_date",
                unique=True,
            ),
        ]
