"""
Check-in System

Records one fasting check-in per day and locks it once written.
"""

from puasa.checkin.services.checkin_service import CheckInService
from puasa.checkin.services.checkin_store import CheckinStore, StorageError
from puasa.checkin.services.local_store import LocalCheckinStore
from puasa.checkin.services.mongo_store import MongoCheckinStore
from puasa.checkin.services.reason_validator import ReasonValidator

__all__ = [
    "CheckInService",
    "CheckinStore",
    "StorageError",
    "LocalCheckinStore",
    "MongoCheckinStore",
    "ReasonValidator",
]
