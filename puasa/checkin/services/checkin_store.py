"""
Check-in storage interface.

Stores hold at most one record per (year, date). There is deliberately
no update or delete operation.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from puasa.checkin.models import CheckinRecord, InsertResult


class StorageError(Exception):
    """Raised when a store cannot complete a write."""


class CheckinStore(ABC):
    """
    Key-value persistence for check-ins keyed by (year, date).

    Read methods never raise on backend failure; they log and report
    nothing found. insert_if_absent must be atomic per key and raises
    StorageError when the write could not be performed.
    """

    @abstractmethod
    async def get(self, year: int, date: str) -> Optional[CheckinRecord]:
        """Get the check-in for (year, date), or None."""

    @abstractmethod
    async def list_for_year(self, year: int) -> List[CheckinRecord]:
        """Get every check-in stored for ``year``, in no particular order."""

    @abstractmethod
    async def insert_if_absent(self, record: CheckinRecord) -> InsertResult:
        """Insert ``record`` unless its (year, date) key is already taken."""
