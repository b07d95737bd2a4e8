"""
MongoDB-backed check-in store.

Relies on the unique (year, dateISO) index of the fastCheckins collection:
a second insert for the same key fails with DuplicateKeyError, so
concurrent submissions from different clients cannot both succeed.
"""

import logging
from typing import List, Optional

from motor.motor_asyncio import AsyncIOMotorDatabase
from pydantic import ValidationError
from pymongo.errors import DuplicateKeyError, PyMongoError

from puasa.checkin.models import CheckinRecord, InsertResult
from puasa.checkin.services.checkin_store import CheckinStore, StorageError

logger = logging.getLogger(__name__)


class MongoCheckinStore(CheckinStore):
    """
    Check-in store shared through a MongoDB collection.
    """

    COLLECTION = "fastCheckins"

    def __init__(self, db: AsyncIOMotorDatabase):
        """
        Initialize MongoCheckinStore.

        Args:
            db: MongoDB database connection
        """
        self._db = db
        self._checkins_collection = db[self.COLLECTION]

    async def get(self, year: int, date: str) -> Optional[CheckinRecord]:
        try:
            document = await self._checkins_collection.find_one({
                "year": year,
                "dateISO": date
            })
        except PyMongoError as e:
            logger.warning(f"Check-in lookup failed for {year}/{date}: {e}")
            return None

        if not document:
            return None

        try:
            return CheckinRecord.from_document(document)
        except (KeyError, ValidationError) as e:
            logger.warning(f"Malformed check-in document {document.get('_id')}: {e}")
            return None

    async def list_for_year(self, year: int) -> List[CheckinRecord]:
        try:
            cursor = self._checkins_collection.find({"year": year})
            documents = await cursor.to_list(length=None)
        except PyMongoError as e:
            logger.warning(f"Check-in listing failed for {year}: {e}")
            return []

        records = []
        for document in documents:
            try:
                records.append(CheckinRecord.from_document(document))
            except (KeyError, ValidationError) as e:
                logger.warning(f"Skipping malformed check-in document {document.get('_id')}: {e}")
        return records

    async def insert_if_absent(self, record: CheckinRecord) -> InsertResult:
        try:
            await self._checkins_collection.insert_one(record.to_document())
        except DuplicateKeyError:
            return InsertResult.already_exists()
        except PyMongoError as e:
            logger.error(f"Check-in insert failed for {record.year}/{record.date}: {e}")
            raise StorageError(f"Could not store check-in for {record.date}") from e

        return InsertResult.ok()
