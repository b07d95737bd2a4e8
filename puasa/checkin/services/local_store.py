"""
File-backed check-in store.

Keeps one JSON document per year, mapping dateISO to the stored record,
under the same key a browser build would use in local storage
(``puasaTracker:<year>:checkins``). Suitable for a single process on a
single device.
"""

import asyncio
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from puasa.checkin.models import CheckinRecord, InsertResult
from puasa.checkin.services.checkin_store import CheckinStore, StorageError

logger = logging.getLogger(__name__)


def storage_key(year: int) -> str:
    """Storage key for a year's check-ins."""
    return f"puasaTracker:{year}:checkins"


class LocalCheckinStore(CheckinStore):
    """
    Check-in store backed by JSON files in a local directory.
    """

    def __init__(self, directory: str):
        """
        Initialize LocalCheckinStore.

        Args:
            directory: Directory holding one JSON file per year
        """
        self._directory = Path(directory)
        self._write_lock = asyncio.Lock()

    def _path(self, year: int) -> Path:
        # ':' is not allowed in file names on every platform
        return self._directory / (storage_key(year).replace(":", "_") + ".json")

    def _load(self, year: int) -> Dict[str, Dict[str, Any]]:
        path = self._path(year)
        if not path.exists():
            return {}

        try:
            with open(path, "r", encoding="utf-8") as fh:
                data = json.load(fh)
        except (OSError, json.JSONDecodeError) as e:
            raise StorageError(f"Unreadable check-in file {path}: {e}") from e

        if not isinstance(data, dict):
            raise StorageError(f"Check-in file {path} is not an object")

        return data

    def _read_all(self, year: int) -> Dict[str, Dict[str, Any]]:
        try:
            return self._load(year)
        except StorageError as e:
            logger.warning(f"{e}, treating as empty")
            return {}

    def _write_all(self, year: int, data: Dict[str, Dict[str, Any]]) -> None:
        path = self._path(year)
        try:
            self._directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(dir=self._directory, suffix=".tmp")
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(data, fh, ensure_ascii=False, indent=2)
            os.replace(tmp_path, path)
        except OSError as e:
            logger.error(f"Failed to write check-in file {path}: {e}")
            raise StorageError(f"Could not write check-ins for {year}") from e

    @staticmethod
    def _to_record(document: Dict[str, Any]) -> Optional[CheckinRecord]:
        try:
            return CheckinRecord.from_document(document)
        except (KeyError, TypeError, ValidationError) as e:
            logger.warning(f"Skipping malformed check-in entry: {e}")
            return None

    async def get(self, year: int, date: str) -> Optional[CheckinRecord]:
        document = self._read_all(year).get(date)
        if not isinstance(document, dict):
            return None
        return self._to_record(document)

    async def list_for_year(self, year: int) -> List[CheckinRecord]:
        records = []
        for document in self._read_all(year).values():
            if not isinstance(document, dict):
                continue
            record = self._to_record(document)
            if record is not None:
                records.append(record)
        return records

    async def insert_if_absent(self, record: CheckinRecord) -> InsertResult:
        async with self._write_lock:
            # Never overwrite a file whose existing records cannot be read
            try:
                data = self._load(record.year)
            except StorageError:
                logger.error(f"Refusing to write check-ins for {record.year} over an unreadable file")
                raise
            if record.date in data:
                return InsertResult.already_exists()

            document = record.to_document()
            document["createdAt"] = record.createdAt.isoformat()
            data[record.date] = document
            self._write_all(record.year, data)

        return InsertResult.ok()
