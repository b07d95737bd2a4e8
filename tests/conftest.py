"""Shared test fixtures for Waktunya Puasa tests."""

import pytest
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

from puasa.checkin.models import CheckinRecord, CheckinStatus
from puasa.checkin.services.checkin_service import CheckInService
from puasa.checkin.services.local_store import LocalCheckinStore
from puasa.progress.services.progress_service import ProgressService
from puasa.ramadan.calendar import RamadanCalendar


WINDOW_START = "2026-02-19"
WINDOW_LENGTH = 29


@pytest.fixture
def mock_collection():
    collection = AsyncMock()
    # Motor's find() returns a cursor synchronously (not a coroutine),
    # so use MagicMock for it. Async methods like find_one, insert_one
    # etc. stay as AsyncMock.
    collection.find = MagicMock()
    return collection


@pytest.fixture
def mock_db(mock_collection):
    db = MagicMock()
    db.__getitem__ = MagicMock(return_value=mock_collection)
    return db


@pytest.fixture
def make_cursor():
    """Factory for fake Motor cursors whose to_list returns the given documents."""
    def _make(documents):
        cursor = MagicMock()
        cursor.sort = MagicMock(return_value=cursor)
        cursor.to_list = AsyncMock(return_value=documents)
        return cursor
    return _make


@pytest.fixture
def calendar():
    return RamadanCalendar.from_config()


@pytest.fixture
def local_store(tmp_path):
    return LocalCheckinStore(directory=str(tmp_path / "checkins"))


@pytest.fixture
def checkin_service(local_store):
    return CheckInService(store=local_store)


@pytest.fixture
def progress_service(calendar, local_store):
    return ProgressService(calendar=calendar, store=local_store)


@pytest.fixture
def make_record():
    def _make(date, status=CheckinStatus.FASTING, reason=None, year=2026):
        return CheckinRecord(
            year=year,
            date=date,
            status=status,
            reason=reason,
            createdAt=datetime(2026, 2, 19, 12, 0, tzinfo=timezone.utc),
        )
    return _make
