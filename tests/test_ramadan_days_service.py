"""Unit tests for RamadanDaysService seeding."""

import pytest
from unittest.mock import AsyncMock
from bson import ObjectId
from pymongo.errors import BulkWriteError

from puasa.ramadan.services.ramadan_days_service import RamadanDaysService


@pytest.fixture
def service(mock_db, calendar):
    return RamadanDaysService(db=mock_db, calendar=calendar)


class TestSeed:
    @pytest.mark.asyncio
    async def test_seeds_every_day_once(self, service, mock_collection):
        mock_collection.find_one = AsyncMock(return_value=None)

        result = await service.seed(2026)

        assert result == {
            "ok": True,
            "seeded": True,
            "startDate": "2026-02-19",
            "lengthDays": 29,
        }
        documents = mock_collection.insert_many.call_args[0][0]
        assert len(documents) == 29
        assert documents[0] == {"year": 2026, "dateISO": "2026-02-19", "dayNumber": 1}
        assert documents[-1] == {"year": 2026, "dateISO": "2026-03-19", "dayNumber": 29}

    @pytest.mark.asyncio
    async def test_already_seeded_is_a_no_op(self, service, mock_collection):
        mock_collection.find_one = AsyncMock(
            return_value={"_id": ObjectId(), "year": 2026, "dateISO": "2026-02-19", "dayNumber": 1}
        )

        result = await service.seed(2026)

        assert result["ok"] is True
        assert result["seeded"] is False
        mock_collection.insert_many.assert_not_called()

    @pytest.mark.asyncio
    async def test_overlapping_seed_run_reports_not_seeded(self, service, mock_collection):
        mock_collection.find_one = AsyncMock(return_value=None)
        mock_collection.insert_many = AsyncMock(side_effect=BulkWriteError({
            "writeErrors": [{"index": 0, "code": 11000, "errmsg": "E11000 duplicate key error"}],
            "nInserted": 0,
        }))

        result = await service.seed(2026)

        assert result == {
            "ok": True,
            "seeded": False,
            "startDate": "2026-02-19",
            "lengthDays": 29,
        }

    @pytest.mark.asyncio
    async def test_other_bulk_write_failures_propagate(self, service, mock_collection):
        mock_collection.find_one = AsyncMock(return_value=None)
        mock_collection.insert_many = AsyncMock(side_effect=BulkWriteError({
            "writeErrors": [{"index": 0, "code": 121, "errmsg": "Document failed validation"}],
            "nInserted": 0,
        }))

        with pytest.raises(BulkWriteError):
            await service.seed(2026)

    @pytest.mark.asyncio
    async def test_unsupported_year(self, service, mock_collection):
        result = await service.seed(1999)

        assert result == {"ok": False, "reason": "unsupported_year"}
        mock_collection.find_one.assert_not_called()


class TestGetDays:
    @pytest.mark.asyncio
    async def test_maps_documents_in_day_order(self, service, mock_collection, make_cursor):
        cursor = make_cursor([
            {"_id": ObjectId(), "year": 2026, "dateISO": "2026-02-19", "dayNumber": 1},
            {"_id": ObjectId(), "year": 2026, "dateISO": "2026-02-20", "dayNumber": 2},
        ])
        mock_collection.find.return_value = cursor

        days = await service.get_days(2026)

        mock_collection.find.assert_called_once_with({"year": 2026})
        cursor.sort.assert_called_once_with("dayNumber", 1)
        assert days == [
            {"year": 2026, "date": "2026-02-19", "dayNumber": 1},
            {"year": 2026, "date": "2026-02-20", "dayNumber": 2},
        ]
