"""Unit tests for ProgressService."""

import pytest

from common.utils.dates import add_days
from puasa.checkin.models import CheckinStatus


START = "2026-02-19"
LENGTH = 29


async def _seed(store, make_record, entries):
    for date, status in entries:
        reason = "sakit kepala" if status == CheckinStatus.NOT_FASTING else None
        await store.insert_if_absent(make_record(date, status, reason))


class TestDaysSoFar:
    @pytest.mark.asyncio
    async def test_first_day_is_day_one(self, progress_service):
        summary = await progress_service.compute_summary(2026, START)

        assert summary.ok is True
        assert summary.totalDays == LENGTH
        assert summary.daysSoFar == 1
        assert summary.startDate == START

    @pytest.mark.asyncio
    async def test_before_window_is_zero(self, progress_service):
        summary = await progress_service.compute_summary(2026, add_days(START, -1))

        assert summary.daysSoFar == 0
        assert summary.fastingCount == 0

    @pytest.mark.asyncio
    async def test_last_day_equals_length(self, progress_service):
        summary = await progress_service.compute_summary(2026, add_days(START, LENGTH - 1))

        assert summary.daysSoFar == LENGTH

    @pytest.mark.asyncio
    async def test_after_window_is_clamped(self, progress_service):
        summary = await progress_service.compute_summary(2026, add_days(START, LENGTH))

        assert summary.daysSoFar == LENGTH

    @pytest.mark.asyncio
    async def test_long_after_window_is_clamped(self, progress_service):
        summary = await progress_service.compute_summary(2026, "2026-12-31")

        assert summary.daysSoFar == LENGTH

    @pytest.mark.asyncio
    async def test_across_month_boundary(self, progress_service):
        summary = await progress_service.compute_summary(2026, "2026-03-01")

        assert summary.daysSoFar == 11


class TestFastingCount:
    @pytest.mark.asyncio
    async def test_counts_only_fasting_in_range(self, progress_service, local_store, make_record):
        await _seed(local_store, make_record, [
            ("2026-02-18", CheckinStatus.FASTING),
            ("2026-02-19", CheckinStatus.FASTING),
            ("2026-02-20", CheckinStatus.NOT_FASTING),
            ("2026-02-21", CheckinStatus.FASTING),
            ("2026-02-22", CheckinStatus.FASTING),
        ])

        summary = await progress_service.compute_summary(2026, "2026-02-21")

        assert summary.daysSoFar == 3
        assert summary.fastingCount == 2

    @pytest.mark.asyncio
    async def test_future_checkins_do_not_count_early(self, progress_service, local_store, make_record):
        await _seed(local_store, make_record, [("2026-02-25", CheckinStatus.FASTING)])

        summary = await progress_service.compute_summary(2026, "2026-02-24")

        assert summary.fastingCount == 0

    @pytest.mark.asyncio
    async def test_other_years_are_ignored(self, progress_service, local_store, make_record):
        await local_store.insert_if_absent(make_record("2026-02-19", year=2027))

        summary = await progress_service.compute_summary(2026, "2026-02-20")

        assert summary.fastingCount == 0

    @pytest.mark.asyncio
    async def test_first_three_days_scenario(self, progress_service, checkin_service):
        await checkin_service.submit(2026, "2026-02-19", "fasting")
        await checkin_service.submit(2026, "2026-02-20", "not_fasting", "demam")
        await checkin_service.submit(2026, "2026-02-21", "fasting")

        summary = await progress_service.compute_summary(2026, "2026-02-21")

        assert summary.model_dump() == {
            "ok": True,
            "totalDays": 29,
            "daysSoFar": 3,
            "fastingCount": 2,
            "startDate": "2026-02-19",
            "reason": None,
        }


class TestUnsupportedYear:
    @pytest.mark.asyncio
    async def test_unsupported_year(self, progress_service):
        summary = await progress_service.compute_summary(1999, "1999-01-15")

        assert summary.ok is False
        assert summary.reason == "unsupported_year"
        assert summary.totalDays == 0
        assert summary.daysSoFar == 0
        assert summary.fastingCount == 0
        assert summary.startDate is None
