"""HTTP tests for the Waktunya Puasa API routes."""

import pytest
from fastapi.testclient import TestClient

from api import app
from puasa.checkin.services.checkin_service import CheckInService
from puasa.checkin.services.local_store import LocalCheckinStore
from puasa.config import Settings
from puasa.dependencies import (
    build_checkin_store,
    get_checkin_service,
    get_progress_service,
    get_ramadan_calendar,
    init_all_services,
)
from puasa.progress.services.progress_service import ProgressService


@pytest.fixture
def client(tmp_path):
    # Services are wired directly; the lifespan (and its MongoDB
    # connection) only runs when TestClient is used as a context manager.
    init_all_services(Settings(), LocalCheckinStore(directory=str(tmp_path / "api")))
    return TestClient(app)


class TestServiceWiring:
    def test_local_backend_builds_file_store(self, tmp_path):
        settings = Settings(LOCAL_STORAGE_DIR=str(tmp_path / "data"))

        assert isinstance(build_checkin_store(settings), LocalCheckinStore)

    def test_mongodb_backend_requires_database(self):
        with pytest.raises(RuntimeError):
            build_checkin_store(Settings(STORAGE_BACKEND="mongodb"))

    def test_getters_return_initialized_services(self, tmp_path):
        calendar = init_all_services(Settings(), LocalCheckinStore(directory=str(tmp_path)))

        assert get_ramadan_calendar() is calendar
        assert isinstance(get_checkin_service(), CheckInService)
        assert isinstance(get_progress_service(), ProgressService)


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["data"]["status"] == "ok"


class TestCheckinRoutes:
    def test_submit_then_locked(self, client):
        payload = {"year": 2026, "date": "2026-02-19", "status": "fasting"}

        first = client.post("/api/v1/checkin", json=payload)
        second = client.post("/api/v1/checkin", json=payload)

        assert first.status_code == 200
        assert first.json() == {"ok": True}
        assert second.json() == {"ok": False, "reason": "locked"}

    def test_short_reason_is_rejected(self, client):
        response = client.post(
            "/api/v1/checkin",
            json={"year": 2026, "date": "2026-02-20", "status": "not_fasting", "reason": "abc"},
        )

        assert response.status_code == 200
        assert response.json() == {"ok": False, "reason": "reason_too_short"}

    @pytest.mark.parametrize(
        "payload",
        [
            {"year": 2026, "date": "2026-02-30", "status": "fasting"},
            {"year": 2026, "date": "2026-02-19", "status": "maybe"},
            {"date": "2026-02-19", "status": "fasting"},
        ],
    )
    def test_malformed_body_is_422(self, client, payload):
        response = client.post("/api/v1/checkin", json=payload)

        assert response.status_code == 422

    def test_read_back_stored_checkin(self, client):
        client.post(
            "/api/v1/checkin",
            json={"year": 2026, "date": "2026-02-20", "status": "not_fasting", "reason": " demam "},
        )

        response = client.get("/api/v1/checkin/2026/2026-02-20")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "not_fasting"
        assert body["reason"] == "demam"
        assert body["date"] == "2026-02-20"

    def test_unanswered_day_is_null(self, client):
        response = client.get("/api/v1/checkin/2026/2026-02-21")

        assert response.status_code == 200
        assert response.json() is None

    def test_invalid_date_path_is_422(self, client):
        response = client.get("/api/v1/checkin/2026/21-02-2026")

        assert response.status_code == 422
        assert response.json()["detail"]["code"] == "INVALID_DATE"

    def test_allowed_dates(self, client):
        response = client.get("/api/v1/checkin/allowed-dates", params={"timeZone": "Asia/Jakarta"})

        assert response.status_code == 200
        body = response.json()
        assert body["timeZone"] == "Asia/Jakarta"
        assert body["todayISO"] > body["yesterdayISO"]


class TestProgressRoutes:
    def test_progress_after_three_days(self, client):
        client.post("/api/v1/checkin", json={"year": 2026, "date": "2026-02-19", "status": "fasting"})
        client.post(
            "/api/v1/checkin",
            json={"year": 2026, "date": "2026-02-20", "status": "not_fasting", "reason": "demam"},
        )
        client.post("/api/v1/checkin", json={"year": 2026, "date": "2026-02-21", "status": "fasting"})

        response = client.get("/api/v1/progress", params={"year": 2026, "asOfDate": "2026-02-21"})

        assert response.status_code == 200
        assert response.json() == {
            "ok": True,
            "totalDays": 29,
            "daysSoFar": 3,
            "fastingCount": 2,
            "startDate": "2026-02-19",
            "asOfDate": "2026-02-21",
            "reason": None,
        }

    def test_year_defaults_to_as_of_year(self, client):
        response = client.get("/api/v1/progress", params={"asOfDate": "2026-03-01"})

        assert response.json()["daysSoFar"] == 11

    def test_unsupported_year(self, client):
        response = client.get("/api/v1/progress", params={"year": 1999, "asOfDate": "1999-01-15"})

        body = response.json()
        assert body["ok"] is False
        assert body["reason"] == "unsupported_year"
        assert body["totalDays"] == 0

    def test_invalid_as_of_date(self, client):
        response = client.get("/api/v1/progress", params={"asOfDate": "2026-02-31"})

        assert response.status_code == 422


class TestRamadanRoutes:
    def test_window(self, client):
        response = client.get("/api/v1/ramadan/2026")

        assert response.json() == {
            "ok": True,
            "year": 2026,
            "startDate": "2026-02-19",
            "endDate": "2026-03-19",
            "lengthDays": 29,
            "reason": None,
        }

    def test_days(self, client):
        body = client.get("/api/v1/ramadan/2026/days").json()

        assert body["ok"] is True
        assert len(body["days"]) == 29
        assert body["days"][0] == {"year": 2026, "date": "2026-02-19", "dayNumber": 1}

    def test_unsupported_window(self, client):
        body = client.get("/api/v1/ramadan/1999").json()

        assert body["ok"] is False
        assert body["reason"] == "unsupported_year"
