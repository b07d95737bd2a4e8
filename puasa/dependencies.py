"""
FastAPI dependencies for Waktunya Puasa.

Builds every service once at startup and exposes the getters routers
depend on.
"""

import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorDatabase

from puasa.config import Settings
from puasa.checkin.services.checkin_store import CheckinStore
from puasa.checkin.services.local_store import LocalCheckinStore
from puasa.checkin.services.mongo_store import MongoCheckinStore
from puasa.checkin.dependencies import (
    init_checkin_services,
    get_checkin_service,
)
from puasa.progress.dependencies import init_progress_services, get_progress_service
from puasa.ramadan.calendar import RamadanCalendar
from puasa.ramadan.dependencies import init_ramadan_services, get_ramadan_calendar

logger = logging.getLogger(__name__)

__all__ = [
    "build_checkin_store",
    "init_all_services",
    "get_checkin_service",
    "get_progress_service",
    "get_ramadan_calendar",
]


def build_checkin_store(
    settings: Settings,
    db: Optional[AsyncIOMotorDatabase] = None,
) -> CheckinStore:
    """
    Create the check-in store selected by STORAGE_BACKEND.

    Args:
        settings: Application settings
        db: MongoDB database, required for the "mongodb" backend

    Returns:
        CheckinStore implementation
    """
    if settings.uses_mongodb():
        if db is None:
            raise RuntimeError("STORAGE_BACKEND=mongodb requires a database connection")
        logger.info("Using MongoDB check-in store")
        return MongoCheckinStore(db=db)

    logger.info(f"Using local check-in store in {settings.LOCAL_STORAGE_DIR}")
    return LocalCheckinStore(directory=settings.LOCAL_STORAGE_DIR)


def init_all_services(
    settings: Settings,
    store: CheckinStore,
    calendar: Optional[RamadanCalendar] = None,
) -> RamadanCalendar:
    """
    Initialize all services.

    Called once at application startup.

    Args:
        settings: Application settings
        store: Check-in persistence backend
        calendar: Pre-built calendar, loaded from settings when omitted

    Returns:
        The calendar the services were initialized with

    Raises:
        ValueError: If RAMADAN_WINDOWS is malformed
    """
    if calendar is None:
        calendar = RamadanCalendar.from_config(settings.RAMADAN_WINDOWS)

    init_ramadan_services(calendar)
    init_checkin_services(store, default_timezone=settings.DEFAULT_TIMEZONE)
    init_progress_services(calendar=calendar, store=store)

    logger.info(f"Services initialized, Ramadan years: {calendar.supported_years()}")
    return calendar
