"""
Waktunya Puasa application settings.

Extends the base settings with check-in storage and calendar configuration.
"""

from typing import Any, Dict

from common.config import BaseAppSettings
from common.utils.dates import DEFAULT_TIMEZONE, is_valid_timezone


STORAGE_BACKENDS = ("local", "mongodb")


class Settings(BaseAppSettings):
    """Waktunya Puasa specific settings."""

    # ==========================================================================
    # Check-in Storage
    # ==========================================================================
    # "local" keeps one JSON file per year on this machine,
    # "mongodb" shares check-ins through MONGODB_URI.
    STORAGE_BACKEND: str = "local"
    LOCAL_STORAGE_DIR: str = ".puasa_data"

    # ==========================================================================
    # Calendar
    # ==========================================================================
    # Zone used when the caller's zone is missing or invalid
    DEFAULT_TIMEZONE: str = DEFAULT_TIMEZONE

    # Extra or overriding windows, e.g.
    # RAMADAN_WINDOWS='{"2027": {"startDate": "2027-02-08", "lengthDays": 30}}'
    RAMADAN_WINDOWS: Dict[str, Dict[str, Any]] = {}

    def uses_mongodb(self) -> bool:
        """Check whether check-ins are persisted in MongoDB."""
        return self.STORAGE_BACKEND.lower() == "mongodb"

    def collect_errors(self) -> list:
        errors = super().collect_errors()

        if self.STORAGE_BACKEND.lower() not in STORAGE_BACKENDS:
            errors.append(
                f"STORAGE_BACKEND must be one of: {', '.join(STORAGE_BACKENDS)}"
            )

        if self.STORAGE_BACKEND.lower() == "local" and not self.LOCAL_STORAGE_DIR:
            errors.append("LOCAL_STORAGE_DIR is required when using local storage")

        if not is_valid_timezone(self.DEFAULT_TIMEZONE):
            errors.append(f"DEFAULT_TIMEZONE '{self.DEFAULT_TIMEZONE}' is not a known time zone")

        from puasa.ramadan.calendar import RamadanCalendar

        try:
            RamadanCalendar.from_config(self.RAMADAN_WINDOWS)
        except ValueError as e:
            errors.append(str(e))

        return errors


# Global settings instance
settings = Settings()
