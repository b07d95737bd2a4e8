"""
Utilities module - Common helpers for API responses, exceptions, and dates.
"""

from common.utils.responses import success_response
from common.utils.exceptions import (
    APIException,
    ValidationException,
    ServiceUnavailableException,
)
from common.utils.dates import (
    DEFAULT_TIMEZONE,
    to_iso_date,
    is_iso_date,
    compare_iso,
    add_days,
)

__all__ = [
    "success_response",
    "APIException",
    "ValidationException",
    "ServiceUnavailableException",
    "DEFAULT_TIMEZONE",
    "to_iso_date",
    "is_iso_date",
    "compare_iso",
    "add_days",
]
