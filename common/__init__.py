"""
Common library for reusable infrastructure components.

This package provides generic modules that can be used across projects:

- database: Async MongoDB connection with Beanie ODM
- utils: Standard responses, exceptions, ISO date helpers
- config: Base settings class
"""

from common.database import MongoDB
from common.utils import (
    success_response,
    APIException,
    ValidationException,
    ServiceUnavailableException,
)
from common.config import BaseAppSettings

__all__ = [
    # Database
    "MongoDB",
    # Utils
    "success_response",
    "APIException",
    "ValidationException",
    "ServiceUnavailableException",
    # Config
    "BaseAppSettings",
]
