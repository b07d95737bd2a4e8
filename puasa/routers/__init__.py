"""
Waktunya Puasa API Routers.

All routers are imported here for easy access.
"""

from puasa.routers.checkin import router as checkin_router
from puasa.routers.progress import router as progress_router
from puasa.routers.ramadan import router as ramadan_router

__all__ = [
    "checkin_router",
    "progress_router",
    "ramadan_router",
]
