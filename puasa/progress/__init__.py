"""
Progress System

Counts elapsed window days and fasting check-ins as of a date.
"""

from puasa.progress.services.progress_service import ProgressService

__all__ = ["ProgressService"]
