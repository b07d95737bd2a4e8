"""
Check-in reason validation.
"""

from typing import Optional, Tuple

from puasa.checkin.models import CheckinStatus, MIN_REASON_LENGTH


class ReasonValidator:
    """
    Validates the free-text reason given for not fasting.
    """

    MIN_LENGTH = MIN_REASON_LENGTH

    @classmethod
    def normalize(cls, status: CheckinStatus, reason: Optional[str]) -> Optional[str]:
        """
        Reason as it should be stored.

        Only not-fasting check-ins keep a reason, trimmed.
        """
        if status != CheckinStatus.NOT_FASTING:
            return None
        return (reason or "").strip()

    @classmethod
    def validate(cls, status: CheckinStatus, reason: Optional[str]) -> Tuple[bool, Optional[str]]:
        """
        Validate the reason for a submission.

        Args:
            status: Submitted status
            reason: Optional free text

        Returns:
            tuple of (is_valid, error_message)

        Rules:
            - Fasting: any reason is accepted and dropped
            - Not fasting: at least 5 characters after trimming
        """
        if status != CheckinStatus.NOT_FASTING:
            return True, None

        trimmed = cls.normalize(status, reason)
        if len(trimmed) < cls.MIN_LENGTH:
            return False, f"Reason must be at least {cls.MIN_LENGTH} characters"

        return True, None
