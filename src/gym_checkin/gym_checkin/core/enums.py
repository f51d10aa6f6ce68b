from __future__ import annotations

from enum import Enum


class MembershipKind(str, Enum):
    """Membership kinds as stored in the members table."""

    SESSION = "pt"
    PERIOD = "free"


class CheckInOutcome(str, Enum):
    """Successful terminal outcomes of a check-in."""

    CHECKED_IN_PERIOD = "CHECKED_IN_PERIOD"
    CHECKED_IN_SESSION = "CHECKED_IN_SESSION"
