from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import CheckInOutcome
from ..members.model import Member


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one check-in of a period-based member."""

    attendance_id: int
    member_id: int
    check_in_time: datetime


@dataclass(frozen=True)
class AttendanceRow:
    """Read-model for the admin attendance list (attendance joined with member)."""

    attendance_id: int
    check_in_time: datetime
    member: Member

    def to_dict(self) -> dict:
        return {
            "attendance_id": self.attendance_id,
            "check_in_time": self.check_in_time.isoformat(sep=" "),
            "member": self.member.to_dict(),
        }


@dataclass(frozen=True)
class CheckInResult:
    outcome: CheckInOutcome
    member: Member
    check_in_time: datetime
    remaining_sessions: Optional[int] = None
    attendance_id: Optional[int] = None

    @property
    def message(self) -> str:
        if self.outcome == CheckInOutcome.CHECKED_IN_SESSION:
            return f"Checked in (PT session, {self.remaining_sessions} remaining)"
        return "Checked in (free membership)"

    def to_dict(self) -> dict:
        return {
            "outcome": self.outcome.value,
            "message": self.message,
            "check_in_time": self.check_in_time.isoformat(sep=" "),
            "remaining_sessions": self.remaining_sessions,
            "member": {
                "wallet_address": self.member.wallet_address,
                "name": self.member.name,
                "membership_type": self.member.membership_type,
            },
        }
