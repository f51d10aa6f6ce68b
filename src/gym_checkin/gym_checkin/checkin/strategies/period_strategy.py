from __future__ import annotations

from datetime import datetime

from ...common.datetime_utils import day_window
from ...core.enums import CheckInOutcome
from ...core.exceptions import AlreadyCheckedInToday
from ...members.model import Member
from ..model import CheckInResult
from ..repository import AttendanceRepository
from .base import CheckInStrategy


class PeriodPassStrategy(CheckInStrategy):
    """Free membership: log at most one attendance record per local day."""

    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def check_in(self, member: Member, *, now: datetime) -> CheckInResult:
        start, end = day_window(now.date())
        if self._attendance.find_in_window(member.member_id, start, end):
            raise AlreadyCheckedInToday()

        attendance_id = self._attendance.create_checkin(member_id=member.member_id, check_in_time=now)
        if attendance_id is None:
            raise AlreadyCheckedInToday()

        return CheckInResult(
            outcome=CheckInOutcome.CHECKED_IN_PERIOD,
            member=member,
            check_in_time=now,
            attendance_id=attendance_id,
        )
