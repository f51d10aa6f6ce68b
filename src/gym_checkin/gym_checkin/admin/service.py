from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import date, datetime, timedelta
from typing import Optional, Sequence

from ..checkin.repository import AttendanceRepository
from ..common.datetime_utils import days_until, now_local
from ..core.constants import DEFAULT_EXPIRY_WARNING_DAYS, DEFAULT_LOW_SESSION_LIMIT, DEFAULT_NEW_MEMBER_DAYS
from ..core.enums import MembershipKind
from ..members.model import Member
from ..members.repository import MemberRepository


@dataclass(frozen=True)
class MemberStats:
    total_members: int
    session_members: int
    period_members: int
    today_attendance: int

    def to_dict(self) -> dict:
        return asdict(self)


def membership_status(member: Member, today: date) -> str:
    """Short label for the admin member list."""
    if member.kind == MembershipKind.SESSION:
        left = member.remaining_sessions or 0
        return f"{left} session left" if left == 1 else f"{left} sessions left"
    if member.kind == MembershipKind.PERIOD:
        if not member.end_date:
            return "unlimited"
        left = days_until(member.end_date, today)
        if left < 0:
            return "expired"
        return f"{left} day left" if left == 1 else f"{left} days left"
    return "unknown"


class AdminReportService:
    """Read-only dashboard queries for the gym admin."""

    def __init__(
        self,
        members: MemberRepository,
        attendance: AttendanceRepository,
        *,
        new_member_days: int = DEFAULT_NEW_MEMBER_DAYS,
        expiry_warning_days: int = DEFAULT_EXPIRY_WARNING_DAYS,
        low_session_limit: int = DEFAULT_LOW_SESSION_LIMIT,
    ):
        self._members = members
        self._attendance = attendance
        self._new_member_days = int(new_member_days)
        self._expiry_warning_days = int(expiry_warning_days)
        self._low_session_limit = int(low_session_limit)

    def member_stats(self, *, today: Optional[date] = None) -> MemberStats:
        today = today or now_local().date()
        counts = self._members.count_by_type()
        return MemberStats(
            total_members=sum(counts.values()),
            session_members=counts.get(MembershipKind.SESSION.value, 0),
            period_members=counts.get(MembershipKind.PERIOD.value, 0),
            today_attendance=self._attendance.count_for_date(today),
        )

    def today_attendance(self, *, today: Optional[date] = None):
        today = today or now_local().date()
        return self._attendance.list_for_date(today)

    def all_members(self) -> Sequence[Member]:
        return self._members.list_all()

    def new_members(self, *, days: Optional[int] = None, now: Optional[datetime] = None) -> Sequence[Member]:
        now = now or now_local()
        days = self._new_member_days if days is None else int(days)
        return self._members.list_created_since(now - timedelta(days=days))

    def expiring_members(self, *, days: Optional[int] = None, today: Optional[date] = None) -> Sequence[Member]:
        """Free members whose end date is today or within the next ``days`` days."""
        today = today or now_local().date()
        days = self._expiry_warning_days if days is None else int(days)
        return self._members.list_period_ending_between(today, today + timedelta(days=days))

    def low_session_members(self, *, limit: Optional[int] = None) -> Sequence[Member]:
        limit = self._low_session_limit if limit is None else int(limit)
        return self._members.list_sessions_at_most(limit)

    def member_rows(self, members: Sequence[Member], *, today: Optional[date] = None) -> list[dict]:
        today = today or now_local().date()
        return [{**m.to_dict(), "status": membership_status(m, today)} for m in members]

    def today_attendance_rows(self, *, today: Optional[date] = None) -> list[dict]:
        """Flat rows for the CSV export."""
        rows = []
        for r in self.today_attendance(today=today):
            rows.append(
                {
                    "check_in_time": r.check_in_time.strftime("%Y-%m-%d %H:%M:%S"),
                    "name": r.member.name,
                    "phone": r.member.phone,
                    "membership_type": r.member.membership_type,
                    "wallet_address": r.member.wallet_address,
                }
            )
        return rows
