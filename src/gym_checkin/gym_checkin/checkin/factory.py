from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import MembershipKind
from ..core.exceptions import UnknownMembershipKind
from ..members.model import Member
from ..members.repository import MemberRepository
from .repository import AttendanceRepository
from .strategies.base import CheckInStrategy
from .strategies.period_strategy import PeriodPassStrategy
from .strategies.session_strategy import SessionPassStrategy


@dataclass
class CheckInStrategyFactory:
    """Factory Pattern: choose the check-in strategy from the membership kind."""

    attendance: AttendanceRepository
    members: MemberRepository

    def for_member(self, member: Member) -> CheckInStrategy:
        kind = member.kind
        if kind == MembershipKind.PERIOD:
            return PeriodPassStrategy(self.attendance)
        if kind == MembershipKind.SESSION:
            return SessionPassStrategy(self.members)
        raise UnknownMembershipKind(member.membership_type)
