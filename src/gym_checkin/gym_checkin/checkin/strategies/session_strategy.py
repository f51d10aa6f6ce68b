from __future__ import annotations

from datetime import datetime

from ...core.enums import CheckInOutcome
from ...core.exceptions import NoSessionsRemaining
from ...members.model import Member
from ...members.repository import MemberRepository
from ..model import CheckInResult
from .base import CheckInStrategy


class SessionPassStrategy(CheckInStrategy):
    """PT membership: spend one session per check-in, never below zero."""

    def __init__(self, members: MemberRepository):
        self._members = members

    def check_in(self, member: Member, *, now: datetime) -> CheckInResult:
        remaining = self._members.get_remaining_sessions(member.member_id)
        if remaining is None or remaining <= 0:
            raise NoSessionsRemaining()

        remaining = self._members.decrement_sessions(member.member_id)
        if remaining is None:
            raise NoSessionsRemaining()

        return CheckInResult(
            outcome=CheckInOutcome.CHECKED_IN_SESSION,
            member=member,
            check_in_time=now,
            remaining_sessions=remaining,
        )
