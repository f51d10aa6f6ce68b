from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime
from typing import Optional

import pytest

from src.gym_checkin.gym_checkin.checkin.model import AttendanceRecord, AttendanceRow
from src.gym_checkin.gym_checkin.checkin.service import CheckInService
from src.gym_checkin.gym_checkin.core.enums import MembershipKind
from src.gym_checkin.gym_checkin.members.model import Member
from src.gym_checkin.gym_checkin.members.service import MemberService

PERIOD_ADDR = "0x52908400098527886E0F7030069857D2E4169EE7"
SESSION_ADDR = "0x8617E340B3D01FA5F11F306F4090FD50E238070D"
OTHER_ADDR = "0xde709f2102306220921060314715629080e2fb77"


class InMemoryMembers:
    def __init__(self):
        self._by_id: dict[int, Member] = {}
        self._id = 0
        self.decrement_calls = 0

    def add(self, *, wallet_address: str, membership_type: str, **fields) -> Member:
        self._id += 1
        member = Member(
            member_id=self._id,
            wallet_address=wallet_address,
            name=fields.pop("name", f"Member {self._id}"),
            phone=fields.pop("phone", "010-0000-0000"),
            membership_type=membership_type,
            created_at=fields.pop("created_at", datetime(2026, 1, 1, 12, 0, 0)),
            **fields,
        )
        self._by_id[member.member_id] = member
        return member

    def get_by_id(self, member_id: int) -> Optional[Member]:
        return self._by_id.get(member_id)

    def get_by_wallet_address(self, wallet_address: str) -> Optional[Member]:
        for m in self._by_id.values():
            if m.wallet_address == wallet_address:
                return m
        return None

    def create_member(
        self,
        *,
        wallet_address,
        name,
        phone,
        membership_type: MembershipKind,
        start_date,
        end_date,
        remaining_sessions,
        created_at,
    ) -> int:
        member = self.add(
            wallet_address=wallet_address,
            membership_type=membership_type.value,
            name=name,
            phone=phone,
            start_date=start_date,
            end_date=end_date,
            remaining_sessions=remaining_sessions,
            created_at=created_at,
        )
        return member.member_id

    def get_remaining_sessions(self, member_id: int) -> Optional[int]:
        m = self._by_id.get(member_id)
        return m.remaining_sessions if m else None

    def decrement_sessions(self, member_id: int) -> Optional[int]:
        self.decrement_calls += 1
        m = self._by_id.get(member_id)
        if not m or m.remaining_sessions is None or m.remaining_sessions <= 0:
            return None
        self._by_id[member_id] = replace(m, remaining_sessions=m.remaining_sessions - 1)
        return m.remaining_sessions - 1

    def list_all(self):
        return sorted(self._by_id.values(), key=lambda m: m.created_at, reverse=True)

    def list_created_since(self, since: datetime):
        return [m for m in self.list_all() if m.created_at >= since]

    def list_period_ending_between(self, start: date, end: date):
        items = [
            m
            for m in self._by_id.values()
            if m.membership_type == MembershipKind.PERIOD.value and m.end_date and start <= m.end_date <= end
        ]
        return sorted(items, key=lambda m: m.end_date)

    def list_sessions_at_most(self, limit: int):
        items = [
            m
            for m in self._by_id.values()
            if m.membership_type == MembershipKind.SESSION.value
            and m.remaining_sessions is not None
            and m.remaining_sessions <= limit
        ]
        return sorted(items, key=lambda m: m.remaining_sessions)

    def count_by_type(self):
        counts: dict[str, int] = {}
        for m in self._by_id.values():
            counts[m.membership_type] = counts.get(m.membership_type, 0) + 1
        return counts


class InMemoryAttendance:
    """Mirrors the MySQL table, including UNIQUE (member_id, check_in_date)."""

    def __init__(self, members: InMemoryMembers):
        self._members = members
        self.records: list[AttendanceRecord] = []
        self._id = 0

    def find_in_window(self, member_id: int, start: datetime, end: datetime):
        return [r for r in self.records if r.member_id == member_id and start <= r.check_in_time <= end]

    def create_checkin(self, *, member_id: int, check_in_time: datetime) -> Optional[int]:
        for r in self.records:
            if r.member_id == member_id and r.check_in_time.date() == check_in_time.date():
                return None
        self._id += 1
        self.records.append(AttendanceRecord(attendance_id=self._id, member_id=member_id, check_in_time=check_in_time))
        return self._id

    def list_for_date(self, day: date):
        rows = [
            AttendanceRow(attendance_id=r.attendance_id, check_in_time=r.check_in_time, member=self._members.get_by_id(r.member_id))
            for r in self.records
            if r.check_in_time.date() == day
        ]
        return sorted(rows, key=lambda r: r.check_in_time, reverse=True)

    def count_for_date(self, day: date) -> int:
        return len([r for r in self.records if r.check_in_time.date() == day])


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 2, 1, 9, 30, 0)


@pytest.fixture
def members_repo() -> InMemoryMembers:
    return InMemoryMembers()


@pytest.fixture
def attendance_repo(members_repo) -> InMemoryAttendance:
    return InMemoryAttendance(members_repo)


@pytest.fixture
def period_member(members_repo) -> Member:
    return members_repo.add(
        wallet_address=PERIOD_ADDR,
        membership_type="free",
        start_date=date(2026, 1, 1),
        end_date=date(2026, 4, 1),
    )


@pytest.fixture
def session_member(members_repo) -> Member:
    return members_repo.add(wallet_address=SESSION_ADDR, membership_type="pt", remaining_sessions=1)


@pytest.fixture
def checkin_service(members_repo, attendance_repo) -> CheckInService:
    return CheckInService(members_repo, attendance_repo)


@pytest.fixture
def member_service(members_repo) -> MemberService:
    return MemberService(members_repo)
