from datetime import date, datetime

import pytest
from werkzeug.security import generate_password_hash

from src.gym_checkin.gym_checkin.admin.auth import AdminAuthService
from src.gym_checkin.gym_checkin.admin.service import AdminReportService, membership_status
from src.gym_checkin.gym_checkin.core.exceptions import AuthenticationError
from src.gym_checkin.gym_checkin.members.model import Member


@pytest.fixture
def admin_service(members_repo, attendance_repo):
    return AdminReportService(members_repo, attendance_repo, new_member_days=7, expiry_warning_days=7, low_session_limit=5)


def _member(**fields):
    base = dict(member_id=1, wallet_address="0x" + "a" * 40, name="A", phone="0100000000", membership_type="pt")
    base.update(fields)
    return Member(**base)


def test_membership_status_labels():
    today = date(2026, 2, 1)
    assert membership_status(_member(remaining_sessions=4), today) == "4 sessions left"
    assert membership_status(_member(remaining_sessions=1), today) == "1 session left"
    assert membership_status(_member(membership_type="free", end_date=date(2026, 2, 2)), today) == "1 day left"
    assert membership_status(_member(membership_type="free", end_date=date(2026, 2, 11)), today) == "10 days left"
    assert membership_status(_member(membership_type="free", end_date=date(2026, 1, 31)), today) == "expired"
    assert membership_status(_member(membership_type="free"), today) == "unlimited"
    assert membership_status(_member(membership_type="vip"), today) == "unknown"


def test_member_stats_counts_types_and_today(admin_service, checkin_service, period_member, session_member, fixed_now):
    checkin_service.check_in(period_member.wallet_address, now=fixed_now)

    stats = admin_service.member_stats(today=fixed_now.date())
    assert stats.to_dict() == {
        "total_members": 2,
        "session_members": 1,
        "period_members": 1,
        "today_attendance": 1,
    }


def test_today_attendance_rows(admin_service, checkin_service, period_member, fixed_now):
    checkin_service.check_in(period_member.wallet_address, now=fixed_now)

    rows = admin_service.today_attendance_rows(today=fixed_now.date())
    assert rows == [
        {
            "check_in_time": "2026-02-01 09:30:00",
            "name": period_member.name,
            "phone": period_member.phone,
            "membership_type": "free",
            "wallet_address": period_member.wallet_address,
        }
    ]


def test_new_members_uses_window(admin_service, members_repo):
    members_repo.add(wallet_address="0x" + "1" * 40, membership_type="pt", created_at=datetime(2026, 1, 30, 8, 0))
    members_repo.add(wallet_address="0x" + "2" * 40, membership_type="pt", created_at=datetime(2026, 1, 10, 8, 0))

    now = datetime(2026, 2, 1, 9, 0)
    assert [m.wallet_address for m in admin_service.new_members(now=now)] == ["0x" + "1" * 40]
    assert len(admin_service.new_members(days=30, now=now)) == 2


def test_expiring_and_low_session_members(admin_service, members_repo):
    today = date(2026, 2, 1)
    soon = members_repo.add(wallet_address="0x" + "3" * 40, membership_type="free", end_date=date(2026, 2, 5))
    members_repo.add(wallet_address="0x" + "4" * 40, membership_type="free", end_date=date(2026, 6, 1))
    low = members_repo.add(wallet_address="0x" + "5" * 40, membership_type="pt", remaining_sessions=2)
    members_repo.add(wallet_address="0x" + "6" * 40, membership_type="pt", remaining_sessions=20)

    assert admin_service.expiring_members(today=today) == [soon]
    assert admin_service.low_session_members() == [low]
    assert len(admin_service.low_session_members(limit=30)) == 2


def test_admin_auth():
    auth = AdminAuthService(generate_password_hash("s3cret"))
    auth.authenticate("s3cret")

    with pytest.raises(AuthenticationError):
        auth.authenticate("wrong")
    with pytest.raises(AuthenticationError):
        AdminAuthService("").authenticate("s3cret")
