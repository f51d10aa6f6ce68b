import pytest

from src.gym_checkin.gym_checkin.checkin.factory import CheckInStrategyFactory
from src.gym_checkin.gym_checkin.checkin.strategies.period_strategy import PeriodPassStrategy
from src.gym_checkin.gym_checkin.checkin.strategies.session_strategy import SessionPassStrategy
from src.gym_checkin.gym_checkin.core.exceptions import UnknownMembershipKind
from src.gym_checkin.gym_checkin.members.model import Member


def _member(membership_type: str) -> Member:
    return Member(
        member_id=1,
        wallet_address="0x" + "1" * 40,
        name="A",
        phone="010-0000-0000",
        membership_type=membership_type,
    )


def test_factory_free_membership_uses_period_strategy(members_repo, attendance_repo):
    factory = CheckInStrategyFactory(attendance=attendance_repo, members=members_repo)
    assert isinstance(factory.for_member(_member("free")), PeriodPassStrategy)


def test_factory_pt_membership_uses_session_strategy(members_repo, attendance_repo):
    factory = CheckInStrategyFactory(attendance=attendance_repo, members=members_repo)
    assert isinstance(factory.for_member(_member("pt")), SessionPassStrategy)


def test_factory_unknown_membership_raises(members_repo, attendance_repo):
    factory = CheckInStrategyFactory(attendance=attendance_repo, members=members_repo)
    with pytest.raises(UnknownMembershipKind) as exc:
        factory.for_member(_member("vip"))
    assert exc.value.membership_type == "vip"
