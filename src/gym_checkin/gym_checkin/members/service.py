from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from ..checkin.extractor import is_identifier
from ..common.datetime_utils import add_months, now_local
from ..common.validators import require_choice, require_non_empty, require_phone
from ..core.constants import PERIOD_MONTH_OPTIONS, SESSION_OPTIONS
from ..core.enums import MembershipKind
from ..core.exceptions import ValidationError
from .model import Member
from .repository import MemberRepository

logger = logging.getLogger(__name__)


class MemberService:
    """Use case: register members and resolve them by address."""

    def __init__(self, members: MemberRepository):
        self._members = members

    def register(
        self,
        *,
        wallet_address: str,
        name: str,
        phone: str,
        membership_type: str,
        option: int,
        now: Optional[datetime] = None,
    ) -> Member:
        """Create a member.

        ``option`` is the session count for PT memberships (10/20/30) or the
        number of months for free memberships (1/3/6). Free memberships start
        today and end the same day ``option`` months later.
        """
        now = now or now_local()

        wallet_address = require_non_empty(wallet_address, "Wallet address")
        if not is_identifier(wallet_address):
            raise ValidationError("Wallet address must be 0x followed by 40 hex characters")
        name = require_non_empty(name, "Name")
        phone = require_phone(phone)

        try:
            kind = MembershipKind(membership_type)
        except ValueError:
            raise ValidationError("Membership type must be 'pt' or 'free'")

        start_date = end_date = None
        remaining_sessions = None
        if kind == MembershipKind.SESSION:
            remaining_sessions = require_choice(option, SESSION_OPTIONS, "PT sessions")
        else:
            months = require_choice(option, PERIOD_MONTH_OPTIONS, "Membership months")
            start_date = now.date()
            end_date = add_months(start_date, months)

        if self._members.get_by_wallet_address(wallet_address):
            raise ValidationError("This wallet address is already registered")

        member_id = self._members.create_member(
            wallet_address=wallet_address,
            name=name,
            phone=phone,
            membership_type=kind,
            start_date=start_date,
            end_date=end_date,
            remaining_sessions=remaining_sessions,
            created_at=now,
        )
        logger.info("Registered member %s (%s, %s)", member_id, wallet_address, kind.value)

        return Member(
            member_id=member_id,
            wallet_address=wallet_address,
            name=name,
            phone=phone,
            membership_type=kind.value,
            start_date=start_date,
            end_date=end_date,
            remaining_sessions=remaining_sessions,
            created_at=now,
        )

    def get_by_wallet_address(self, wallet_address: str) -> Optional[Member]:
        return self._members.get_by_wallet_address(wallet_address.strip())
