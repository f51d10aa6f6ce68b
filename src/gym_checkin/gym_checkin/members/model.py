from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import MembershipKind


@dataclass(frozen=True)
class Member:
    """Domain entity: a gym member keyed by wallet address.

    ``membership_type`` keeps the raw stored value so an unexpected value
    reaches the check-in procedure instead of failing inside the repository.
    """

    member_id: int
    wallet_address: str
    name: str
    phone: str
    membership_type: str
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    remaining_sessions: Optional[int] = None
    created_at: Optional[datetime] = None

    @property
    def kind(self) -> Optional[MembershipKind]:
        try:
            return MembershipKind(self.membership_type)
        except ValueError:
            return None

    def to_dict(self) -> dict:
        return {
            "member_id": self.member_id,
            "wallet_address": self.wallet_address,
            "name": self.name,
            "phone": self.phone,
            "membership_type": self.membership_type,
            "start_date": self.start_date.isoformat() if self.start_date else None,
            "end_date": self.end_date.isoformat() if self.end_date else None,
            "remaining_sessions": self.remaining_sessions,
            "created_at": self.created_at.isoformat(sep=" ") if self.created_at else None,
        }
