from __future__ import annotations

from datetime import date, datetime
from typing import Mapping, Optional, Protocol, Sequence

from ..core.enums import MembershipKind
from .model import Member


class MemberRepository(Protocol):
    """Repository interface for members.

    Services depend on this protocol, not on a concrete database.
    """

    def get_by_wallet_address(self, wallet_address: str) -> Optional[Member]:
        raise NotImplementedError

    def create_member(
        self,
        *,
        wallet_address: str,
        name: str,
        phone: str,
        membership_type: MembershipKind,
        start_date: Optional[date],
        end_date: Optional[date],
        remaining_sessions: Optional[int],
        created_at: datetime,
    ) -> int:
        raise NotImplementedError

    def get_remaining_sessions(self, member_id: int) -> Optional[int]:
        """Fresh read of the committed balance (no cached copy)."""

        raise NotImplementedError

    def decrement_sessions(self, member_id: int) -> Optional[int]:
        """Atomically take one session if any remain.

        Returns the new balance, or None when no row was updated because the
        balance was already zero (or missing).
        """

        raise NotImplementedError

    def list_all(self) -> Sequence[Member]:
        raise NotImplementedError

    def list_created_since(self, since: datetime) -> Sequence[Member]:
        raise NotImplementedError

    def list_period_ending_between(self, start: date, end: date) -> Sequence[Member]:
        raise NotImplementedError

    def list_sessions_at_most(self, limit: int) -> Sequence[Member]:
        raise NotImplementedError

    def count_by_type(self) -> Mapping[str, int]:
        raise NotImplementedError
