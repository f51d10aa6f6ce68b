from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime

from ...members.model import Member
from ..model import CheckInResult


class CheckInStrategy(ABC):
    """Strategy Pattern: how a check-in mutates state for one membership kind."""

    @abstractmethod
    def check_in(self, member: Member, *, now: datetime) -> CheckInResult:
        raise NotImplementedError
