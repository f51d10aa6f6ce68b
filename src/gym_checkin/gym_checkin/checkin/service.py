from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import now_local
from ..core.exceptions import CheckInError, NoIdentifierFound, StoreError, UnregisteredMember
from ..members.repository import MemberRepository
from .extractor import extract_identifier
from .factory import CheckInStrategyFactory
from .model import CheckInResult
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class CheckInService:
    """Use case: turn a scanned code into a member check-in.

    Every failure is raised as a named CheckInError subclass before any write
    happens; StoreError from the repositories propagates unchanged.
    """

    def __init__(
        self,
        members: MemberRepository,
        attendance: AttendanceRepository,
        *,
        strategy_factory: Optional[CheckInStrategyFactory] = None,
    ):
        self._members = members
        self._attendance = attendance
        self._factory = strategy_factory or CheckInStrategyFactory(attendance=attendance, members=members)

    def check_in(self, identifier: str, *, now: Optional[datetime] = None) -> CheckInResult:
        # Whole seconds, matching what the attendance table stores.
        now = (now or now_local()).replace(microsecond=0)

        try:
            member = self._members.get_by_wallet_address(identifier)
            if not member:
                raise UnregisteredMember(identifier)

            strategy = self._factory.for_member(member)
            result = strategy.check_in(member, now=now)
        except CheckInError as e:
            logger.info("Check-in rejected for %s: %s", identifier, e.code)
            raise
        except StoreError:
            logger.exception("Record store failed during check-in for %s", identifier)
            raise

        logger.info("Check-in ok for %s: %s", identifier, result.message)
        return result

    def check_in_scanned(self, raw_text: Optional[str], *, now: Optional[datetime] = None) -> CheckInResult:
        identifier = extract_identifier(raw_text)
        if identifier is None:
            logger.info("Scanned code carries no member address")
            raise NoIdentifierFound()
        return self.check_in(identifier, now=now)
