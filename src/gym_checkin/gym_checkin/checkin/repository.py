from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from .model import AttendanceRecord, AttendanceRow


class AttendanceRepository(Protocol):
    def find_in_window(self, member_id: int, start: datetime, end: datetime) -> Sequence[AttendanceRecord]:
        """Records whose check_in_time lies in [start, end], both inclusive."""

        raise NotImplementedError

    def create_checkin(self, *, member_id: int, check_in_time: datetime) -> Optional[int]:
        """Insert a record; None when the member already has one for that local date."""

        raise NotImplementedError

    def list_for_date(self, day: date) -> Sequence[AttendanceRow]:
        raise NotImplementedError

    def count_for_date(self, day: date) -> int:
        raise NotImplementedError
