from __future__ import annotations

from datetime import date, datetime
from typing import Any, Dict, Mapping, Optional, Sequence

import mysql.connector

from ..core.enums import MembershipKind
from ..core.exceptions import ValidationError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, is_duplicate_key
from .model import Member
from .repository import MemberRepository

_COLUMNS = """
    member_id, wallet_address, name, phone, membership_type,
    start_date, end_date, remaining_sessions, created_at
"""


def _to_member(r: Dict[str, Any]) -> Member:
    remaining = r.get("remaining_sessions")
    return Member(
        member_id=int(r["member_id"]),
        wallet_address=r["wallet_address"],
        name=r["name"],
        phone=r["phone"],
        membership_type=r["membership_type"],
        start_date=r.get("start_date"),
        end_date=r.get("end_date"),
        remaining_sessions=int(remaining) if remaining is not None else None,
        created_at=r.get("created_at"),
    )


class MySQLMemberRepository(MemberRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_wallet_address(self, wallet_address: str) -> Optional[Member]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM members WHERE wallet_address=%s", (wallet_address,))
            row = fetchone(cur)
            return _to_member(row) if row else None

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
        with db_cursor(self._conn_factory) as (_, cur):
            try:
                cur.execute(
                    """
                    INSERT INTO members(
                        wallet_address, name, phone, membership_type,
                        start_date, end_date, remaining_sessions, created_at
                    )
                    VALUES(%s,%s,%s,%s,%s,%s,%s,%s)
                    """,
                    (
                        wallet_address,
                        name,
                        phone,
                        membership_type.value,
                        start_date,
                        end_date,
                        remaining_sessions,
                        created_at.replace(microsecond=0),
                    ),
                )
            except mysql.connector.IntegrityError as e:
                # uq_members_wallet: a concurrent registration won
                if is_duplicate_key(e):
                    raise ValidationError("This wallet address is already registered") from e
                raise
            return int(cur.lastrowid)

    def get_remaining_sessions(self, member_id: int) -> Optional[int]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT remaining_sessions FROM members WHERE member_id=%s", (int(member_id),))
            row = fetchone(cur)
            if not row or row.get("remaining_sessions") is None:
                return None
            return int(row["remaining_sessions"])

    def decrement_sessions(self, member_id: int) -> Optional[int]:
        # The row lock taken by the UPDATE is held until commit, so the
        # follow-up SELECT sees this transaction's own balance.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE members
                SET remaining_sessions = remaining_sessions - 1
                WHERE member_id=%s AND remaining_sessions > 0
                """,
                (int(member_id),),
            )
            if cur.rowcount == 0:
                return None
            cur.execute("SELECT remaining_sessions FROM members WHERE member_id=%s", (int(member_id),))
            row = fetchone(cur)
            return int(row["remaining_sessions"])

    def list_all(self) -> Sequence[Member]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM members ORDER BY created_at DESC")
            return [_to_member(r) for r in fetchall(cur)]

    def list_created_since(self, since: datetime) -> Sequence[Member]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM members WHERE created_at >= %s ORDER BY created_at DESC",
                (since,),
            )
            return [_to_member(r) for r in fetchall(cur)]

    def list_period_ending_between(self, start: date, end: date) -> Sequence[Member]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS} FROM members
                WHERE membership_type=%s AND end_date BETWEEN %s AND %s
                ORDER BY end_date ASC
                """,
                (MembershipKind.PERIOD.value, start, end),
            )
            return [_to_member(r) for r in fetchall(cur)]

    def list_sessions_at_most(self, limit: int) -> Sequence[Member]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS} FROM members
                WHERE membership_type=%s AND remaining_sessions <= %s
                ORDER BY remaining_sessions ASC
                """,
                (MembershipKind.SESSION.value, int(limit)),
            )
            return [_to_member(r) for r in fetchall(cur)]

    def count_by_type(self) -> Mapping[str, int]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT membership_type, COUNT(*) AS n FROM members GROUP BY membership_type")
            return {r["membership_type"]: int(r["n"]) for r in fetchall(cur)}
