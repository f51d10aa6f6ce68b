from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Sequence

import mysql.connector

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, is_duplicate_key
from ..members.model import Member
from .model import AttendanceRecord, AttendanceRow
from .repository import AttendanceRepository


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def find_in_window(self, member_id: int, start: datetime, end: datetime) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT attendance_id, member_id, check_in_time
                FROM attendance
                WHERE member_id=%s AND check_in_time BETWEEN %s AND %s
                ORDER BY check_in_time
                """,
                (int(member_id), start, end),
            )
            return [
                AttendanceRecord(
                    attendance_id=int(r["attendance_id"]),
                    member_id=int(r["member_id"]),
                    check_in_time=r["check_in_time"],
                )
                for r in fetchall(cur)
            ]

    def create_checkin(self, *, member_id: int, check_in_time: datetime) -> Optional[int]:
        # check_in_time is DATETIME(0), which rounds fractions; a rounded-up
        # 23:59:59.6 would land in the next day's window.
        check_in_time = check_in_time.replace(microsecond=0)
        with db_cursor(self._conn_factory) as (_, cur):
            try:
                cur.execute(
                    """
                    INSERT INTO attendance(member_id, check_in_time, check_in_date)
                    VALUES(%s,%s,%s)
                    """,
                    (int(member_id), check_in_time, check_in_time.date()),
                )
            except mysql.connector.IntegrityError as e:
                # uq_attendance_member_day: another check-in for this day committed first
                if is_duplicate_key(e):
                    return None
                raise
            return int(cur.lastrowid)

    def list_for_date(self, day: date) -> Sequence[AttendanceRow]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT
                    a.attendance_id, a.check_in_time,
                    m.member_id, m.wallet_address, m.name, m.phone, m.membership_type,
                    m.start_date, m.end_date, m.remaining_sessions, m.created_at
                FROM attendance a
                JOIN members m ON m.member_id = a.member_id
                WHERE a.check_in_date=%s
                ORDER BY a.check_in_time DESC
                """,
                (day,),
            )
            return [
                AttendanceRow(
                    attendance_id=int(r["attendance_id"]),
                    check_in_time=r["check_in_time"],
                    member=Member(
                        member_id=int(r["member_id"]),
                        wallet_address=r["wallet_address"],
                        name=r["name"],
                        phone=r["phone"],
                        membership_type=r["membership_type"],
                        start_date=r.get("start_date"),
                        end_date=r.get("end_date"),
                        remaining_sessions=r.get("remaining_sessions"),
                        created_at=r.get("created_at"),
                    ),
                )
                for r in fetchall(cur)
            ]

    def count_for_date(self, day: date) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT COUNT(*) AS n FROM attendance WHERE check_in_date=%s", (day,))
            row = fetchone(cur)
            return int(row["n"]) if row else 0
