from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .admin.auth import AdminAuthService
from .admin.service import AdminReportService
from .checkin.mysql_attendance_repository import MySQLAttendanceRepository
from .checkin.repository import AttendanceRepository
from .checkin.service import CheckInService
from .core.constants import DEFAULT_EXPIRY_WARNING_DAYS, DEFAULT_LOW_SESSION_LIMIT, DEFAULT_NEW_MEMBER_DAYS
from .database.connection import DBConfig, DatabaseConnection
from .members.mysql_member_repository import MySQLMemberRepository
from .members.repository import MemberRepository
from .members.service import MemberService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    members_repo: MemberRepository
    attendance_repo: AttendanceRepository

    member_service: MemberService
    checkin_service: CheckInService
    admin_service: AdminReportService
    admin_auth_service: AdminAuthService

    def close(self) -> None:
        if self.conn is not None:
            self.conn.close()


def build_services(
    *,
    members_repo: MemberRepository,
    attendance_repo: AttendanceRepository,
    conn: Optional[DatabaseConnection] = None,
    settings: Optional[dict] = None,
) -> Container:
    """Wire services over any repository pair (MySQL in the app, fakes in tests)."""
    settings = settings or {}
    return Container(
        conn=conn,
        members_repo=members_repo,
        attendance_repo=attendance_repo,
        member_service=MemberService(members_repo),
        checkin_service=CheckInService(members_repo, attendance_repo),
        admin_service=AdminReportService(
            members_repo,
            attendance_repo,
            new_member_days=int(settings.get("NEW_MEMBER_DAYS", DEFAULT_NEW_MEMBER_DAYS)),
            expiry_warning_days=int(settings.get("EXPIRY_WARNING_DAYS", DEFAULT_EXPIRY_WARNING_DAYS)),
            low_session_limit=int(settings.get("LOW_SESSION_LIMIT", DEFAULT_LOW_SESSION_LIMIT)),
        ),
        admin_auth_service=AdminAuthService(settings.get("ADMIN_PASSWORD_HASH")),
    )


def build_container(*, db_config: dict, settings: Optional[dict] = None) -> Container:
    config = DBConfig(
        host=str(db_config["host"]),
        port=int(db_config.get("port", 3306)),
        user=str(db_config["user"]),
        password=str(db_config["password"]),
        database=str(db_config["database"]),
        pool_size=int(db_config.get("pool_size", 5)),
    )
    conn = DatabaseConnection(config)

    return build_services(
        members_repo=MySQLMemberRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        conn=conn,
        settings=settings,
    )
