from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional

from .checkin.service import SelfCheckInService
from .common.datetime_utils import now_local
from .core.constants import DEFAULT_QR_SIZE
from .database.connection import DatabaseConnection, DBConfig
from .members.mysql_member_repository import MySQLMemberRepository
from .members.repository import MemberRepository
from .members.service import MemberService
from .qr.service import QRService
from .reports.service import ReportService
from .scan.service import ScanIngestService
from .sessions.mysql_session_repository import MySQLSessionRepository
from .sessions.repository import SessionRepository
from .sessions.service import AttendanceService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    members_repo: MemberRepository
    sessions_repo: SessionRepository

    member_service: MemberService
    attendance_service: AttendanceService
    scan_service: ScanIngestService
    qr_service: QRService
    checkin_service: SelfCheckInService
    report_service: ReportService

    clock: Callable[[], datetime] = now_local


def build_services(
    *,
    members_repo: MemberRepository,
    sessions_repo: SessionRepository,
    conn: Optional[DatabaseConnection] = None,
    checkin_base_url: str = "",
    qr_size: int = DEFAULT_QR_SIZE,
    clock: Callable[[], datetime] = now_local,
) -> Container:
    """Wire services on top of any repository implementation."""

    member_service = MemberService(members_repo, sessions_repo, clock=clock)
    attendance_service = AttendanceService(sessions_repo, members_repo, clock=clock)

    return Container(
        conn=conn,
        members_repo=members_repo,
        sessions_repo=sessions_repo,
        member_service=member_service,
        attendance_service=attendance_service,
        scan_service=ScanIngestService(member_service, attendance_service),
        qr_service=QRService(default_base_url=checkin_base_url, size=qr_size),
        checkin_service=SelfCheckInService(member_service, attendance_service),
        report_service=ReportService(member_service, attendance_service),
        clock=clock,
    )


def build_container(*, db_config: dict, checkin_base_url: str = "", qr_size: int = DEFAULT_QR_SIZE) -> Container:
    config = DBConfig(
        host=str(db_config["host"]),
        port=int(db_config.get("port", 3306)),
        user=str(db_config["user"]),
        password=str(db_config["password"]),
        database=str(db_config["database"]),
    )
    conn = DatabaseConnection.get_instance(config)

    return build_services(
        members_repo=MySQLMemberRepository(conn),
        sessions_repo=MySQLSessionRepository(conn),
        conn=conn,
        checkin_base_url=checkin_base_url,
        qr_size=qr_size,
    )
