from __future__ import annotations

import os
from datetime import datetime

import pytest

os.environ.setdefault("APP_ENV", "testing")

from src.attendance_book.attendance_book import create_app
from src.attendance_book.attendance_book.container import build_services
from src.attendance_book.attendance_book.members.service import MemberService
from src.attendance_book.attendance_book.sessions.service import AttendanceService
from tests.fakes import FixedClock, InMemoryMembers, InMemorySessions

CLASS_ID = "수요반 A"


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 3, 11, 9, 30, 0)


@pytest.fixture
def clock(fixed_now) -> FixedClock:
    return FixedClock(fixed_now)


@pytest.fixture
def members_repo() -> InMemoryMembers:
    return InMemoryMembers()


@pytest.fixture
def sessions_repo() -> InMemorySessions:
    return InMemorySessions()


@pytest.fixture
def member_service(members_repo, sessions_repo, clock) -> MemberService:
    return MemberService(members_repo, sessions_repo, clock=clock)


@pytest.fixture
def attendance_service(members_repo, sessions_repo, clock) -> AttendanceService:
    return AttendanceService(sessions_repo, members_repo, clock=clock)


@pytest.fixture
def container(members_repo, sessions_repo, clock):
    return build_services(
        members_repo=members_repo,
        sessions_repo=sessions_repo,
        checkin_base_url="https://attendance.example.com/",
        clock=clock,
    )


@pytest.fixture
def app(container):
    app = create_app(container=container)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()
