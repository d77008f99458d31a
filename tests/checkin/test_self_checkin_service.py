from __future__ import annotations

import time
from concurrent.futures import ThreadPoolExecutor
from datetime import date

import pytest

from src.attendance_book.attendance_book.checkin.service import SelfCheckInService
from src.attendance_book.attendance_book.core.enums import CheckInAction
from src.attendance_book.attendance_book.core.exceptions import AlreadyCheckedInError, NotFoundError, ValidationError
from src.attendance_book.attendance_book.members.service import MemberService
from src.attendance_book.attendance_book.sessions.service import AttendanceService
from tests.fakes import InMemorySessions

CLASS_ID = "수요반 A"
TODAY = date(2026, 3, 11)


@pytest.fixture
def checkin_service(member_service, attendance_service):
    return SelfCheckInService(member_service, attendance_service)


def test_check_in_marks_today_session(checkin_service, member_service, attendance_service):
    m = member_service.add_member(CLASS_ID, "김민준")

    result = checkin_service.check_in(CLASS_ID, "오후", m.member_id, TODAY)

    assert result.action == CheckInAction.CHECKED_IN
    assert result.message == "김민준님 출석 확인 완료!"
    assert attendance_service.get_session(CLASS_ID, TODAY, "오후").present_ids == (m.member_id,)


def test_second_check_in_needs_cancel(checkin_service, member_service, attendance_service):
    m = member_service.add_member(CLASS_ID, "김민준")
    checkin_service.check_in(CLASS_ID, "오전", m.member_id, TODAY)

    with pytest.raises(AlreadyCheckedInError):
        checkin_service.check_in(CLASS_ID, "오전", m.member_id, TODAY)

    result = checkin_service.check_in(CLASS_ID, "오전", m.member_id, TODAY, cancel=True)
    assert result.action == CheckInAction.CANCELLED
    assert result.present_count == 0
    assert not attendance_service.get_session(CLASS_ID, TODAY, "오전").is_present(m.member_id)


def test_check_in_unknown_member(checkin_service):
    with pytest.raises(NotFoundError):
        checkin_service.check_in(CLASS_ID, "오전", "m_nobody", TODAY)


def test_roster_status_flags_checked_in_members(checkin_service, member_service):
    a = member_service.add_member(CLASS_ID, "김민준")
    member_service.add_member(CLASS_ID, "이서연")
    checkin_service.check_in(CLASS_ID, "저녁", a.member_id, TODAY)

    status = {r["name"]: r["checked_in"] for r in checkin_service.roster_status(CLASS_ID, "저녁", TODAY)}

    assert status == {"김민준": True, "이서연": False}


def test_register_and_check_in(checkin_service, member_service, attendance_service):
    result = checkin_service.register_and_check_in(CLASS_ID, "오전", "  정하늘 ", TODAY)

    assert result.member.name == "정하늘"
    assert [m.name for m in member_service.list_members(CLASS_ID)] == ["정하늘"]
    assert attendance_service.get_session(CLASS_ID, TODAY, "오전").is_present(result.member.member_id)


@pytest.mark.parametrize("name", ["", " 김 ", None])
def test_register_requires_two_characters(checkin_service, member_service, name):
    with pytest.raises(ValidationError) as exc:
        checkin_service.register_and_check_in(CLASS_ID, "오전", name, TODAY)

    assert str(exc.value) == "정확한 성함을 입력해주세요."
    assert member_service.list_members(CLASS_ID) == []


class SlowSessions(InMemorySessions):
    """Widens the window between reading a session and writing it back."""

    def get(self, class_key, work_date, slot):
        time.sleep(0.05)
        return super().get(class_key, work_date, slot)


def test_concurrent_check_ins_are_all_recorded(members_repo, clock):
    sessions = SlowSessions()
    members = MemberService(members_repo, sessions, clock=clock)
    attendance = AttendanceService(sessions, members_repo, clock=clock)
    service = SelfCheckInService(members, attendance)
    ids = [members.add_member(CLASS_ID, name).member_id for name in ("김민준", "이서연", "박지훈", "최유나")]

    with ThreadPoolExecutor(max_workers=len(ids)) as pool:
        results = list(pool.map(lambda member_id: service.check_in(CLASS_ID, "오전", member_id, TODAY), ids))

    assert all(r.action == CheckInAction.CHECKED_IN for r in results)
    assert sorted(attendance.get_session(CLASS_ID, TODAY, "오전").present_ids) == sorted(ids)


def test_concurrent_duplicate_check_in_reports_already_checked_in(members_repo, clock):
    sessions = SlowSessions()
    members = MemberService(members_repo, sessions, clock=clock)
    attendance = AttendanceService(sessions, members_repo, clock=clock)
    service = SelfCheckInService(members, attendance)
    m = members.add_member(CLASS_ID, "김민준")

    def attempt(_):
        try:
            return service.check_in(CLASS_ID, "오후", m.member_id, TODAY).action
        except AlreadyCheckedInError:
            return None

    with ThreadPoolExecutor(max_workers=3) as pool:
        outcomes = list(pool.map(attempt, range(3)))

    assert outcomes.count(CheckInAction.CHECKED_IN) == 1
    assert outcomes.count(None) == 2
    assert attendance.get_session(CLASS_ID, TODAY, "오후").present_ids == (m.member_id,)
