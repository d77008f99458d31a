from __future__ import annotations

from datetime import date

import pytest

from src.attendance_book.attendance_book.common.class_ids import safe_class_id
from src.attendance_book.attendance_book.core.exceptions import ConflictError, NotFoundError, ValidationError
from src.attendance_book.attendance_book.members.service import new_member_id

CLASS_ID = "수요반 A"


def test_add_member_trims_and_sets_defaults(member_service, members_repo, fixed_now):
    member = member_service.add_member(CLASS_ID, "  김민준 ")

    assert member.name == "김민준"
    assert member.group == "정회원"
    assert member.created_at == fixed_now
    assert members_repo.get_by_id(safe_class_id(CLASS_ID), member.member_id) == member


@pytest.mark.parametrize("name", ["", "   ", "가" * 11])
def test_add_member_rejects_blank_or_long_names(member_service, name):
    with pytest.raises(ValidationError):
        member_service.add_member(CLASS_ID, name)


def test_member_id_format(fixed_now):
    member_id = new_member_id(fixed_now)
    prefix, millis, suffix = member_id.split("_")

    assert prefix == "m"
    assert int(millis) == int(fixed_now.timestamp() * 1000)
    assert len(suffix) == 5
    assert suffix.isalnum() and suffix == suffix.lower()


def test_list_members_sorted_by_name(member_service):
    for name in ["최유진", "김민준", "박지훈"]:
        member_service.add_member(CLASS_ID, name)

    assert [m.name for m in member_service.list_members(CLASS_ID)] == ["김민준", "박지훈", "최유진"]


def test_rosters_are_scoped_per_class(member_service):
    member_service.add_member(CLASS_ID, "김민준")
    member_service.add_member("토요반", "이서연")

    assert [m.name for m in member_service.list_members(CLASS_ID)] == ["김민준"]
    assert [m.name for m in member_service.list_members("토요반")] == ["이서연"]


def test_delete_member_without_records(member_service):
    member = member_service.add_member(CLASS_ID, "김민준")

    deleted = member_service.delete_member(CLASS_ID, member.member_id)

    assert deleted.member_id == member.member_id
    assert member_service.list_members(CLASS_ID) == []


def test_delete_member_with_attendance_is_refused(member_service, attendance_service):
    member = member_service.add_member(CLASS_ID, "김민준")
    attendance_service.set_attendance(CLASS_ID, date(2026, 3, 2), "오전", [member.member_id])

    with pytest.raises(ConflictError) as exc:
        member_service.delete_member(CLASS_ID, member.member_id)

    assert "'김민준' 회원은 출석 기록이 존재하여 삭제할 수 없습니다." in str(exc.value)
    assert len(member_service.list_members(CLASS_ID)) == 1


def test_delete_unknown_member(member_service):
    with pytest.raises(NotFoundError):
        member_service.delete_member(CLASS_ID, "m_missing")


def test_find_by_name(member_service):
    member = member_service.add_member(CLASS_ID, "이서연")

    assert member_service.find_by_name(CLASS_ID, " 이서연 ") == member
    assert member_service.find_by_name(CLASS_ID, "없는이름") is None
