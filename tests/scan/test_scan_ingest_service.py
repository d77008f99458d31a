from __future__ import annotations

from datetime import date

import pytest

from src.attendance_book.attendance_book.core.exceptions import ValidationError
from src.attendance_book.attendance_book.scan.service import ScanIngestService

CLASS_ID = "수요반 A"
DAY = date(2026, 3, 11)


@pytest.fixture
def scan_service(member_service, attendance_service):
    return ScanIngestService(member_service, attendance_service)


def test_ingest_creates_unknown_names_and_marks_everyone(scan_service, member_service):
    existing = member_service.add_member(CLASS_ID, "김민준")

    result = scan_service.ingest(CLASS_ID, DAY, "오전", "오전 출석 명단\n김민준 이서연")

    assert [m.name for m in result.created] == ["이서연"]
    assert existing.member_id in result.matched_ids
    assert set(result.present_ids) == {existing.member_id, result.created[0].member_id}
    assert sorted(m.name for m in member_service.list_members(CLASS_ID)) == ["김민준", "이서연"]


def test_ingest_matches_names_split_by_whitespace(scan_service, member_service):
    member = member_service.add_member(CLASS_ID, "남궁민수")

    result = scan_service.ingest(CLASS_ID, DAY, "오후", "남 궁민수")

    # "궁민수" is extracted as a new name; the roster name still matches once spaces are removed.
    assert [m.name for m in result.created] == ["궁민수"]
    assert member.member_id in result.present_ids
    assert len(result.present_ids) == 2


def test_ingest_merges_with_existing_attendance(scan_service, member_service, attendance_service):
    a = member_service.add_member(CLASS_ID, "김민준")
    b = member_service.add_member(CLASS_ID, "이서연")
    attendance_service.set_attendance(CLASS_ID, DAY, "저녁", [b.member_id])

    result = scan_service.ingest(CLASS_ID, DAY, "저녁", "김민준 이서연")

    assert result.created == []
    assert result.present_ids == [b.member_id, a.member_id]


def test_ingest_does_not_duplicate_members_on_rescan(scan_service, member_service):
    scan_service.ingest(CLASS_ID, DAY, "오전", "박지훈")
    scan_service.ingest(CLASS_ID, DAY, "오전", "박지훈")

    assert [m.name for m in member_service.list_members(CLASS_ID)] == ["박지훈"]


@pytest.mark.parametrize("text", ["", "   \n"])
def test_ingest_requires_text(scan_service, text):
    with pytest.raises(ValidationError):
        scan_service.ingest(CLASS_ID, DAY, "오전", text)


def test_ingest_rejects_unknown_slot_before_creating_members(scan_service, member_service):
    with pytest.raises(ValidationError):
        scan_service.ingest(CLASS_ID, DAY, "점심", "박지훈")

    assert member_service.list_members(CLASS_ID) == []
