from __future__ import annotations

from datetime import date

import pytest

from src.attendance_book.attendance_book.core.enums import ReportView
from src.attendance_book.attendance_book.reports.service import ReportService, attendance_rate

CLASS_ID = "수요반 A"


@pytest.fixture
def report_service(member_service, attendance_service):
    return ReportService(member_service, attendance_service)


@pytest.fixture
def roster(member_service):
    return {name: member_service.add_member(CLASS_ID, name) for name in ["김민준", "이서연", "박지훈"]}


def test_attendance_rate_rounds_half_up():
    assert attendance_rate(1, 8) == 13  # 12.5
    assert attendance_rate(1, 3) == 33
    assert attendance_rate(2, 3) == 67
    assert attendance_rate(0, 0) == 0
    assert attendance_rate(23, 40) == 58  # exactly 57.5


def test_individual_stats_counts_slots_and_rate(report_service, attendance_service, roster):
    kim, lee = roster["김민준"].member_id, roster["이서연"].member_id
    attendance_service.set_attendance(CLASS_ID, date(2026, 3, 2), "오전", [kim, lee])
    attendance_service.set_attendance(CLASS_ID, date(2026, 3, 2), "저녁", [kim])
    attendance_service.set_attendance(CLASS_ID, date(2026, 3, 9), "오전", [kim])
    attendance_service.set_attendance(CLASS_ID, date(2026, 3, 9), "오후", [])
    # Other month: ignored.
    attendance_service.set_attendance(CLASS_ID, date(2026, 4, 1), "오전", [lee])

    report = report_service.individual_stats(CLASS_ID, "2026-03")

    assert report.session_count == 4
    assert [r["name"] for r in report.rows] == ["김민준", "이서연", "박지훈"]
    top = report.rows[0]
    assert top["slot_counts"] == {"오전": 2, "오후": 0, "저녁": 1}
    assert top["total"] == 3
    assert top["rate"] == 75
    assert report.rows[1]["rate"] == 25
    assert report.rows[2]["total"] == 0


def test_individual_stats_ties_keep_name_order(report_service, attendance_service, roster):
    ids = [m.member_id for m in roster.values()]
    attendance_service.set_attendance(CLASS_ID, date(2026, 3, 2), "오전", ids)

    report = report_service.individual_stats(CLASS_ID, "2026-03")

    assert [r["name"] for r in report.rows] == ["김민준", "박지훈", "이서연"]
    assert all(r["rate"] == 100 for r in report.rows)


def test_individual_stats_without_sessions_has_zero_rates(report_service, roster):
    report = report_service.individual_stats(CLASS_ID, "2026-03")

    assert report.session_count == 0
    assert {r["rate"] for r in report.rows} == {0}


def test_individual_stats_without_members_is_empty(report_service, attendance_service):
    attendance_service.set_attendance(CLASS_ID, date(2026, 3, 2), "오전", ["ghost"])

    assert report_service.individual_stats(CLASS_ID, "2026-03").rows == []


def test_daily_stats_per_slot_and_total(report_service, attendance_service):
    attendance_service.set_attendance(CLASS_ID, date(2026, 3, 2), "오전", ["a", "b"])
    attendance_service.set_attendance(CLASS_ID, date(2026, 3, 2), "저녁", ["a"])
    attendance_service.set_attendance(CLASS_ID, date(2026, 3, 9), "오후", ["c"])
    attendance_service.set_attendance(CLASS_ID, date(2026, 2, 27), "오후", ["c"])

    report = report_service.daily_stats(CLASS_ID, "2026-03")

    assert report.view == ReportView.DAILY
    assert report.rows == [
        {"date": "2026-03-09", "오전": 0, "오후": 1, "저녁": 0, "합계": 1},
        {"date": "2026-03-02", "오전": 2, "오후": 0, "저녁": 1, "합계": 3},
    ]


def test_build_dispatches_on_view(report_service):
    assert report_service.build(CLASS_ID, "2026-03", ReportView.DAILY).view == ReportView.DAILY
    assert report_service.build(CLASS_ID, "2026-03", ReportView.INDIVIDUAL).view == ReportView.INDIVIDUAL
