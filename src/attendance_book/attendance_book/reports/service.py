from __future__ import annotations

import math
from dataclasses import dataclass

from ..core.constants import TIME_SLOTS
from ..core.enums import ReportView
from ..members.service import MemberService
from ..sessions.service import AttendanceService

TOTAL_KEY = "합계"


def attendance_rate(attended: int, held: int) -> int:
    """Percentage rounded half up; 0 when no session was held."""
    if held <= 0:
        return 0
    return int(math.floor(attended * 100 / held + 0.5))


@dataclass(frozen=True)
class MonthlyReport:
    month: str
    view: ReportView
    session_count: int
    rows: list[dict]


class ReportService:
    """Monthly statistics computed by scanning the month's sessions in memory."""

    def __init__(self, members: MemberService, attendance: AttendanceService):
        self._members = members
        self._attendance = attendance

    def individual_stats(self, class_id: str, month: str) -> MonthlyReport:
        sessions = self._attendance.list_month(class_id, month)
        members = self._members.list_members(class_id)
        held = len(sessions)

        rows: list[dict] = []
        for m in members:
            attended = [s for s in sessions if s.is_present(m.member_id)]
            slot_counts = {slot: sum(1 for s in attended if s.slot == slot) for slot in TIME_SLOTS}
            rows.append(
                {
                    **m.to_dict(),
                    "slot_counts": slot_counts,
                    "total": len(attended),
                    "rate": attendance_rate(len(attended), held),
                }
            )

        # Stable: members with equal totals keep name order.
        rows.sort(key=lambda r: r["total"], reverse=True)
        return MonthlyReport(month=month, view=ReportView.INDIVIDUAL, session_count=held, rows=rows)

    def daily_stats(self, class_id: str, month: str) -> MonthlyReport:
        sessions = self._attendance.list_month(class_id, month)

        table: dict[str, dict] = {}
        for s in sessions:
            key = s.work_date.isoformat()
            day = table.get(key)
            if not day:
                day = {slot: 0 for slot in TIME_SLOTS}
                day[TOTAL_KEY] = 0
                table[key] = day
            day[s.slot] = s.present_count
            day[TOTAL_KEY] += s.present_count

        rows = [{"date": d, **counts} for d, counts in table.items()]
        rows.sort(key=lambda r: r["date"], reverse=True)
        return MonthlyReport(month=month, view=ReportView.DAILY, session_count=len(sessions), rows=rows)

    def build(self, class_id: str, month: str, view: ReportView) -> MonthlyReport:
        if view == ReportView.DAILY:
            return self.daily_stats(class_id, month)
        return self.individual_stats(class_id, month)
