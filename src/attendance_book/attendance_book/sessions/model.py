from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional, Tuple


def make_session_id(work_date: date, slot: str) -> str:
    return f"{work_date.isoformat()}_{slot}"


@dataclass(frozen=True)
class AttendanceSession:
    """도메인 엔티티: 특정 날짜/차수의 출석 기록.

    present_ids 는 출석한 회원 id 목록 (중복 없음, 기록된 순서 유지).
    """

    work_date: date
    slot: str
    present_ids: Tuple[str, ...] = field(default_factory=tuple)
    updated_at: Optional[datetime] = None

    @property
    def session_id(self) -> str:
        return make_session_id(self.work_date, self.slot)

    @property
    def present_count(self) -> int:
        return len(self.present_ids)

    def is_present(self, member_id: str) -> bool:
        return member_id in self.present_ids

    def to_dict(self) -> dict:
        return {
            "id": self.session_id,
            "date": self.work_date.isoformat(),
            "slot": self.slot,
            "present_ids": list(self.present_ids),
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }
