from __future__ import annotations

from datetime import date, datetime
from typing import Callable, Optional, Protocol, Sequence

from .model import AttendanceSession

PresentChange = Callable[[tuple[str, ...]], tuple[str, ...]]


class SessionRepository(Protocol):
    def get(self, class_key: str, work_date: date, slot: str) -> Optional[AttendanceSession]:
        raise NotImplementedError

    def list_all(self, class_key: str) -> Sequence[AttendanceSession]:
        raise NotImplementedError

    def list_between(self, class_key: str, *, start_date: date, end_date: date) -> Sequence[AttendanceSession]:
        """Sessions with start_date <= work_date <= end_date."""

        raise NotImplementedError

    def save(self, class_key: str, session: AttendanceSession) -> None:
        """Insert or fully replace the session row (keyed by date + slot)."""

        raise NotImplementedError

    def update_present(
        self,
        class_key: str,
        work_date: date,
        slot: str,
        change: PresentChange,
        *,
        updated_at: datetime,
    ) -> tuple[AttendanceSession, AttendanceSession]:
        """Read, change and write the present list as one locked step.

        Returns (before, after). A missing row is only created when the change
        produces a non-empty list.
        """

        raise NotImplementedError

    def any_contains_member(self, class_key: str, member_id: str) -> bool:
        raise NotImplementedError
