from __future__ import annotations

import calendar
import logging
from datetime import date, datetime
from typing import Callable, Iterable, Sequence

from ..common.class_ids import safe_class_id
from ..common.datetime_utils import now_local, parse_month
from ..common.validators import require_slot
from ..core.exceptions import NotFoundError, ValidationError
from ..members.repository import MemberRepository
from .model import AttendanceSession
from .repository import PresentChange, SessionRepository

logger = logging.getLogger(__name__)


def _dedupe(ids: Iterable[str]) -> tuple[str, ...]:
    return tuple(dict.fromkeys(str(i) for i in ids))


def month_bounds(month: str) -> tuple[date, date]:
    year, mon = (int(p) for p in parse_month(month).split("-"))
    return date(year, mon, 1), date(year, mon, calendar.monthrange(year, mon)[1])


class AttendanceService:
    """Use case: record who is present in a (date, slot) session of a class."""

    def __init__(
        self,
        sessions: SessionRepository,
        members: MemberRepository,
        *,
        clock: Callable[[], datetime] = now_local,
    ):
        self._sessions = sessions
        self._members = members
        self._clock = clock

    def get_session(self, class_id: str, work_date: date, slot: str) -> AttendanceSession:
        require_slot(slot)
        existing = self._sessions.get(safe_class_id(class_id), work_date, slot)
        return existing or AttendanceSession(work_date=work_date, slot=slot)

    def set_attendance(
        self,
        class_id: str,
        work_date: date,
        slot: str,
        present_ids: Iterable[str],
    ) -> AttendanceSession:
        """Overwrite the present list of a session."""

        require_slot(slot)
        session = AttendanceSession(
            work_date=work_date,
            slot=slot,
            present_ids=_dedupe(present_ids),
            updated_at=self._clock(),
        )
        self._sessions.save(safe_class_id(class_id), session)
        logger.info("class=%s session=%s present=%d", class_id, session.session_id, session.present_count)
        return session

    def _update_present(
        self,
        class_id: str,
        work_date: date,
        slot: str,
        change: PresentChange,
    ) -> tuple[AttendanceSession, AttendanceSession]:
        require_slot(slot)
        before, after = self._sessions.update_present(
            safe_class_id(class_id),
            work_date,
            slot,
            change,
            updated_at=self._clock(),
        )
        if before.present_ids != after.present_ids:
            logger.info("class=%s session=%s present=%d", class_id, after.session_id, after.present_count)
        return before, after

    def add_present(self, class_id: str, work_date: date, slot: str, member_ids: Iterable[str]) -> AttendanceSession:
        added = _dedupe(member_ids)
        return self._update_present(class_id, work_date, slot, lambda current: _dedupe([*current, *added]))[1]

    def remove_present(self, class_id: str, work_date: date, slot: str, member_id: str) -> AttendanceSession:
        return self._update_present(
            class_id, work_date, slot, lambda current: tuple(i for i in current if i != member_id)
        )[1]

    def mark_present(self, class_id: str, work_date: date, slot: str, member_id: str) -> tuple[AttendanceSession, bool]:
        """Add one member; the flag is False when they were already present."""

        before, after = self._update_present(
            class_id, work_date, slot, lambda current: _dedupe([*current, member_id])
        )
        return after, not before.is_present(member_id)

    def toggle_member(self, class_id: str, work_date: date, slot: str, member_id: str) -> AttendanceSession:
        if not self._members.get_by_id(safe_class_id(class_id), member_id):
            raise NotFoundError("회원을 찾을 수 없습니다")

        def flip(current: tuple[str, ...]) -> tuple[str, ...]:
            if member_id in current:
                return tuple(i for i in current if i != member_id)
            return (*current, member_id)

        return self._update_present(class_id, work_date, slot, flip)[1]

    def reset_session(self, class_id: str, work_date: date, slot: str) -> int:
        """Clear a session; returns how many present marks were removed."""

        before, _ = self._update_present(class_id, work_date, slot, lambda current: ())
        if before.present_count == 0:
            raise ValidationError("지울 데이터가 없습니다.")
        return before.present_count

    def list_sessions(self, class_id: str) -> Sequence[AttendanceSession]:
        return self._sessions.list_all(safe_class_id(class_id))

    def list_month(self, class_id: str, month: str) -> Sequence[AttendanceSession]:
        start, end = month_bounds(month)
        return self._sessions.list_between(safe_class_id(class_id), start_date=start, end_date=end)

    def member_has_records(self, class_id: str, member_id: str) -> bool:
        return self._sessions.any_contains_member(safe_class_id(class_id), member_id)
