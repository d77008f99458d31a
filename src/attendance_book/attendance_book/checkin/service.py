from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date

from ..common.validators import require_min_length, require_slot
from ..core.constants import MIN_SELF_REGISTER_NAME_LENGTH
from ..core.enums import CheckInAction
from ..core.exceptions import AlreadyCheckedInError, ValidationError
from ..members.model import Member
from ..members.service import MemberService
from ..sessions.service import AttendanceService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CheckInResult:
    member: Member
    action: CheckInAction
    message: str
    present_count: int

    def to_dict(self) -> dict:
        return {
            "member": self.member.to_dict(),
            "action": self.action.value,
            "message": self.message,
            "present_count": self.present_count,
        }


class SelfCheckInService:
    """Use case: a member opens a QR link and marks themself present.

    The QR link carries a weekday and slot, but the check-in is always
    recorded against today's date with the link's slot.
    """

    def __init__(self, members: MemberService, attendance: AttendanceService):
        self._members = members
        self._attendance = attendance

    def roster_status(self, class_id: str, slot: str, today: date) -> list[dict]:
        session = self._attendance.get_session(class_id, today, slot)
        return [
            {**m.to_dict(), "checked_in": session.is_present(m.member_id)}
            for m in self._members.list_members(class_id)
        ]

    def check_in(
        self,
        class_id: str,
        slot: str,
        member_id: str,
        today: date,
        *,
        cancel: bool = False,
    ) -> CheckInResult:
        require_slot(slot)
        member = self._members.get_member(class_id, member_id)

        session, added = self._attendance.mark_present(class_id, today, slot, member_id)
        if added:
            logger.info("class=%s %s self check-in by %s", class_id, session.session_id, member_id)
            return CheckInResult(
                member, CheckInAction.CHECKED_IN, f"{member.name}님 출석 확인 완료!", session.present_count
            )

        if not cancel:
            raise AlreadyCheckedInError("이미 출석되었습니다. 출석을 취소하시겠습니까?")
        session = self._attendance.remove_present(class_id, today, slot, member_id)
        logger.info("class=%s %s cancelled by %s", class_id, session.session_id, member_id)
        return CheckInResult(member, CheckInAction.CANCELLED, "출석이 취소되었습니다.", session.present_count)

    def register_and_check_in(self, class_id: str, slot: str, name: str, today: date) -> CheckInResult:
        """New face not on the roster: register the name, then mark present."""

        require_slot(slot)
        name = (name or "").strip()
        try:
            require_min_length(name, "성함", MIN_SELF_REGISTER_NAME_LENGTH)
        except ValidationError:
            raise ValidationError("정확한 성함을 입력해주세요.")

        member = self._members.add_member(class_id, name)
        session = self._attendance.add_present(class_id, today, slot, [member.member_id])
        return CheckInResult(member, CheckInAction.CHECKED_IN, f"{name}님 출석 확인되었습니다.", session.present_count)
