from __future__ import annotations

import logging
import secrets
import string
from datetime import datetime
from typing import Callable, Optional

from ..common.class_ids import safe_class_id
from ..common.datetime_utils import now_local
from ..common.validators import require_max_length, require_non_empty
from ..core.constants import DEFAULT_MEMBER_GROUP, MAX_MEMBER_NAME_LENGTH
from ..core.exceptions import ConflictError, NotFoundError
from ..sessions.repository import SessionRepository
from .model import Member
from .repository import MemberRepository

logger = logging.getLogger(__name__)

_BASE36 = string.digits + string.ascii_lowercase


def new_member_id(now: datetime) -> str:
    """m_<epoch millis>_<5 random base36 chars>"""
    suffix = "".join(secrets.choice(_BASE36) for _ in range(5))
    return f"m_{int(now.timestamp() * 1000)}_{suffix}"


class MemberService:
    """Use case: manage the roster of a class."""

    def __init__(
        self,
        members: MemberRepository,
        sessions: SessionRepository,
        *,
        clock: Callable[[], datetime] = now_local,
        id_factory: Callable[[datetime], str] = new_member_id,
    ):
        self._members = members
        self._sessions = sessions
        self._clock = clock
        self._id_factory = id_factory

    def list_members(self, class_id: str) -> list[Member]:
        members = self._members.list_all(safe_class_id(class_id))
        return sorted(members, key=lambda m: m.name)

    def get_member(self, class_id: str, member_id: str) -> Member:
        member = self._members.get_by_id(safe_class_id(class_id), member_id)
        if not member:
            raise NotFoundError("회원을 찾을 수 없습니다")
        return member

    def find_by_name(self, class_id: str, name: str) -> Optional[Member]:
        return self._members.get_by_name(safe_class_id(class_id), name.strip())

    def add_member(self, class_id: str, name: str) -> Member:
        name = require_non_empty(name, "이름")
        require_max_length(name, "이름", MAX_MEMBER_NAME_LENGTH)

        now = self._clock()
        member = Member(
            member_id=self._id_factory(now),
            name=name,
            group=DEFAULT_MEMBER_GROUP,
            created_at=now,
        )
        self._members.create(safe_class_id(class_id), member)
        logger.info("class=%s added member %s (%s)", class_id, member.member_id, member.name)
        return member

    def delete_member(self, class_id: str, member_id: str) -> Member:
        class_key = safe_class_id(class_id)
        member = self.get_member(class_id, member_id)

        if self._sessions.any_contains_member(class_key, member_id):
            raise ConflictError(f"'{member.name}' 회원은 출석 기록이 존재하여 삭제할 수 없습니다.")

        if not self._members.delete_by_id(class_key, member_id):
            raise NotFoundError("회원을 찾을 수 없습니다")

        logger.info("class=%s deleted member %s (%s)", class_id, member.member_id, member.name)
        return member
