from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..core.constants import DEFAULT_MEMBER_GROUP


@dataclass(frozen=True)
class Member:
    """도메인 엔티티: 명부의 회원 한 명.

    참고: 순수 데이터 객체 (DB 접근 코드 없음).
    """

    member_id: str
    name: str
    created_at: datetime
    group: str = DEFAULT_MEMBER_GROUP

    def to_dict(self) -> dict:
        return {
            "id": self.member_id,
            "name": self.name,
            "group": self.group,
            "created_at": self.created_at.isoformat(),
        }
