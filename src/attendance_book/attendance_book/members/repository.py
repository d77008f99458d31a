from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Member


class MemberRepository(Protocol):
    """회원 명부 repository 인터페이스.

    참고 (DIP): 서비스 계층은 이 인터페이스에만 의존하고 특정 DB에는 의존하지 않는다.
    모든 메서드는 safe_class_id()로 정규화된 class_key를 받는다.
    """

    def list_all(self, class_key: str) -> Sequence[Member]:
        raise NotImplementedError

    def get_by_id(self, class_key: str, member_id: str) -> Optional[Member]:
        raise NotImplementedError

    def get_by_name(self, class_key: str, name: str) -> Optional[Member]:
        raise NotImplementedError

    def create(self, class_key: str, member: Member) -> None:
        raise NotImplementedError

    def delete_by_id(self, class_key: str, member_id: str) -> bool:
        raise NotImplementedError
