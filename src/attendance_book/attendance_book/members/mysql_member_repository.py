from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Member
from .repository import MemberRepository

_COLUMNS = "member_id, name, member_group, created_at"


def _to_member(r: dict) -> Member:
    return Member(
        member_id=str(r["member_id"]),
        name=str(r["name"]),
        group=str(r["member_group"]),
        created_at=r["created_at"],
    )


class MySQLMemberRepository(MemberRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self, class_key: str) -> Sequence[Member]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM members WHERE class_key=%s ORDER BY name, created_at",
                (class_key,),
            )
            return [_to_member(r) for r in fetchall(cur)]

    def get_by_id(self, class_key: str, member_id: str) -> Optional[Member]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM members WHERE class_key=%s AND member_id=%s",
                (class_key, member_id),
            )
            r = fetchone(cur)
            return _to_member(r) if r else None

    def get_by_name(self, class_key: str, name: str) -> Optional[Member]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM members WHERE class_key=%s AND name=%s ORDER BY created_at LIMIT 1",
                (class_key, name),
            )
            r = fetchone(cur)
            return _to_member(r) if r else None

    def create(self, class_key: str, member: Member) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO members(class_key, member_id, name, member_group, created_at)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (class_key, member.member_id, member.name, member.group, member.created_at),
            )

    def delete_by_id(self, class_key: str, member_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM members WHERE class_key=%s AND member_id=%s", (class_key, member_id))
            return cur.rowcount > 0
