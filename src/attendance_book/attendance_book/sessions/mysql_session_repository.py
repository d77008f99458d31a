from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, decode_id_list, encode_id_list, fetchall, fetchone, normalize_mysql_date
from .model import AttendanceSession, make_session_id
from .repository import PresentChange, SessionRepository

_COLUMNS = "work_date, slot, present_ids, updated_at"


def _to_session(r: dict) -> AttendanceSession:
    return AttendanceSession(
        work_date=normalize_mysql_date(r["work_date"]),
        slot=str(r["slot"]),
        present_ids=decode_id_list(r.get("present_ids")),
        updated_at=r.get("updated_at"),
    )


class MySQLSessionRepository(SessionRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get(self, class_key: str, work_date: date, slot: str) -> Optional[AttendanceSession]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM attendance_sessions WHERE class_key=%s AND session_id=%s",
                (class_key, make_session_id(work_date, slot)),
            )
            r = fetchone(cur)
            return _to_session(r) if r else None

    def list_all(self, class_key: str) -> Sequence[AttendanceSession]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM attendance_sessions WHERE class_key=%s ORDER BY work_date, slot",
                (class_key,),
            )
            return [_to_session(r) for r in fetchall(cur)]

    def list_between(self, class_key: str, *, start_date: date, end_date: date) -> Sequence[AttendanceSession]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance_sessions
                WHERE class_key=%s AND work_date BETWEEN %s AND %s
                ORDER BY work_date, slot
                """,
                (class_key, start_date, end_date),
            )
            return [_to_session(r) for r in fetchall(cur)]

    def save(self, class_key: str, session: AttendanceSession) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance_sessions(class_key, session_id, work_date, slot, present_ids, updated_at)
                VALUES(%s,%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE present_ids=VALUES(present_ids), updated_at=VALUES(updated_at)
                """,
                (
                    class_key,
                    session.session_id,
                    session.work_date,
                    session.slot,
                    encode_id_list(session.present_ids),
                    session.updated_at or datetime.now(),
                ),
            )

    def update_present(
        self,
        class_key: str,
        work_date: date,
        slot: str,
        change: PresentChange,
        *,
        updated_at: datetime,
    ) -> tuple[AttendanceSession, AttendanceSession]:
        session_id = make_session_id(work_date, slot)
        with db_cursor(self._conn_factory) as (_, cur):
            if change(()):
                # row must exist before FOR UPDATE so concurrent writers queue on it
                cur.execute(
                    """
                    INSERT INTO attendance_sessions(class_key, session_id, work_date, slot, present_ids, updated_at)
                    VALUES(%s,%s,%s,%s,%s,%s)
                    ON DUPLICATE KEY UPDATE session_id=session_id
                    """,
                    (class_key, session_id, work_date, slot, encode_id_list(()), updated_at),
                )

            cur.execute(
                f"SELECT {_COLUMNS} FROM attendance_sessions WHERE class_key=%s AND session_id=%s FOR UPDATE",
                (class_key, session_id),
            )
            r = fetchone(cur)
            if not r:
                empty = AttendanceSession(work_date=work_date, slot=slot)
                return empty, empty

            before = _to_session(r)
            after = AttendanceSession(
                work_date=before.work_date,
                slot=before.slot,
                present_ids=tuple(change(before.present_ids)),
                updated_at=updated_at,
            )
            cur.execute(
                "UPDATE attendance_sessions SET present_ids=%s, updated_at=%s WHERE class_key=%s AND session_id=%s",
                (encode_id_list(after.present_ids), updated_at, class_key, session_id),
            )
            return before, after

    def any_contains_member(self, class_key: str, member_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT 1 AS found
                FROM attendance_sessions
                WHERE class_key=%s AND JSON_CONTAINS(present_ids, JSON_QUOTE(%s))
                LIMIT 1
                """,
                (class_key, member_id),
            )
            return fetchone(cur) is not None
