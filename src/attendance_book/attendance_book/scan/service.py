from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date

from ..common.validators import require_slot
from ..core.exceptions import ValidationError
from ..members.model import Member
from ..members.service import MemberService
from ..sessions.service import AttendanceService
from .extractor import extract_name_tokens, normalize_text

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IngestResult:
    created: list[Member]
    matched_ids: list[str]
    present_ids: list[str]

    def to_dict(self) -> dict:
        return {
            "created": [m.to_dict() for m in self.created],
            "matched_ids": list(self.matched_ids),
            "present_ids": list(self.present_ids),
            "present_count": len(self.present_ids),
        }


class ScanIngestService:
    """Use case: turn pasted text of a scanned paper sheet into attendance."""

    def __init__(self, members: MemberService, attendance: AttendanceService):
        self._members = members
        self._attendance = attendance

    def ingest(self, class_id: str, work_date: date, slot: str, text: str) -> IngestResult:
        require_slot(slot)
        if not text or not text.strip():
            raise ValidationError("스캔한 명단 텍스트를 입력해주세요")

        roster = self._members.list_members(class_id)
        known = {m.name for m in roster}

        created: list[Member] = []
        for name in extract_name_tokens(text):
            if name in known:
                continue
            member = self._members.add_member(class_id, name)
            created.append(member)
            known.add(name)

        normalized = normalize_text(text)
        matched_ids = [m.member_id for m in [*roster, *created] if m.name in normalized]

        session = self._attendance.add_present(class_id, work_date, slot, matched_ids)
        logger.info(
            "class=%s scan ingest %s: created=%d matched=%d present=%d",
            class_id,
            session.session_id,
            len(created),
            len(matched_ids),
            session.present_count,
        )
        return IngestResult(created=created, matched_ids=matched_ids, present_ids=list(session.present_ids))
