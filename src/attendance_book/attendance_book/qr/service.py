from __future__ import annotations

import io
from dataclasses import dataclass

import qrcode

from ..common.validators import require_non_empty, require_slot
from ..core.constants import DAYS_KR, DEFAULT_QR_SIZE, TIME_SLOTS
from ..core.exceptions import ValidationError
from .links import build_checkin_link, qr_image_url


@dataclass(frozen=True)
class QRTemplate:
    day: str
    slot: str
    link: str
    qr_url: str

    def to_dict(self) -> dict:
        return {"day": self.day, "slot": self.slot, "link": self.link, "qr_url": self.qr_url}


def week_days() -> list[str]:
    """Monday first, Sunday last."""
    return [*DAYS_KR[1:], DAYS_KR[0]]


class QRService:
    """Use case: build per-day/per-slot self check-in links and QR images."""

    def __init__(self, *, default_base_url: str = "", size: int = DEFAULT_QR_SIZE):
        self._default_base_url = (default_base_url or "").strip()
        self._size = int(size)

    def resolve_base_url(self, custom_base_url: str | None, fallback_url: str) -> str:
        """Custom URL first, then the configured one, then the app's own URL."""
        for candidate in (custom_base_url, self._default_base_url, fallback_url):
            if candidate and candidate.strip():
                return candidate.strip()
        return ""

    def build_template(self, class_id: str, day: str, slot: str, *, base_url: str) -> QRTemplate:
        class_id = require_non_empty(class_id, "클래스 코드")
        require_slot(slot)
        if day not in DAYS_KR:
            raise ValidationError(f"알 수 없는 요일입니다: {day!r}")

        link = build_checkin_link(base_url, class_id, day, slot)
        return QRTemplate(day=day, slot=slot, link=link, qr_url=qr_image_url(link, size=self._size))

    def weekly_templates(self, class_id: str, *, base_url: str) -> list[QRTemplate]:
        return [
            self.build_template(class_id, day, slot, base_url=base_url)
            for day in week_days()
            for slot in TIME_SLOTS
        ]

    def render_png(self, link: str) -> bytes:
        img = qrcode.make(link, box_size=max(1, self._size // 33), border=2)
        buf = io.BytesIO()
        img.save(buf)
        return buf.getvalue()
