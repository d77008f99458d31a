from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional
from urllib.parse import quote

from ..core.constants import DEFAULT_QR_SIZE, QR_SERVICE_URL
from ..core.enums import ViewMode

# Same unreserved set as JavaScript's encodeURIComponent.
_URI_COMPONENT_SAFE = "!~*'()"


def encode_component(value: str) -> str:
    return quote(str(value), safe=_URI_COMPONENT_SAFE)


@dataclass(frozen=True)
class QRSession:
    """Which class/day/slot a member link points at."""

    class_id: str
    day: str
    slot: str

    def to_dict(self) -> dict:
        return {"class_id": self.class_id, "day": self.day, "slot": self.slot}


def build_checkin_link(base_url: str, class_id: str, day: str, slot: str) -> str:
    base = (base_url or "").strip()
    if base.endswith("/"):
        base = base[:-1]
    return (
        f"{base}?mode={ViewMode.MEMBER.value}"
        f"&classId={encode_component(class_id)}"
        f"&day={encode_component(day)}"
        f"&slot={encode_component(slot)}"
    )


def qr_image_url(link: str, *, size: int = DEFAULT_QR_SIZE) -> str:
    return f"{QR_SERVICE_URL}?size={int(size)}x{int(size)}&data={encode_component(link)}"


def parse_member_link(args: Mapping[str, str]) -> Optional[QRSession]:
    if args.get("mode") != ViewMode.MEMBER.value:
        return None

    class_id = args.get("classId")
    day = args.get("day")
    slot = args.get("slot")
    if not (class_id and day and slot):
        return None
    return QRSession(class_id=class_id, day=day, slot=slot)
