from __future__ import annotations

from ..core.constants import TIME_SLOTS
from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name}을(를) 입력해주세요")
    return value.strip()


def require_max_length(value: str, field_name: str, max_len: int) -> str:
    if len(value) > max_len:
        raise ValidationError(f"{field_name}은(는) 최대 {max_len}자입니다")
    return value


def require_min_length(value: str, field_name: str, min_len: int) -> str:
    if value is None or len(value) < min_len:
        raise ValidationError(f"{field_name}은(는) 최소 {min_len}자입니다")
    return value


def require_slot(slot: str) -> str:
    if slot not in TIME_SLOTS:
        raise ValidationError(f"알 수 없는 차수입니다: {slot!r}")
    return slot
