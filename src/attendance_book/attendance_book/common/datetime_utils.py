from __future__ import annotations

import re
from datetime import date, datetime

from ..core.exceptions import ValidationError

_MONTH_RE = re.compile(r"^\d{4}-(0[1-9]|1[0-2])$")


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except (TypeError, ValueError):
        raise ValidationError(f"날짜 형식이 올바르지 않습니다: {value!r}")


def parse_month(value: str) -> str:
    """Validate a YYYY-MM month key and return it unchanged."""
    if not value or not _MONTH_RE.match(value):
        raise ValidationError(f"월 형식이 올바르지 않습니다: {value!r}")
    return value


def month_of(value: date) -> str:
    return value.strftime("%Y-%m")


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()
