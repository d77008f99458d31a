from __future__ import annotations

import re

_UNSAFE_RE = re.compile(r"[^a-zA-Z0-9가-힣]")


def safe_class_id(class_id: str) -> str:
    """Storage key for a class: anything outside [a-zA-Z0-9가-힣] becomes '_'."""
    return _UNSAFE_RE.sub("_", class_id)
