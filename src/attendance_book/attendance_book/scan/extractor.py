from __future__ import annotations

import re

from ..core.constants import EXCLUDED_WORDS, NAME_TOKEN_PATTERN

_NAME_TOKEN_RE = re.compile(NAME_TOKEN_PATTERN)
_WHITESPACE_RE = re.compile(r"\s+")


def extract_name_tokens(text: str) -> list[str]:
    """Unique Hangul name candidates in order of first appearance.

    Runs longer than four syllables are split by the regex the same way
    a greedy scan would ("가나다라마" -> "가나다라"; the trailing single
    syllable is dropped).
    """

    found = _NAME_TOKEN_RE.findall(text or "")
    return [t for t in dict.fromkeys(found) if t not in EXCLUDED_WORDS]


def normalize_text(text: str) -> str:
    return _WHITESPACE_RE.sub("", text or "")
