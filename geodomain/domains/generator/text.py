"""
Keyword and city text handling: normalization and keyword parsing.
"""

from __future__ import annotations

import re

from geodomain.domains.models import KeywordMode

_NON_ALNUM = re.compile(r"[^A-Za-z0-9]")
_KEYWORD_SPLIT = re.compile(r"[,\n]")


def clean_string(value: str) -> str:
    """Strip every character outside [A-Za-z0-9]. No length bound."""
    return _NON_ALNUM.sub("", value or "")


def parse_keywords(raw: str | list[str], mode: KeywordMode | str = KeywordMode.MULTI) -> list[str]:
    """
    Turn form input into an ordered keyword list.

    MULTI splits text on commas and newlines; SINGLE keeps the whole trimmed
    input as one literal keyword. Pieces are trimmed and empty ones dropped.
    Order and duplicates are preserved.

    A list input is treated as already split: its items are trimmed and
    filtered, and in SINGLE mode only the first non-empty item is kept.
    """
    mode = KeywordMode(mode)
    if isinstance(raw, str):
        if mode is KeywordMode.SINGLE:
            kw = raw.strip()
            return [kw] if kw else []
        pieces = _KEYWORD_SPLIT.split(raw)
    else:
        pieces = list(raw or [])

    keywords = [p.strip() for p in pieces if p and p.strip()]
    if mode is KeywordMode.SINGLE:
        return keywords[:1]
    return keywords
