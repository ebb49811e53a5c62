"""
Domain models: catalog reference data, generated candidates and search requests.

Catalog records are frozen; candidates are decorated with `dataclasses.replace`
rather than mutated, so a list handed to the UI never changes underneath it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class KeywordMode(str, Enum):
    """How raw keyword input is turned into keywords."""

    MULTI = "multi"  # split on comma / newline
    SINGLE = "single"  # whole input is one literal keyword


class PositionAnchor(str, Enum):
    """Which word the "beginning"/"end" position setting places."""

    CITY = "city"
    KEYWORD = "keyword"


class SwapPolicy(str, Enum):
    """How the swap toggle interacts with the position setting."""

    INVERT = "invert"  # swap flips the order for either position
    BEGINNING_ONLY = "beginning_only"  # swap only flips when position is "beginning"
    IGNORE = "ignore"  # swap has no effect


POSITION_BEGINNING = "beginning"
POSITION_END = "end"
_POSITION_ALIASES = {"beginning": POSITION_BEGINNING, "start": POSITION_BEGINNING, "end": POSITION_END}


def normalize_position(position: str) -> str:
    """Map "beginning"/"start"/"end" to the canonical position. Unknown values fall back to "end"."""
    return _POSITION_ALIASES.get((position or "").strip().lower(), POSITION_END)


@dataclass(frozen=True)
class City:
    name: str
    state: str
    population: int = 0


@dataclass(frozen=True)
class State:
    code: str
    name: str


@dataclass(frozen=True)
class Country:
    code: str
    name: str
    states: tuple[State, ...] = ()
    cities: tuple[City, ...] = ()


@dataclass(frozen=True)
class DomainCandidate:
    domain: str
    keyword: str
    city: str
    state: str
    population: int
    available: bool = False
    trademark: bool = False


@dataclass
class SearchRequest:
    """
    One search submitted from the form.

    `keywords` is either raw text (parsed according to the keyword mode) or an
    already split list. `extension` may be given with or without a leading dot.
    `min_length` / `max_length` are inclusive bounds on the full domain length.
    """

    keywords: str | list[str]
    country: str
    state: str | None = None
    city: str | None = None
    keyword_position: str = POSITION_END
    extension: str = ".com"
    swap_words: bool = False
    min_length: int | None = None
    max_length: int | None = None

    def has_keywords(self) -> bool:
        if isinstance(self.keywords, str):
            return bool(self.keywords.strip())
        return any((k or "").strip() for k in self.keywords)

    def is_valid(self) -> bool:
        """True when the form would enable the search action (keywords and country present)."""
        return self.has_keywords() and bool((self.country or "").strip())


@dataclass
class SearchResult:
    candidates: list[DomainCandidate] = field(default_factory=list)
    keyword_count: int = 0
    city_count: int = 0
    cancelled: bool = False
    error: str | None = None

    @property
    def domain_count(self) -> int:
        return len(self.candidates)

    @property
    def available_count(self) -> int:
        return sum(1 for c in self.candidates if c.available)
