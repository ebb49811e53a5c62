"""
Result presentation helpers that do not depend on Streamlit: sorting,
pagination, clipboard text, CSV export and form labels.
"""

from __future__ import annotations

import csv
import io
import math
from dataclasses import dataclass
from typing import Any, Iterable, Sequence

from geodomain.domains.generator.combinations import city_first
from geodomain.domains.models import DomainCandidate, PositionAnchor, SearchResult

DEFAULT_COLUMNS: tuple[str, ...] = ("Domain", "Keyword", "City", "State", "Population", "Available")
# Generator-only view has no availability verdicts
GENERATOR_COLUMNS: tuple[str, ...] = ("Domain", "Keyword", "City", "State", "Population")

POSITION_ORDER: tuple[str, ...] = ("end", "beginning")


def position_caption(anchor: PositionAnchor) -> str:
    return "City position" if PositionAnchor(anchor) is PositionAnchor.CITY else "Keyword position"


def position_labels(anchor: PositionAnchor) -> dict[str, str]:
    """Position choice -> label showing the unswapped word order it produces."""
    labels = {}
    for position in POSITION_ORDER:
        order = "CityKeyword" if city_first(position, False, anchor=anchor) else "KeywordCity"
        labels[position] = f"{position.capitalize()} ({order}.com)"
    return labels


def sort_by_population(candidates: Iterable[DomainCandidate]) -> list[DomainCandidate]:
    """Largest population first; equal populations keep their incoming order."""
    return sorted(candidates, key=lambda c: c.population or 0, reverse=True)


@dataclass(frozen=True)
class Page:
    items: list[Any]
    page: int
    page_size: int
    total_items: int

    @property
    def total_pages(self) -> int:
        return max(1, math.ceil(self.total_items / self.page_size)) if self.total_items else 1

    @property
    def start_index(self) -> int:
        """1-based index of the first item shown (0 when empty)."""
        return (self.page - 1) * self.page_size + 1 if self.total_items else 0

    @property
    def end_index(self) -> int:
        return min(self.page * self.page_size, self.total_items)

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages


def paginate(items: Sequence[Any], page: int, page_size: int) -> Page:
    """Slice one page. page is 1-based and clamped into [1, total_pages]."""
    size = max(1, int(page_size))
    total = len(items)
    pages = max(1, math.ceil(total / size))
    current = min(max(1, int(page)), pages)
    start = (current - 1) * size
    return Page(items=list(items[start : start + size]), page=current, page_size=size, total_items=total)


def clipboard_text(candidates: Iterable[DomainCandidate]) -> str:
    return "\n".join(c.domain for c in candidates)


def _cell(candidate: DomainCandidate, column: str) -> str:
    if column == "Domain":
        return candidate.domain
    if column == "Keyword":
        return candidate.keyword or ""
    if column == "City":
        return candidate.city
    if column == "State":
        return candidate.state
    if column == "Population":
        return str(candidate.population) if candidate.population else ""
    if column == "Available":
        return "Yes" if candidate.available else "No"
    if column == "Trademark":
        return "Yes" if candidate.trademark else "No"
    raise ValueError(f"Unknown CSV column: {column}")


def to_csv(
    candidates: Iterable[DomainCandidate],
    columns: Sequence[str] = DEFAULT_COLUMNS,
    *,
    quote: bool = False,
) -> str:
    """
    CSV text with a header row and one row per candidate, lines joined by "\\n".

    quote=False joins raw values with commas, so a value containing a comma
    shifts the columns of its row (legacy export format). quote=True applies
    standard CSV quoting.
    """
    rows = [list(columns)] + [[_cell(c, col) for col in columns] for c in candidates]
    if not quote:
        return "\n".join(",".join(r) for r in rows)
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerows(rows)
    return buf.getvalue().rstrip("\n")


def summary(result: SearchResult) -> dict[str, int]:
    return {
        "keywords": result.keyword_count,
        "cities": result.city_count,
        "domains": result.domain_count,
        "available": result.available_count,
    }
