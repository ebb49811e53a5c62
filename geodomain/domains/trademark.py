"""
Naive trademark screener: substring containment against a static brand list.

Not a trademark search. A match only means the keyword and a well-known brand
overlap as strings, in either direction.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable

from geodomain.domains.models import DomainCandidate

DEFAULT_BRANDS: tuple[str, ...] = (
    "google", "facebook", "microsoft", "apple", "amazon", "netflix", "uber",
    "airbnb", "spotify", "twitter", "instagram", "linkedin", "youtube",
    "walmart", "target", "starbucks", "mcdonalds", "nike", "adidas",
    "coca-cola", "pepsi", "ford", "toyota", "bmw", "mercedes",
)


class TrademarkScreener:
    def __init__(self, brands: Iterable[str] | None = None) -> None:
        source = DEFAULT_BRANDS if brands is None else brands
        self._brands = [b.strip().lower() for b in source if b and b.strip()]

    def is_conflict(self, keyword: str) -> bool:
        kw = (keyword or "").strip().lower()
        if not kw:
            return False
        return any(brand in kw or kw in brand for brand in self._brands)

    def screen(self, candidates: Iterable[DomainCandidate]) -> list[DomainCandidate]:
        """Return candidates with `trademark` set from their keyword."""
        verdicts: dict[str, bool] = {}
        out = []
        for c in candidates:
            if c.keyword not in verdicts:
                verdicts[c.keyword] = self.is_conflict(c.keyword)
            out.append(replace(c, trademark=verdicts[c.keyword]))
        return out
