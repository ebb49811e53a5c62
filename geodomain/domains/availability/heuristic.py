"""
Heuristic availability model. A simulation, not a check: no network is used.

Popular city + business-keyword combinations are always reported taken; every
other domain gets a weighted coin flip, with bigger cities less likely to be
free. With a seed, each domain draws from its own Random seeded by
"<seed>:<domain>", so verdicts are reproducible whatever order or thread the
checks run in.
"""

from __future__ import annotations

import random
from typing import Sequence

from geodomain.domains.availability.base import AvailabilityChecker
from geodomain.domains.models import DomainCandidate

MAJOR_CITY_TOKENS: tuple[str, ...] = (
    "newyork", "losangeles", "chicago", "houston", "phoenix", "philadelphia",
    "sanantonio", "sandiego", "dallas", "austin", "toronto", "vancouver",
    "montreal", "calgary",
)

COMMON_KEYWORD_TOKENS: tuple[str, ...] = (
    "lawyer", "attorney", "doctor", "dentist", "restaurant", "hotel", "realtor",
    "realestate", "insurance", "auto", "car", "pizza", "plumber", "electrician",
    "contractor", "business",
)

# (population strictly above, probability of being available), checked in order
DEFAULT_TIERS: tuple[tuple[int, float], ...] = (
    (1_000_000, 0.2),
    (500_000, 0.4),
    (100_000, 0.6),
)
DEFAULT_BASE_PROBABILITY = 0.8


def is_common_combination(
    domain: str,
    city_tokens: Sequence[str] = MAJOR_CITY_TOKENS,
    keyword_tokens: Sequence[str] = COMMON_KEYWORD_TOKENS,
) -> bool:
    d = (domain or "").lower()
    for city in city_tokens:
        for kw in keyword_tokens:
            if city + kw in d or kw + city in d:
                return True
    return False


class HeuristicChecker(AvailabilityChecker):
    name = "heuristic"

    def __init__(
        self,
        rng: random.Random | None = None,
        seed: int | None = None,
        tiers: Sequence[tuple[int, float]] = DEFAULT_TIERS,
        base_probability: float = DEFAULT_BASE_PROBABILITY,
        city_tokens: Sequence[str] = MAJOR_CITY_TOKENS,
        keyword_tokens: Sequence[str] = COMMON_KEYWORD_TOKENS,
    ) -> None:
        self._rng = rng or random.Random()
        self._seed = seed
        self._tiers = sorted(tiers, key=lambda t: t[0], reverse=True)
        self._base = base_probability
        self._city_tokens = tuple(city_tokens)
        self._keyword_tokens = tuple(keyword_tokens)

    def probability_for(self, population: int) -> float:
        for threshold, p in self._tiers:
            if population > threshold:
                return p
        return self._base

    def check(self, candidate: DomainCandidate) -> bool:
        if is_common_combination(candidate.domain, self._city_tokens, self._keyword_tokens):
            return False
        return self._draw(candidate.domain) < self.probability_for(candidate.population or 0)

    def _draw(self, domain: str) -> float:
        if self._seed is None:
            return self._rng.random()
        return random.Random(f"{self._seed}:{domain}").random()
