"""
Keyword x city combination generator.

Builds one DomainCandidate per (keyword, city) pair whose cleaned forms are both
non-empty. Identical domain strings are not deduplicated; each row keeps its own
keyword/city provenance.
"""

from __future__ import annotations

from typing import Iterable

from geodomain.domains.generator.text import clean_string
from geodomain.domains.models import (
    POSITION_BEGINNING,
    City,
    DomainCandidate,
    PositionAnchor,
    SwapPolicy,
    normalize_position,
)


def normalize_extension(extension: str) -> str:
    """".com" / "com" / " .COM " -> "com"."""
    return (extension or "").strip().lstrip(".").lower()


def city_first(
    position: str,
    swap: bool,
    *,
    swap_policy: SwapPolicy | str = SwapPolicy.INVERT,
    anchor: PositionAnchor | str = PositionAnchor.CITY,
) -> bool:
    """
    Decide whether the city goes in front of the keyword.

    With the default CITY anchor, "beginning" means the city comes first; with
    the KEYWORD anchor it means the keyword comes first. The swap toggle then
    flips that choice according to the policy.
    """
    policy = SwapPolicy(swap_policy)
    anchor = PositionAnchor(anchor)
    position = normalize_position(position)

    at_beginning = position == POSITION_BEGINNING
    first = at_beginning if anchor is PositionAnchor.CITY else not at_beginning

    if not swap or policy is SwapPolicy.IGNORE:
        return first
    if policy is SwapPolicy.BEGINNING_ONLY and not at_beginning:
        return first
    return not first


def build_domain(keyword: str, city: str, *, city_leads: bool, extension: str) -> str:
    """Concatenate cleaned parts and extension; empty string if either part cleans to nothing."""
    k = clean_string(keyword)
    c = clean_string(city)
    if not k or not c:
        return ""
    name = c + k if city_leads else k + c
    ext = normalize_extension(extension)
    return (f"{name}.{ext}" if ext else name).lower()


def generate_domains(
    keywords: Iterable[str],
    cities: Iterable[City],
    position: str = "end",
    swap: bool = False,
    extension: str = ".com",
    *,
    swap_policy: SwapPolicy | str = SwapPolicy.INVERT,
    anchor: PositionAnchor | str = PositionAnchor.CITY,
) -> list[DomainCandidate]:
    """
    Cartesian product of keywords x cities, keyword-major order.

    Returns candidates with available/trademark unset; pairs where either side
    normalizes to an empty string are dropped.
    """
    city_leads = city_first(position, swap, swap_policy=swap_policy, anchor=anchor)
    city_list = list(cities)
    out: list[DomainCandidate] = []
    for keyword in keywords:
        kw = (keyword or "").strip()
        for city in city_list:
            domain = build_domain(kw, city.name, city_leads=city_leads, extension=extension)
            if not domain:
                continue
            out.append(
                DomainCandidate(
                    domain=domain,
                    keyword=kw,
                    city=city.name,
                    state=city.state,
                    population=city.population,
                )
            )
    return out
