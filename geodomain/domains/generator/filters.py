"""Length and state filters over generated candidates. Both optional; they commute."""

from __future__ import annotations

from typing import Iterable

from geodomain.domains.models import DomainCandidate


def filter_by_length(
    candidates: Iterable[DomainCandidate],
    min_length: int | None = None,
    max_length: int | None = None,
) -> list[DomainCandidate]:
    """Keep candidates whose full domain (extension included) length is within [min, max]."""
    out = []
    for c in candidates:
        n = len(c.domain)
        if min_length is not None and n < min_length:
            continue
        if max_length is not None and n > max_length:
            continue
        out.append(c)
    return out


def filter_by_state(candidates: Iterable[DomainCandidate], state: str | None = None) -> list[DomainCandidate]:
    """Keep candidates in the given state (exact match). None or "" = no restriction."""
    if not state:
        return list(candidates)
    return [c for c in candidates if c.state == state]


def apply_filters(
    candidates: Iterable[DomainCandidate],
    *,
    state: str | None = None,
    min_length: int | None = None,
    max_length: int | None = None,
) -> list[DomainCandidate]:
    return filter_by_length(filter_by_state(candidates, state), min_length, max_length)
