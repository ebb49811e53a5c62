"""Availability strategies: heuristic simulation, HTTP probe, cached WHOIS/DNS/HTTP chain."""

from __future__ import annotations

from geodomain.domains.availability.base import AvailabilityChecker
from geodomain.domains.availability.batch import (
    BatchOutcome,
    CancellationToken,
    SearchSession,
    check_in_batches,
)
from geodomain.domains.availability.heuristic import HeuristicChecker
from geodomain.domains.availability.network import CachedProber, HttpProbeChecker
from geodomain.infrastructure.cache.ttl_cache import TTLCache
from geodomain.infrastructure.data.sources.lookup_client import LookupClient


def build_checker(
    strategy: str,
    *,
    seed: int | None = None,
    cache_ttl: float | None = None,
    client: LookupClient | None = None,
) -> AvailabilityChecker:
    """Checker for a CHECK_STRATEGY value. Unknown names get the heuristic model."""
    s = (strategy or "").strip().lower()
    if s == "probe":
        return HttpProbeChecker(client=client)
    if s == "cached":
        cache = TTLCache(cache_ttl) if cache_ttl is not None else TTLCache()
        return CachedProber(client=client, cache=cache)
    return HeuristicChecker(seed=seed)


__all__ = [
    "AvailabilityChecker",
    "BatchOutcome",
    "CachedProber",
    "CancellationToken",
    "HeuristicChecker",
    "HttpProbeChecker",
    "SearchSession",
    "build_checker",
    "check_in_batches",
]
