"""
Network-backed availability strategies.

HttpProbeChecker only issues the HEAD probe. CachedProber walks
WHOIS -> DNS -> HTTP until one lookup gives a definite answer and keeps the
verdict in a TTL cache, defaulting to "taken" when nothing is conclusive.
"""

from __future__ import annotations

from typing import Callable

from geodomain.domains.availability.base import AvailabilityChecker
from geodomain.domains.models import DomainCandidate
from geodomain.infrastructure.cache.ttl_cache import TTLCache
from geodomain.infrastructure.data.sources.lookup_client import LookupClient
from geodomain.utils.logger import get_logger

logger = get_logger()


class HttpProbeChecker(AvailabilityChecker):
    name = "probe"

    def __init__(self, client: LookupClient | None = None) -> None:
        self._client = client or LookupClient()

    def check(self, candidate: DomainCandidate) -> bool:
        return self._client.http_probe(candidate.domain)


class CachedProber(AvailabilityChecker):
    name = "cached"

    def __init__(
        self,
        client: LookupClient | None = None,
        cache: TTLCache | None = None,
    ) -> None:
        self._client = client or LookupClient()
        self._cache = cache if cache is not None else TTLCache()

    @property
    def cache(self) -> TTLCache:
        return self._cache

    def _methods(self) -> list[tuple[str, Callable[[str], bool | None]]]:
        return [
            ("whois", self._client.whois),
            ("dns", self._client.dns),
            ("http", self._client.http_probe),
        ]

    def check_domain(self, domain: str) -> bool:
        cached = self._cache.get(domain)
        if cached is not None:
            logger.debug("Availability cache hit: %s -> %s", domain, cached)
            return cached

        verdict: bool | None = None
        for method, lookup in self._methods():
            try:
                verdict = lookup(domain)
            except Exception as e:
                logger.debug("%s lookup raised for %s: %s", method, domain, e)
                verdict = None
            if verdict is not None:
                logger.debug("%s decided %s -> %s", method, domain, verdict)
                break

        if verdict is None:
            logger.info("No lookup was conclusive for %s; reporting unavailable", domain)
            verdict = False

        self._cache.set(domain, verdict)
        return verdict

    def check(self, candidate: DomainCandidate) -> bool:
        return self.check_domain(candidate.domain)

    def clear_cache(self) -> None:
        self._cache.clear()
