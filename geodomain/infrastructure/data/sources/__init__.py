"""Data sources: public WHOIS / DNS-over-HTTPS / HTTP lookups."""

from geodomain.infrastructure.data.sources.lookup_client import LookupClient, RateLimiter

__all__ = ["LookupClient", "RateLimiter"]
