"""
Best-effort public lookups used to guess domain availability: a WHOIS JSON API,
Google DNS-over-HTTPS, and a plain HTTP HEAD probe.

Each lookup returns True (looks available), False (looks taken) or None
(inconclusive). None of these is authoritative.
"""

from __future__ import annotations

import threading
import time
from typing import Any, Callable

import requests

from geodomain.utils.config import http_timeout_seconds, lookup_min_interval_seconds
from geodomain.utils.logger import get_logger

logger = get_logger()

WHOIS_ENDPOINT = "https://api.whoisjson.com/v1/{domain}"
DNS_ENDPOINT = "https://dns.google/resolve"

# DNS RCODE reported in the DoH JSON "Status" field for a name that does not exist
DNS_NXDOMAIN = 3


class RateLimiter:
    """
    Enforce a minimum interval between outbound requests across threads.
    min_interval=0 disables waiting.
    """

    def __init__(
        self,
        min_interval: float = 0.0,
        clock: Callable[[], float] | None = None,
        sleep: Callable[[float], None] | None = None,
    ) -> None:
        self._min_interval = max(0.0, float(min_interval))
        self._clock = clock or time.monotonic
        self._sleep = sleep or time.sleep
        self._lock = threading.Lock()
        self._next_at = 0.0

    def wait(self) -> None:
        if self._min_interval <= 0:
            return
        with self._lock:
            now = self._clock()
            delay = self._next_at - now
            self._next_at = max(now, self._next_at) + self._min_interval
        if delay > 0:
            self._sleep(delay)


def _interpret_whois(data: dict[str, Any]) -> bool | None:
    if not isinstance(data, dict) or "registered" not in data:
        return None
    return not data.get("registered")


def _interpret_dns(data: dict[str, Any]) -> bool | None:
    # Only NXDOMAIN counts as free; SERVFAIL, REFUSED and NOERROR all read as taken
    if not isinstance(data, dict):
        return None
    return data.get("Status") == DNS_NXDOMAIN


class LookupClient:
    """
    Thin requests wrapper around the three lookups. A shared Session and an
    optional RateLimiter are applied to every call.
    """

    def __init__(
        self,
        timeout: float | None = None,
        session: requests.Session | None = None,
        rate_limiter: RateLimiter | None = None,
    ) -> None:
        self._timeout = timeout if timeout is not None else http_timeout_seconds()
        self._session = session or requests.Session()
        self._limiter = rate_limiter or RateLimiter(lookup_min_interval_seconds())

    def whois(self, domain: str) -> bool | None:
        """Registered flag from the WHOIS JSON API. Non-OK response or bad payload -> None."""
        self._limiter.wait()
        try:
            r = self._session.get(
                WHOIS_ENDPOINT.format(domain=domain),
                timeout=self._timeout,
                headers={"Accept": "application/json"},
            )
            if not r.ok:
                logger.debug("WHOIS lookup for %s returned HTTP %s", domain, r.status_code)
                return None
            return _interpret_whois(r.json())
        except requests.RequestException as e:
            logger.debug("WHOIS lookup failed for %s: %s", domain, e)
            return None
        except ValueError as e:
            logger.debug("WHOIS lookup returned invalid JSON for %s: %s", domain, e)
            return None

    def dns(self, domain: str) -> bool | None:
        """NXDOMAIN -> available, any other status -> taken. Non-OK response or bad payload -> None."""
        self._limiter.wait()
        try:
            r = self._session.get(
                DNS_ENDPOINT,
                params={"name": domain, "type": "A"},
                timeout=self._timeout,
                headers={"Accept": "application/dns-json"},
            )
            if not r.ok:
                logger.debug("DNS lookup for %s returned HTTP %s", domain, r.status_code)
                return None
            return _interpret_dns(r.json())
        except requests.RequestException as e:
            logger.debug("DNS lookup failed for %s: %s", domain, e)
            return None
        except ValueError as e:
            logger.debug("DNS lookup returned invalid JSON for %s: %s", domain, e)
            return None

    def http_probe(self, domain: str) -> bool:
        """
        HEAD https://<domain>. Any response means something is hosted there
        (taken); a failed, refused or timed out request is read as available.
        This confuses unreachable-but-registered domains with free ones.
        """
        self._limiter.wait()
        try:
            self._session.head(f"https://{domain}", timeout=self._timeout, allow_redirects=False)
            return False
        except requests.RequestException as e:
            logger.debug("HTTP probe got no response from %s: %s", domain, e)
            return True
