"""
In-memory TTL cache for availability verdicts.

Entries are only judged stale on read; nothing is evicted in the background.
The lock keeps the dict consistent across checker threads; concurrent writers
for the same key are last-write-wins.
"""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from typing import Callable

DEFAULT_TTL_SECONDS = 5 * 60


@dataclass(frozen=True)
class CacheEntry:
    available: bool
    observed_at: float


class TTLCache:
    def __init__(
        self,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] | None = None,
    ) -> None:
        self._ttl = float(ttl_seconds)
        self._clock = clock or time.monotonic
        self._entries: dict[str, CacheEntry] = {}
        self._lock = threading.Lock()

    @property
    def ttl_seconds(self) -> float:
        return self._ttl

    def get(self, domain: str) -> bool | None:
        """Cached verdict if present and younger than the TTL, else None."""
        with self._lock:
            entry = self._entries.get(domain)
        if entry is None:
            return None
        if self._clock() - entry.observed_at >= self._ttl:
            return None
        return entry.available

    def set(self, domain: str, available: bool) -> None:
        with self._lock:
            self._entries[domain] = CacheEntry(available=bool(available), observed_at=self._clock())

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
