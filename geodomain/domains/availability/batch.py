"""
Batched availability checking with per-search cancellation.

Candidates are checked in fixed-size batches. Checks inside a batch run on a
thread pool and are joined before the next batch starts; a failing check gets
available=False without touching its siblings. A new search cancels the token
of the previous one so its remaining batches are abandoned.
"""

from __future__ import annotations

import threading
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field, replace
from typing import Callable, Sequence

from geodomain.domains.availability.base import AvailabilityChecker
from geodomain.domains.models import DomainCandidate
from geodomain.utils.logger import get_logger

logger = get_logger()

DEFAULT_BATCH_SIZE = 20
DEFAULT_BATCH_DELAY = 0.05


class CancellationToken:
    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()


class SearchSession:
    """Hands out one token per search; starting a search cancels the previous one."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._current: CancellationToken | None = None

    def begin(self) -> CancellationToken:
        token = CancellationToken()
        with self._lock:
            previous, self._current = self._current, token
        if previous is not None:
            previous.cancel()
        return token

    @property
    def current(self) -> CancellationToken | None:
        return self._current


@dataclass
class BatchOutcome:
    candidates: list[DomainCandidate] = field(default_factory=list)
    checked: int = 0
    failed: int = 0
    cancelled: bool = False


def _safe_check(checker: AvailabilityChecker, candidate: DomainCandidate) -> tuple[bool, bool]:
    """(verdict, failed). Exceptions become (False, True)."""
    try:
        return bool(checker.check(candidate)), False
    except Exception:
        logger.exception("Availability check crashed for %s", candidate.domain)
        return False, True


def check_in_batches(
    candidates: Sequence[DomainCandidate],
    checker: AvailabilityChecker,
    *,
    batch_size: int = DEFAULT_BATCH_SIZE,
    delay_seconds: float = DEFAULT_BATCH_DELAY,
    token: CancellationToken | None = None,
    on_progress: Callable[[int, int], None] | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> BatchOutcome:
    """
    Decorate candidates with `available`, preserving input order.

    on_progress(done, total) is called after every batch. When the token is
    cancelled before a batch starts, the outcome holds only the candidates
    checked so far and `cancelled` is True.
    """
    size = max(1, int(batch_size))
    total = len(candidates)
    outcome = BatchOutcome()
    if total == 0:
        return outcome

    with ThreadPoolExecutor(max_workers=min(size, total)) as pool:
        for start in range(0, total, size):
            if token is not None and token.cancelled:
                logger.info("Search superseded; stopping after %d of %d checks", outcome.checked, total)
                outcome.cancelled = True
                break
            if start and delay_seconds > 0:
                sleep(delay_seconds)

            batch = candidates[start : start + size]
            futures = [pool.submit(_safe_check, checker, c) for c in batch]
            for cand, fut in zip(batch, futures):
                verdict, failed = fut.result()
                outcome.candidates.append(replace(cand, available=verdict))
                outcome.failed += int(failed)
            outcome.checked += len(batch)

            if on_progress is not None:
                on_progress(outcome.checked, total)

    return outcome
