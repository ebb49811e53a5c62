"""Common interface for availability strategies."""

from __future__ import annotations

from geodomain.domains.models import DomainCandidate


class AvailabilityChecker:
    """
    Strategy interface. `check` returns True when the candidate's domain looks
    available. Implementations must not raise for lookup failures; they turn
    them into a verdict according to their own policy.
    """

    name = "base"

    def check(self, candidate: DomainCandidate) -> bool:
        raise NotImplementedError
