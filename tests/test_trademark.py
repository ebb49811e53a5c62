"""
Tests for the naive trademark screener.
"""

from __future__ import annotations

from geodomain.domains.models import DomainCandidate
from geodomain.domains.trademark import TrademarkScreener


def test_substring_either_direction() -> None:
    s = TrademarkScreener()
    assert s.is_conflict("googleplumbing") is True
    assert s.is_conflict("Google") is True
    assert s.is_conflict("goo") is True
    assert s.is_conflict("lawyer") is False
    assert s.is_conflict("") is False


def test_near_miss_is_not_a_conflict() -> None:
    # "googly" neither contains "google" nor is contained in it
    assert TrademarkScreener().is_conflict("googly") is False


def test_custom_brand_list() -> None:
    s = TrademarkScreener(["Acme"])
    assert s.is_conflict("acmeplumbing") is True
    assert s.is_conflict("google") is False


def test_screen_sets_flag_without_mutating_input() -> None:
    cands = [
        DomainCandidate("nikeaustin.com", "nike", "Austin", "Texas", 1),
        DomainCandidate("lawyeraustin.com", "lawyer", "Austin", "Texas", 1),
    ]
    out = TrademarkScreener().screen(cands)
    assert [c.trademark for c in out] == [True, False]
    assert cands[0].trademark is False
