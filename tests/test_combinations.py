"""
Tests for the keyword x city combination generator.
"""

from __future__ import annotations

import pytest

from geodomain.domains.generator.combinations import city_first, generate_domains, normalize_extension
from geodomain.domains.models import City, PositionAnchor, SwapPolicy

AUSTIN = City("Austin", "Texas", 978908)
DALLAS = City("Dallas", "Texas", 1343573)


def test_city_at_end_concatenates_keyword_then_city() -> None:
    out = generate_domains(["Law-Yer"], [City("San Antonio", "Texas", 1547253)], "end", False, ".com")
    assert [c.domain for c in out] == ["lawyersanantonio.com"]


@pytest.mark.parametrize("position,swap", [("end", False), ("beginning", True)])
def test_swap_inverts_position(position: str, swap: bool) -> None:
    """(end, no swap) and (beginning, swap) give the same domain."""
    out = generate_domains(["lawyer"], [AUSTIN], position, swap, ".com")
    assert out[0].domain == "lawyeraustin.com"


@pytest.mark.parametrize("position,swap", [("beginning", False), ("end", True), ("start", False)])
def test_city_first_orders(position: str, swap: bool) -> None:
    out = generate_domains(["lawyer"], [AUSTIN], position, swap, ".com")
    assert out[0].domain == "austinlawyer.com"


def test_candidate_fields_come_from_keyword_and_city() -> None:
    c = generate_domains([" lawyer "], [AUSTIN], "end", False, "net")[0]
    assert c.domain == "lawyeraustin.net"
    assert c.keyword == "lawyer"
    assert c.city == "Austin"
    assert c.state == "Texas"
    assert c.population == 978908
    assert c.available is False
    assert c.trademark is False


def test_count_skips_pairs_that_clean_to_empty() -> None:
    cities = [AUSTIN, DALLAS, City("???", "Texas", 1)]
    out = generate_domains(["lawyer", "!!!", "dentist"], cities, "end")
    assert len(out) == 2 * 2


def test_keyword_major_order_and_no_dedup() -> None:
    out = generate_domains(["law", "l-a-w"], [AUSTIN, DALLAS], "end")
    assert [c.domain for c in out] == ["lawaustin.com", "lawdallas.com", "lawaustin.com", "lawdallas.com"]
    assert [c.keyword for c in out] == ["law", "law", "l-a-w", "l-a-w"]


def test_extension_normalization() -> None:
    assert normalize_extension(".COM") == "com"
    assert normalize_extension("io") == "io"
    assert normalize_extension(" .co ") == "co"


def test_swap_policy_ignore() -> None:
    assert city_first("end", True, swap_policy=SwapPolicy.IGNORE) is False
    assert city_first("beginning", True, swap_policy=SwapPolicy.IGNORE) is True


def test_swap_policy_beginning_only() -> None:
    assert city_first("beginning", True, swap_policy=SwapPolicy.BEGINNING_ONLY) is False
    assert city_first("end", True, swap_policy=SwapPolicy.BEGINNING_ONLY) is False


def test_keyword_anchor_places_keyword() -> None:
    """With the keyword anchor, "end" puts the keyword last."""
    out = generate_domains(["lawyer"], [AUSTIN], "end", False, ".com", anchor=PositionAnchor.KEYWORD)
    assert out[0].domain == "austinlawyer.com"
    out = generate_domains(["lawyer"], [AUSTIN], "beginning", False, ".com", anchor="keyword")
    assert out[0].domain == "lawyeraustin.com"
