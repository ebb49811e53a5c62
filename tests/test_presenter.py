"""
Tests for result presentation: sorting, pagination, clipboard text, CSV export.
"""

from __future__ import annotations

from geodomain.domains.models import DomainCandidate, PositionAnchor, SearchResult
from geodomain.ui.presenter import (
    GENERATOR_COLUMNS,
    clipboard_text,
    paginate,
    position_caption,
    position_labels,
    sort_by_population,
    summary,
    to_csv,
)

LAWYER_AUSTIN = DomainCandidate(
    domain="lawyeraustin.com",
    keyword="lawyer",
    city="Austin",
    state="Texas",
    population=1028225,
    available=True,
)


def _cand(domain: str, population: int) -> DomainCandidate:
    return DomainCandidate(domain=domain, keyword="k", city="c", state="s", population=population)


def test_sort_by_population_desc_and_stable() -> None:
    cands = [_cand("a", 50000), _cand("b", 8336817), _cand("c", 200733), _cand("d", 50000)]
    out = sort_by_population(cands)
    assert [c.population for c in out] == [8336817, 200733, 50000, 50000]
    assert [c.domain for c in out][-2:] == ["a", "d"]


def test_paginate() -> None:
    items = list(range(45))
    page = paginate(items, 3, 20)
    assert page.items == list(range(40, 45))
    assert page.total_pages == 3
    assert (page.start_index, page.end_index) == (41, 45)
    assert page.has_previous and not page.has_next


def test_paginate_clamps_page() -> None:
    assert paginate(list(range(5)), 9, 2).page == 3
    assert paginate(list(range(5)), 0, 2).page == 1
    empty = paginate([], 1, 10)
    assert empty.items == [] and empty.total_pages == 1 and empty.start_index == 0


def test_clipboard_text() -> None:
    assert clipboard_text([_cand("a.com", 1), _cand("b.com", 2)]) == "a.com\nb.com"


def test_csv_row_format() -> None:
    text = to_csv([LAWYER_AUSTIN])
    assert text.split("\n") == [
        "Domain,Keyword,City,State,Population,Available",
        "lawyeraustin.com,lawyer,Austin,Texas,1028225,Yes",
    ]


def test_csv_generator_columns() -> None:
    text = to_csv([LAWYER_AUSTIN], GENERATOR_COLUMNS)
    assert text.split("\n")[1] == "lawyeraustin.com,lawyer,Austin,Texas,1028225"


def test_csv_legacy_vs_quoted() -> None:
    c = DomainCandidate("lawfirmaustin.com", "law, firm", "Austin", "Texas", 5, available=False)
    legacy = to_csv([c]).split("\n")[1]
    assert legacy == "lawfirmaustin.com,law, firm,Austin,Texas,5,No"
    quoted = to_csv([c], quote=True).split("\n")[1]
    assert quoted == 'lawfirmaustin.com,"law, firm",Austin,Texas,5,No'


def test_summary_counts() -> None:
    result = SearchResult(candidates=[LAWYER_AUSTIN, _cand("x.com", 1)], keyword_count=1, city_count=2)
    assert summary(result) == {"keywords": 1, "cities": 2, "domains": 2, "available": 1}


def test_position_labels_follow_city_anchor() -> None:
    assert position_caption(PositionAnchor.CITY) == "City position"
    assert position_labels(PositionAnchor.CITY) == {
        "end": "End (KeywordCity.com)",
        "beginning": "Beginning (CityKeyword.com)",
    }


def test_position_labels_follow_keyword_anchor() -> None:
    assert position_caption(PositionAnchor.KEYWORD) == "Keyword position"
    assert position_labels(PositionAnchor.KEYWORD) == {
        "end": "End (CityKeyword.com)",
        "beginning": "Beginning (KeywordCity.com)",
    }
