"""
Tests for DomainSearchService: the end-to-end search pipeline.
"""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from geodomain.domains.availability import AvailabilityChecker, CancellationToken, SearchSession
from geodomain.domains.models import City, DomainCandidate, SearchRequest
from geodomain.services.search_service import DomainSearchService


class AllAvailable(AvailabilityChecker):
    def check(self, candidate: DomainCandidate) -> bool:
        return True


@pytest.fixture
def catalog() -> MagicMock:
    cities = {
        "Texas": [City("Waco", "Texas", 139236), City("Austin", "Texas", 978908), City("Houston", "Texas", 2320268)],
        "Ohio": [City("Akron", "Ohio", 190469)],
    }
    cat = MagicMock()

    def cities_for(code: str, state: str | None = None) -> list[City]:
        if code != "US":
            return []
        if state:
            return list(cities.get(state, []))
        return [c for group in cities.values() for c in group]

    def city(code: str, name: str, state: str | None = None) -> City | None:
        return next((c for c in cities_for(code, state) if c.name == name), None)

    cat.cities_for.side_effect = cities_for
    cat.city.side_effect = city
    return cat


def _service(catalog: MagicMock, checker: AvailabilityChecker | None = None, **kw) -> DomainSearchService:
    return DomainSearchService(
        catalog=catalog,
        checker=checker or AllAvailable(),
        keyword_mode=kw.pop("keyword_mode", "multi"),
        swap_policy=kw.pop("swap_policy", "invert"),
        anchor=kw.pop("anchor", "city"),
        batch_size=2,
        batch_delay=0,
        **kw,
    )


def test_search_generates_sorted_candidates(catalog: MagicMock) -> None:
    service = _service(catalog)
    result = service.run_search(SearchRequest(keywords="lawyer\nnike", country="US", state="Texas"))

    assert result.error is None
    assert result.keyword_count == 2
    assert result.city_count == 3
    assert result.domain_count == 6
    assert [c.population for c in result.candidates] == [2320268, 2320268, 978908, 978908, 139236, 139236]
    # stable: keyword order kept within a city
    assert [c.domain for c in result.candidates[:2]] == ["lawyerhouston.com", "nikehouston.com"]
    assert all(c.available for c in result.candidates)
    assert [c.trademark for c in result.candidates[:2]] == [False, True]


def test_search_applies_length_filter_and_position(catalog: MagicMock) -> None:
    service = _service(catalog)
    req = SearchRequest(
        keywords="law",
        country="US",
        state="Texas",
        keyword_position="beginning",
        extension=".io",
        min_length=5,
        max_length=10,
    )
    result = service.run_search(req)
    assert [c.domain for c in result.candidates] == ["wacolaw.io"]


def test_single_keyword_mode(catalog: MagicMock) -> None:
    service = _service(catalog, keyword_mode="single")
    result = service.run_search(SearchRequest(keywords="law firm, legal", country="US", state="Ohio"))
    assert [c.domain for c in result.candidates] == ["lawfirmlegalakron.com"]
    assert result.candidates[0].keyword == "law firm, legal"


def test_specific_city(catalog: MagicMock) -> None:
    service = _service(catalog)
    result = service.run_search(SearchRequest(keywords="law", country="US", state="Texas", city="Austin"))
    assert [c.domain for c in result.candidates] == ["lawaustin.com"]


def test_invalid_request_returns_empty(catalog: MagicMock) -> None:
    service = _service(catalog)
    assert service.run_search(SearchRequest(keywords="  ", country="US")).candidates == []
    assert service.run_search(SearchRequest(keywords="law", country="")).candidates == []
    catalog.cities_for.assert_not_called()


def test_unknown_country_gives_no_candidates(catalog: MagicMock) -> None:
    result = _service(catalog).run_search(SearchRequest(keywords="law", country="ZZ"))
    assert result.candidates == [] and result.error is None


def test_unexpected_error_is_contained(catalog: MagicMock) -> None:
    catalog.cities_for.side_effect = RuntimeError("catalog broke")
    result = _service(catalog).run_search(SearchRequest(keywords="law", country="US"))
    assert result.candidates == []
    assert "catalog broke" in result.error


def test_failing_checker_marks_unavailable(catalog: MagicMock) -> None:
    checker = MagicMock(spec=AvailabilityChecker)
    checker.check.side_effect = RuntimeError("network down")
    result = _service(catalog, checker=checker).run_search(
        SearchRequest(keywords="law", country="US", state="Texas")
    )
    assert result.domain_count == 3
    assert not any(c.available for c in result.candidates)


def test_skip_availability(catalog: MagicMock) -> None:
    checker = MagicMock(spec=AvailabilityChecker)
    result = _service(catalog, checker=checker).run_search(
        SearchRequest(keywords="law", country="US", state="Texas"), check_availability=False
    )
    assert result.domain_count == 3
    checker.check.assert_not_called()


def test_cancelled_search_is_flagged(catalog: MagicMock) -> None:
    token = CancellationToken()
    token.cancel()
    result = _service(catalog).run_search(SearchRequest(keywords="law", country="US", state="Texas"), token=token)
    assert result.cancelled is True
    assert result.candidates == []


def test_preview_count(catalog: MagicMock) -> None:
    service = _service(catalog)
    assert service.preview_count(SearchRequest(keywords="a,b", country="US")) == 8
    assert service.preview_count(SearchRequest(keywords="a,b", country="US", state="Texas", city="Austin")) == 2
    assert service.preview_count(SearchRequest(keywords="a,b", country="US", state="Texas", city="Nowhere")) == 0


def test_unknown_policy_falls_back(catalog: MagicMock) -> None:
    service = _service(catalog, swap_policy="sideways")
    assert service.swap_policy.value == "invert"


def test_unknown_city_gives_no_candidates(catalog: MagicMock) -> None:
    result = _service(catalog).run_search(SearchRequest(keywords="law", country="US", state="Texas", city="Nowhere"))
    assert result.candidates == [] and result.city_count == 0


def test_search_in_one_session_does_not_cancel_another(catalog: MagicMock) -> None:
    service = _service(catalog)
    first_user, second_user = SearchSession(), SearchSession()
    request = SearchRequest(keywords="law", country="US", state="Texas")

    first_token = first_user.begin()
    second = service.run_search(request, token=second_user.begin())
    assert second.cancelled is False
    assert first_token.cancelled is False

    first = service.run_search(request, token=first_token)
    assert first.cancelled is False
    assert first.domain_count == 3

    # a newer search from the same user still supersedes the older one
    first_user.begin()
    assert first_token.cancelled is True
