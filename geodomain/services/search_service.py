"""
Search orchestration: form request -> keywords + cities -> candidates ->
filters -> availability -> trademark screen -> population sort.

UI-free. Failures never propagate to the page: invalid input gives an empty
result, and an unexpected error is logged and reported through
SearchResult.error with no candidates.
"""

from __future__ import annotations

from typing import Callable

from geodomain.domains.availability import (
    AvailabilityChecker,
    CancellationToken,
    SearchSession,
    build_checker,
    check_in_batches,
)
from geodomain.domains.generator.combinations import generate_domains
from geodomain.domains.generator.filters import apply_filters
from geodomain.domains.generator.text import parse_keywords
from geodomain.domains.models import (
    City,
    KeywordMode,
    PositionAnchor,
    SearchRequest,
    SearchResult,
    SwapPolicy,
)
from geodomain.domains.trademark import TrademarkScreener
from geodomain.infrastructure.data.repositories.city_catalog import CityCatalog
from geodomain.ui.presenter import sort_by_population
from geodomain.utils import config
from geodomain.utils.logger import get_logger

logger = get_logger()


def _enum_or_default(enum_cls, value, default):
    try:
        return enum_cls(value)
    except ValueError:
        logger.warning("Unknown %s value %r; using %s", enum_cls.__name__, value, default.value)
        return default


class DomainSearchService:
    """
    Runs searches against one catalog and one availability checker.

    The service is safe to share between users. Callers that need "new search
    supersedes old" pass a token from their own SearchSession; without one the
    service falls back to a private session of its own.
    """

    def __init__(
        self,
        catalog: CityCatalog | None = None,
        checker: AvailabilityChecker | None = None,
        screener: TrademarkScreener | None = None,
        *,
        keyword_mode: KeywordMode | str | None = None,
        swap_policy: SwapPolicy | str | None = None,
        anchor: PositionAnchor | str | None = None,
        batch_size: int | None = None,
        batch_delay: float | None = None,
    ) -> None:
        self._catalog = catalog or CityCatalog()
        self._checker = checker or build_checker(
            config.check_strategy(),
            seed=config.heuristic_seed(),
            cache_ttl=config.cache_ttl_seconds(),
        )
        self._screener = screener or TrademarkScreener()
        self.keyword_mode = _enum_or_default(KeywordMode, keyword_mode or config.keyword_mode(), KeywordMode.MULTI)
        self.swap_policy = _enum_or_default(SwapPolicy, swap_policy or config.swap_policy(), SwapPolicy.INVERT)
        self.anchor = _enum_or_default(PositionAnchor, anchor or config.position_anchor(), PositionAnchor.CITY)
        self._batch_size = batch_size if batch_size is not None else config.batch_size()
        self._batch_delay = batch_delay if batch_delay is not None else config.batch_delay_seconds()
        self._session = SearchSession()

    @property
    def catalog(self) -> CityCatalog:
        return self._catalog

    @property
    def checker(self) -> AvailabilityChecker:
        return self._checker

    def _cities(self, request: SearchRequest) -> list[City]:
        if request.city:
            city = self._catalog.city(request.country, request.city, request.state or None)
            return [city] if city else []
        return self._catalog.cities_for(request.country, request.state or None)

    def preview_count(self, request: SearchRequest) -> int:
        """Number of combinations a request would produce before filtering (for the button label)."""
        keywords = parse_keywords(request.keywords, self.keyword_mode)
        return len(keywords) * len(self._cities(request))

    def run_search(
        self,
        request: SearchRequest,
        *,
        on_progress: Callable[[int, int], None] | None = None,
        token: CancellationToken | None = None,
        check_availability: bool = True,
    ) -> SearchResult:
        """
        Run one search. With check_availability=False the candidates are
        returned unchecked (available=False), as the plain generator view shows them.
        """
        token = token or self._session.begin()
        if not request.is_valid():
            logger.info("Search skipped: keywords and country are required")
            return SearchResult()

        try:
            return self._run(request, token, on_progress, check_availability)
        except Exception as e:
            logger.exception("Domain search failed: %s", e)
            return SearchResult(error=f"{type(e).__name__}: {e}")

    def _run(
        self,
        request: SearchRequest,
        token: CancellationToken,
        on_progress: Callable[[int, int], None] | None,
        check_availability: bool,
    ) -> SearchResult:
        keywords = parse_keywords(request.keywords, self.keyword_mode)
        cities = self._cities(request)

        candidates = generate_domains(
            keywords,
            cities,
            request.keyword_position,
            request.swap_words,
            request.extension,
            swap_policy=self.swap_policy,
            anchor=self.anchor,
        )
        logger.info(
            "Generated %d candidates from %d keywords x %d cities (%s/%s)",
            len(candidates), len(keywords), len(cities), request.country, request.state or "all",
        )

        candidates = apply_filters(
            candidates,
            state=request.state or None,
            min_length=request.min_length,
            max_length=request.max_length,
        )
        logger.info(
            "%d candidates within length %s-%s",
            len(candidates), request.min_length or "*", request.max_length or "*",
        )

        if not check_availability:
            return SearchResult(
                candidates=sort_by_population(self._screener.screen(candidates)),
                keyword_count=len(keywords),
                city_count=len(cities),
            )

        outcome = check_in_batches(
            candidates,
            self._checker,
            batch_size=self._batch_size,
            delay_seconds=self._batch_delay,
            token=token,
            on_progress=on_progress,
        )
        if outcome.failed:
            logger.warning("%d availability checks failed and were marked unavailable", outcome.failed)

        screened = self._screener.screen(outcome.candidates)
        return SearchResult(
            candidates=sort_by_population(screened),
            keyword_count=len(keywords),
            city_count=len(cities),
            cancelled=outcome.cancelled,
        )
