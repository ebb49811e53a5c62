"""
City catalog: static country -> states/cities reference data loaded from
geodomain/data/countries.json.

Lookups never raise. An unknown country code or an unreadable data file gives
empty lists so the form keeps working with nothing selected.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from geodomain.domains.models import City, Country, State
from geodomain.utils.logger import get_logger

logger = get_logger()

# Used when a catalog entry has no population figure
FALLBACK_POPULATIONS: dict[str, int] = {
    "New York": 8336817,
    "Los Angeles": 3979576,
    "Chicago": 2671635,
    "Houston": 2320268,
    "Phoenix": 1680992,
    "Philadelphia": 1585480,
    "San Antonio": 1547253,
    "San Diego": 1423851,
    "Dallas": 1343573,
    "Austin": 978908,
    "Toronto": 2930000,
    "Vancouver": 675218,
    "Montreal": 1780000,
    "Calgary": 1336000,
    "Birmingham": 200733,
    "Huntsville": 215006,
    "Mobile": 187041,
    "Montgomery": 200603,
    "Tuscaloosa": 101129,
    "Anchorage": 291247,
    "Fairbanks": 32515,
    "Juneau": 32255,
}
DEFAULT_POPULATION = 50000


def _countries_path() -> Path:
    return Path(__file__).resolve().parents[3] / "data" / "countries.json"


def population_for(name: str, population: Any = None) -> int:
    """Population from the data if usable, else the fallback table, else 50,000."""
    try:
        value = int(population)
    except (TypeError, ValueError):
        value = 0
    if value > 0:
        return value
    return FALLBACK_POPULATIONS.get(name, DEFAULT_POPULATION)


def _parse_country(raw: dict[str, Any]) -> Country | None:
    code = str(raw.get("code") or "").strip()
    if not code:
        return None
    states = tuple(
        State(code=str(s.get("code") or ""), name=str(s.get("name") or ""))
        for s in raw.get("states") or []
        if s.get("name")
    )
    cities = tuple(
        City(
            name=str(c["name"]),
            state=str(c.get("state") or ""),
            population=population_for(str(c["name"]), c.get("population")),
        )
        for c in raw.get("cities") or []
        if c.get("name")
    )
    return Country(code=code, name=str(raw.get("name") or code), states=states, cities=cities)


class CityCatalog:
    """
    Load countries once and answer city/state lookups.
    State filters match the state name exactly (case-sensitive).
    """

    def __init__(self, path: Path | None = None) -> None:
        self._path = path or _countries_path()
        self._countries: list[Country] | None = None

    def _load(self) -> list[Country]:
        if self._countries is not None:
            return self._countries
        p = self._path
        if not p.is_file():
            logger.warning("Country catalog not found: %s", p)
            self._countries = []
            return self._countries
        try:
            with open(p, "r", encoding="utf-8") as f:
                data = json.load(f)
            countries = []
            for raw in data if isinstance(data, list) else []:
                country = _parse_country(raw) if isinstance(raw, dict) else None
                if country:
                    countries.append(country)
        except Exception as e:
            logger.exception("Failed to load country catalog from %s: %s", p, e)
            self._countries = []
            return self._countries

        self._countries = countries
        logger.info("Loaded %d countries from %s", len(countries), p.name)
        return self._countries

    def countries(self) -> list[Country]:
        return list(self._load())

    def country(self, code: str) -> Country | None:
        for c in self._load():
            if c.code == code:
                return c
        return None

    def states_for(self, code: str) -> list[State]:
        country = self.country(code)
        return list(country.states) if country else []

    def cities_for(self, code: str, state: str | None = None) -> list[City]:
        """
        Cities of a country in catalog order, optionally only those in `state`.
        Unknown country -> [].
        """
        country = self.country(code)
        if country is None:
            return []
        if not state:
            return list(country.cities)
        return [c for c in country.cities if c.state == state]

    def city(self, code: str, name: str, state: str | None = None) -> City | None:
        for c in self.cities_for(code, state):
            if c.name == name:
                return c
        return None
