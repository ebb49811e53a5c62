"""Candidate generation: text normalization, keyword parsing, combinations, filters."""

from geodomain.domains.generator.combinations import generate_domains
from geodomain.domains.generator.filters import apply_filters, filter_by_length, filter_by_state
from geodomain.domains.generator.text import clean_string, parse_keywords

__all__ = [
    "apply_filters",
    "clean_string",
    "filter_by_length",
    "filter_by_state",
    "generate_domains",
    "parse_keywords",
]
