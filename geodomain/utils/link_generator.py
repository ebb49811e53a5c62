"""
Generate research links for a candidate domain (appraisal, search volume,
maps, reviews, history, spam reputation, archive).

Pure string building: no request is made and nothing is parsed.
"""

from __future__ import annotations

from urllib.parse import quote

from geodomain.domains.models import DomainCandidate

# link type -> (label, template). Placeholders: {domain}, {domain_q}, {local_q}
LINK_TEMPLATES: dict[str, tuple[str, str]] = {
    "appraisal": ("Appraisal", "https://www.dynadot.com/domain/appraisal.html?domain={domain}"),
    "volume": (
        "Search volume",
        "https://app.neilpatel.com/en/ubersuggest/overview?keyword={domain_q}&lang=en&locId=2840",
    ),
    "maps": ("Maps", "https://www.google.com/maps/search/{local_q}"),
    "yelp": ("Yelp", "https://www.yelp.com/search?find_desc={domain_q}"),
    "dotdb": ("DotDB", "https://dotdb.com/search?keyword={domain}&position=any"),
    "spam": ("Spamhaus", "https://check.spamhaus.org/results/?query={domain}"),
    "search": ("Google", "https://www.google.com/search?q={local_q}"),
    "archive": ("Archive", "https://web.archive.org/web/*/{domain}"),
}


def _encode(value: str) -> str:
    # encodeURIComponent-compatible
    return quote(value, safe="-_.!~*'()")


def build_link(link_type: str, domain: str, city: str = "", keyword: str = "") -> str | None:
    """
    URL for one link type, or None for an unknown type.

    Maps and web search use "<city> <keyword>"; the others use the domain.
    """
    entry = LINK_TEMPLATES.get(link_type)
    if entry is None:
        return None
    local = f"{city} {keyword}".strip()
    return entry[1].format(
        domain=domain,
        domain_q=_encode(domain),
        local_q=_encode(local),
    )


def generate_domain_links(candidate: DomainCandidate) -> dict[str, str]:
    """All research links for a candidate, keyed by link type."""
    links: dict[str, str] = {}
    if not candidate.domain:
        return links
    for link_type in LINK_TEMPLATES:
        url = build_link(link_type, candidate.domain, candidate.city, candidate.keyword)
        if url:
            links[link_type] = url
    return links


def format_domain_links(candidate: DomainCandidate) -> list[dict[str, str]]:
    """
    Format links for display in UI.

    Returns:
        List of dicts with "label" and "url" keys, in template order.
    """
    links = generate_domain_links(candidate)
    return [{"label": LINK_TEMPLATES[t][0], "url": url} for t, url in links.items()]
