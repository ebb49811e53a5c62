"""Streamlit rendering for the search form and the domain results table."""

from __future__ import annotations

from typing import Callable

import streamlit as st

from geodomain.domains.models import DomainCandidate, PositionAnchor, SearchRequest, SearchResult
from geodomain.infrastructure.data.repositories.city_catalog import CityCatalog
from geodomain.ui.presenter import (
    DEFAULT_COLUMNS,
    GENERATOR_COLUMNS,
    clipboard_text,
    paginate,
    position_caption,
    position_labels,
    summary,
    to_csv,
)
from geodomain.utils.link_generator import format_domain_links


EXTENSIONS = [".com", ".net", ".org", ".io", ".co", ".us"]

PAGE_KEY = "results_page"


def render_search_form(
    catalog: CityCatalog,
    preview: Callable[[SearchRequest], int] | None = None,
    anchor: PositionAnchor = PositionAnchor.CITY,
) -> SearchRequest | None:
    """
    Draw the search form. Returns a SearchRequest when submitted with keywords
    and a country, else None. `preview(request) -> int` labels the button with
    the number of combinations. Position labels follow `anchor`.
    """
    countries = catalog.countries()
    keywords = st.text_area(
        "Keywords (comma or line separated)",
        placeholder="lawyer\nattorney\nlegal services\nlaw firm",
        height=140,
        key="keywords_input",
    )

    col1, col2, col3 = st.columns(3)
    with col1:
        country_code = st.selectbox(
            "Country",
            options=[""] + [c.code for c in countries],
            format_func=lambda code: next((c.name for c in countries if c.code == code), "Select a country"),
            key="country_input",
        )
        states = catalog.states_for(country_code) if country_code else []
        state = st.selectbox(
            "State / province",
            options=[""] + [s.name for s in states],
            format_func=lambda name: name or "All",
            key="state_input",
            disabled=not states,
        )
        cities = catalog.cities_for(country_code, state) if (country_code and state) else []
        city = st.selectbox(
            "City",
            options=[""] + [c.name for c in cities],
            format_func=lambda name: name or "All",
            key="city_input",
            disabled=not cities,
        )
    with col2:
        positions = position_labels(anchor)
        position = st.selectbox(
            position_caption(anchor),
            options=list(positions),
            format_func=positions.get,
            key="position_input",
        )
        extension = st.selectbox("Extension", options=EXTENSIONS, key="extension_input")
        swap = st.toggle("Swap words ⇄", key="swap_input")
    with col3:
        min_len = st.number_input("Min length", min_value=0, max_value=253, value=0, key="min_len_input")
        max_len = st.number_input("Max length", min_value=0, max_value=253, value=0, key="max_len_input",
                                  help="0 = no limit")

    request = SearchRequest(
        keywords=keywords,
        country=country_code,
        state=state or None,
        city=city or None,
        keyword_position=position,
        extension=extension,
        swap_words=swap,
        min_length=int(min_len) or None,
        max_length=int(max_len) or None,
    )
    count = preview(request) if (preview and request.is_valid()) else 0
    label = f"Generate {count:,} domains" if count else "Generate domains"
    # Submission stays disabled until keywords and a country are present
    if st.button(label, type="primary", disabled=not request.is_valid(), use_container_width=True):
        st.session_state[PAGE_KEY] = 1
        return request
    return None


def _render_row(candidate: DomainCandidate, show_availability: bool) -> None:
    cols = st.columns([4, 2, 3, 2, 2])
    cols[0].markdown(f"`{candidate.domain}`")
    cols[1].write(candidate.keyword)
    cols[2].write(f"{candidate.city}, {candidate.state}")
    cols[3].write(f"{candidate.population:,}" if candidate.population else "N/A")
    if show_availability:
        status = "✅ Available" if candidate.available else "❌ Taken"
        if candidate.trademark:
            status += " · ⚠️ TM"
        cols[4].write(status)
    links = format_domain_links(candidate)
    if links:
        st.caption(" · ".join(f"[{link['label']}]({link['url']})" for link in links))


def render_results(
    result: SearchResult,
    page_size: int,
    *,
    show_availability: bool = True,
    quote_csv: bool = False,
) -> None:
    """Summary badges, export buttons, pagination and the current page of rows."""
    if result.error:
        with st.expander("Error details (debug)"):
            st.code(result.error, language="text")
    if not result.candidates:
        if result.cancelled:
            st.caption("Search was superseded by a newer one.")
        return

    counts = summary(result)
    c1, c2, c3, c4 = st.columns(4)
    c1.metric("Keywords", counts["keywords"])
    c2.metric("Cities", counts["cities"])
    c3.metric("Domains", f"{counts['domains']:,}")
    if show_availability:
        c4.metric("Available", f"{counts['available']:,}")

    columns = DEFAULT_COLUMNS if show_availability else GENERATOR_COLUMNS
    csv_text = to_csv(result.candidates, columns, quote=quote_csv)
    e1, e2 = st.columns(2)
    with e1:
        st.download_button(
            "Export CSV",
            data=csv_text.encode("utf-8"),
            file_name="domains.csv",
            mime="text/csv",
            use_container_width=True,
        )
    with e2:
        with st.popover("Copy all", use_container_width=True):
            st.caption(f"{counts['domains']:,} domains. Use the copy icon.")
            st.code(clipboard_text(result.candidates), language="text")

    current = st.session_state.get(PAGE_KEY, 1)
    page = paginate(result.candidates, current, page_size)
    if page.total_pages > 1:
        p1, p2, p3 = st.columns([1, 2, 1])
        with p1:
            if st.button("← Previous", disabled=not page.has_previous, key="prev_page"):
                st.session_state[PAGE_KEY] = page.page - 1
                st.rerun()
        with p2:
            st.caption(
                f"Showing {page.start_index:,} to {page.end_index:,} of {page.total_items:,} domains "
                f"· Page {page.page} of {page.total_pages}"
            )
        with p3:
            if st.button("Next →", disabled=not page.has_next, key="next_page"):
                st.session_state[PAGE_KEY] = page.page + 1
                st.rerun()

    for candidate in page.items:
        _render_row(candidate, show_availability)
