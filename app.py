"""
Geo Domain Generator: Streamlit UI entry point.
"""

import streamlit as st

# Load .env first so strategy/page-size settings are picked up
from geodomain.utils.config import load_config, check_strategy, csv_quoting, page_size
load_config()

from geodomain.domains.availability import SearchSession
from geodomain.infrastructure.data.repositories.city_catalog import CityCatalog
from geodomain.services.search_service import DomainSearchService
from geodomain.ui.results_display import render_results, render_search_form
from geodomain.utils.logger import setup_from_config, get_logger

setup_from_config()
log = get_logger()

st.set_page_config(page_title="Geo Domain Generator", layout="wide")
st.title("Geo Domain Generator")
st.caption("Generate geo-targeted domain names for many keywords across the cities of a country or state.")


# One service per server process: it owns the catalog and the availability cache.
# Cancellation is per browser session, see search_session below.
@st.cache_resource
def get_search_service():
    return DomainSearchService(catalog=CityCatalog())


service = get_search_service()

if "last_result" not in st.session_state:
    st.session_state.last_result = None
if "search_session" not in st.session_state:
    st.session_state.search_session = SearchSession()

with st.sidebar:
    st.header("Settings")
    strategy = check_strategy()
    st.caption(f"Availability: **{strategy}**")
    if strategy == "heuristic":
        st.caption("_Simulated verdicts from city size and common keyword combinations, not a real lookup._")
    check_availability = st.toggle("Check availability", value=True, key="check_availability")
    if st.button("Clear results", use_container_width=True):
        st.session_state.last_result = None
        st.rerun()

request = render_search_form(service.catalog, preview=service.preview_count, anchor=service.anchor)

if request is not None:
    progress = st.progress(0.0, text="Checking domains…") if check_availability else None

    def _on_progress(done: int, total: int) -> None:
        if progress is not None:
            progress.progress(done / total, text=f"Checked {done:,} of {total:,} domains")

    with st.spinner("Generating domains…"):
        result = service.run_search(
            request,
            on_progress=_on_progress,
            token=st.session_state.search_session.begin(),
            check_availability=check_availability,
        )
    if progress is not None:
        progress.empty()
    log.info("Search produced %d domains (%d available)", result.domain_count, result.available_count)
    st.session_state.last_result = result
    st.session_state.last_result_checked = check_availability

result = st.session_state.last_result
if result is not None:
    if not result.candidates and not result.error:
        st.info("No domains matched. Try another state or widen the length range.")
    render_results(
        result,
        page_size(),
        show_availability=st.session_state.get("last_result_checked", True),
        quote_csv=csv_quoting(),
    )
