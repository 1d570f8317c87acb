"""Streamlit frontend for the website pricing scraper.

Replaceable UI layer: all display logic lives here.
Pricing discovery is invoked through PricingScrapeService only.
"""

from __future__ import annotations

from typing import Optional

import pandas as pd
import streamlit as st

from pricing_scraper.domain.pricing import BatchSummary, DomainResult, DomainStatus
from pricing_scraper.scraping.errors import BatchValidationError, InternalScrapeError
from pricing_scraper.services.csv_exchange_service import (
    CSVDomainImportError,
    export_filename,
    export_results_csv,
    parse_domains_csv,
)

# ── Page config (must be first Streamlit call) ─────────────────────────────
st.set_page_config(
    page_title="Website Pricing Scraper",
    page_icon="💲",
    layout="wide",
    initial_sidebar_state="expanded",
)


@st.cache_resource(show_spinner=False)
def _load_service():
    from pricing_scraper.services.pricing_scrape_service import PricingScrapeService  # noqa: PLC0415

    return PricingScrapeService()


# ── Session state defaults ─────────────────────────────────────────────────
_STATE_DEFAULTS: dict = {
    "results": None,
    "summary": None,
}

for _key, _val in _STATE_DEFAULTS.items():
    if _key not in st.session_state:
        st.session_state[_key] = _val


def _scrape(domains: list[str]) -> None:
    st.session_state.results = None
    st.session_state.summary = None
    with st.spinner(f"Scraping {len(domains)} domain(s)…"):
        try:
            results, summary = _load_service().scrape(domains)
        except BatchValidationError as exc:
            st.sidebar.warning(str(exc))
            return
        except InternalScrapeError as exc:
            st.error(f"Scrape failed: {exc}")
            return
    st.session_state.results = results
    st.session_state.summary = summary


# ── Sidebar ────────────────────────────────────────────────────────────────
with st.sidebar:
    st.title("Pricing Scraper")
    st.caption("Extract pricing plans from websites")
    st.divider()

    single_domain = st.text_input("Domain", placeholder="example.com or https://example.com")
    run_single = st.button("Scrape Domain", type="primary", use_container_width=True)

    st.divider()
    uploaded_file = st.file_uploader(
        "Upload domains (CSV)",
        type=["csv", "txt"],
        help="First column of each line is treated as a domain.",
    )
    run_batch = st.button("Scrape CSV", use_container_width=True, disabled=uploaded_file is None)

    if st.session_state.results:
        if st.button("Clear", use_container_width=True):
            st.session_state.results = None
            st.session_state.summary = None
            st.rerun()


if run_single:
    if single_domain.strip():
        _scrape([single_domain.strip()])
    else:
        st.sidebar.warning("Please enter a domain.")

if run_batch and uploaded_file is not None:
    try:
        batch_domains = parse_domains_csv(uploaded_file.getvalue())
    except CSVDomainImportError as exc:
        st.sidebar.error(str(exc))
        batch_domains = []
    if batch_domains:
        _scrape(batch_domains)
    else:
        st.sidebar.warning("No valid domains found in CSV file.")


# ── Helper renderers ───────────────────────────────────────────────────────
def _render_summary(summary: BatchSummary) -> None:
    cols = st.columns(4)
    cols[0].metric("Domains", summary.total)
    cols[1].metric("With pricing", summary.success)
    cols[2].metric("No pricing", summary.no_pricing)
    cols[3].metric("Errors", summary.error)


def _plans_frame(result: DomainResult) -> pd.DataFrame:
    return pd.DataFrame(
        [
            {
                "Plan": plan.plan_name,
                "Price": plan.price,
                "Pricing model": plan.pricing_model,
                "Features": "; ".join(plan.features),
                "Source": plan.source_url,
            }
            for plan in result.plans
        ]
    )


def _render_domain(result: DomainResult) -> None:
    if result.status == DomainStatus.ERROR:
        st.error(result.error_message or "Unknown error")
    elif result.status == DomainStatus.NO_PRICING:
        st.warning("No pricing information detected.")
    else:
        st.success(f"{len(result.plans)} plan(s) found")
    st.caption(f"{result.url} · scraped {result.scraped_at:%Y-%m-%d %H:%M:%S} UTC")
    st.dataframe(_plans_frame(result), use_container_width=True, hide_index=True)


# ── Main panel ─────────────────────────────────────────────────────────────
results: Optional[tuple[DomainResult, ...]] = st.session_state.results
if not results:
    st.info("Enter a domain or upload a CSV in the sidebar to start.")
else:
    _render_summary(st.session_state.summary)
    st.download_button(
        "Download CSV",
        data=export_results_csv(results),
        file_name=export_filename(),
        mime="text/csv",
    )

    tabs = st.tabs([result.domain or result.url for result in results])
    for tab, result in zip(tabs, results):
        with tab:
            _render_domain(result)
