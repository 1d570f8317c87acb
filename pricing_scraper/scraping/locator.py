"""
Pricing-page discovery for one site.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from urllib.parse import unquote, urldefrag, urljoin, urlparse

from bs4 import BeautifulSoup

from pricing_scraper.scraping.errors import FetchError
from pricing_scraper.scraping.fetcher import FetchedPage, PageFetcher
from pricing_scraper.scraping.logging_utils import log_event
from pricing_scraper.scraping.vocabulary import PRICING_PATHS, PRICING_URL_HINTS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PricingPageDiscovery:
    """
    Candidate URLs for one site plus the outcome of its root fetch.

    Exactly one of `root` and `root_error` is set.
    """

    base_url: str
    candidates: tuple[str, ...]
    root: FetchedPage | None = None
    root_error: FetchError | None = None


class PricingPageLocator:
    """
    Finds candidate pricing-page URLs from root-page links and path probes.
    """

    def __init__(
        self,
        *,
        fetcher: PageFetcher,
        url_hints: tuple[str, ...] = PRICING_URL_HINTS,
        paths: tuple[str, ...] = PRICING_PATHS,
        probe_paths: bool = True,
    ) -> None:
        self.fetcher = fetcher
        self.url_hints = url_hints
        self.paths = paths
        self.probe_paths = probe_paths

    def locate(self, base_url: str) -> tuple[str, ...]:
        """
        Return deduplicated candidate URLs, link-derived first.

        An empty result means either the root page could not be fetched or
        nothing pricing-like was found; callers fall back to `base_url`.
        """

        return self.discover(base_url).candidates

    def discover(self, base_url: str) -> PricingPageDiscovery:
        """
        Fetch the root page once and derive candidates from it.

        The fetched root page (or its failure) is returned so callers do not
        request `base_url` a second time.
        """

        try:
            root = self.fetcher.fetch(base_url)
        except FetchError as exc:
            log_event(
                logger,
                logging.WARNING,
                "pricing_root_fetch_failed",
                base_url=base_url,
                status_code=exc.status_code,
                error=str(exc),
            )
            return PricingPageDiscovery(base_url=base_url, candidates=(), root_error=exc)

        found: dict[str, None] = {}
        for url in self.links_from(root.soup, base_url=base_url):
            found.setdefault(url, None)
        log_event(
            logger,
            logging.INFO,
            "pricing_links_found",
            base_url=base_url,
            link_count=len(found),
        )

        if self.probe_paths:
            for url in self.probe(base_url):
                found.setdefault(url, None)
        return PricingPageDiscovery(base_url=base_url, candidates=tuple(found), root=root)

    def links_from(self, soup: BeautifulSoup, *, base_url: str) -> list[str]:
        """
        Resolve anchors whose href carries pricing vocabulary.
        """

        urls: list[str] = []
        for anchor in soup.find_all("a", href=True):
            href = str(anchor["href"]).strip()
            if not href or not self._is_pricing_href(href):
                continue
            resolved, _fragment = urldefrag(urljoin(base_url, href))
            if urlparse(resolved).scheme not in {"http", "https"}:
                continue
            if resolved not in urls:
                urls.append(resolved)
        return urls

    def probe(self, base_url: str) -> list[str]:
        """
        HEAD each conventional pricing path and keep the ones that exist.
        """

        root = base_url.rstrip("/")
        existing: list[str] = []
        for path in self.paths:
            url = f"{root}{path}"
            try:
                if self.fetcher.probe(url):
                    existing.append(url)
            except FetchError as exc:
                log_event(
                    logger,
                    logging.DEBUG,
                    "pricing_path_probe_failed",
                    url=url,
                    error=str(exc),
                )
        return existing

    def _is_pricing_href(self, href: str) -> bool:
        lowered = unquote(href).lower()
        return any(hint in lowered for hint in self.url_hints)
