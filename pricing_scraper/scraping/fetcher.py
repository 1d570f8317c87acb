"""
HTTP fetch layer for pricing discovery.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone

import requests
from bs4 import BeautifulSoup

from pricing_scraper.scraping.config.models import PricingScrapingSettings
from pricing_scraper.scraping.errors import FetchError

BROWSER_ACCEPT = "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8"
BROWSER_ACCEPT_LANGUAGE = "en-US,en;q=0.9"


@dataclass(frozen=True)
class FetchedPage:
    """
    One fetched and parsed document.
    """

    url: str
    final_url: str
    status_code: int
    soup: BeautifulSoup
    fetched_at: datetime


class PageFetcher:
    """
    Issues browser-like GET and HEAD requests with bounded timeouts.

    There is no retry policy: any failure is final for the URL.
    """

    def __init__(
        self,
        *,
        settings: PricingScrapingSettings,
        session: requests.Session | None = None,
    ) -> None:
        self.settings = settings
        self.session = session or requests.Session()
        self.session.max_redirects = settings.max_redirects
        self.request_headers = {
            "User-Agent": settings.user_agent,
            "Accept": BROWSER_ACCEPT,
            "Accept-Language": BROWSER_ACCEPT_LANGUAGE,
        }

    def fetch(self, url: str) -> FetchedPage:
        """
        GET `url` and parse it; any status below 400 is fetchable.
        """

        try:
            response = self.session.get(
                url,
                headers=self.request_headers,
                timeout=self.settings.timeout_seconds,
                allow_redirects=True,
            )
        except requests.RequestException as exc:
            raise FetchError(f"Failed to fetch {url}: {exc}", url=url) from exc

        if response.status_code >= 400:
            raise FetchError(
                f"Failed to fetch {url}: status={response.status_code}",
                url=url,
                status_code=response.status_code,
            )

        return FetchedPage(
            url=url,
            final_url=str(response.url or url),
            status_code=response.status_code,
            soup=BeautifulSoup(response.text, "html.parser"),
            fetched_at=datetime.now(timezone.utc),
        )

    def probe(self, url: str) -> bool:
        """
        HEAD `url` and report whether it answered with a 2xx status.
        """

        try:
            response = self.session.head(
                url,
                headers=self.request_headers,
                timeout=self.settings.probe_timeout_seconds,
                allow_redirects=True,
            )
        except requests.RequestException as exc:
            raise FetchError(f"Probe failed for {url}: {exc}", url=url) from exc
        return 200 <= response.status_code < 300
