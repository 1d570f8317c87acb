"""
Shared fakes for pricing scraper tests.

No test touches the network: FakeSession serves canned documents keyed by
exact URL and raises ConnectionError for anything else.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import pytest
import requests

from pricing_scraper.scraping.config.models import PricingScrapingSettings

PRICING_CARD_HTML = (
    '<html><body><div class="pricing-card">Pro Plan $29.99 per month</div></body></html>'
)
PLAIN_HTML = "<html><body><p>Welcome to our little corner of the web</p></body></html>"


@dataclass
class FakeResponse:
    status_code: int
    text: str = ""
    url: str = ""


@dataclass
class FakeSession:
    pages: dict[str, tuple[int, str]] = field(default_factory=dict)
    heads: dict[str, int] = field(default_factory=dict)
    max_redirects: int = 30
    get_calls: list[str] = field(default_factory=list)
    head_calls: list[str] = field(default_factory=list)
    sent_headers: list[dict[str, str]] = field(default_factory=list)

    def get(self, url: str, **kwargs) -> FakeResponse:
        self.get_calls.append(url)
        self.sent_headers.append(dict(kwargs.get("headers") or {}))
        if url not in self.pages:
            raise requests.ConnectionError(f"Name resolution failed for {url}")
        status_code, text = self.pages[url]
        return FakeResponse(status_code=status_code, text=text, url=url)

    def head(self, url: str, **kwargs) -> FakeResponse:
        self.head_calls.append(url)
        if url not in self.heads:
            raise requests.ConnectionError(f"Name resolution failed for {url}")
        return FakeResponse(status_code=self.heads[url], url=url)

    def close(self) -> None:
        return None


@pytest.fixture()
def settings() -> PricingScrapingSettings:
    return PricingScrapingSettings(probe_paths=False)


@pytest.fixture()
def site_session() -> FakeSession:
    """Two reachable sites: one with a pricing page, one without pricing."""
    return FakeSession(
        pages={
            "https://example.com": (200, '<a href="/pricing">Pricing</a>'),
            "https://example.com/pricing": (200, PRICING_CARD_HTML),
            "https://plain.example": (200, PLAIN_HTML),
        }
    )
