"""
Pricing scrape configuration models.
"""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/124.0.0.0 Safari/537.36"
)


@dataclass(frozen=True)
class PricingScrapingSettings:
    """
    Runtime settings for pricing discovery and extraction.
    """

    user_agent: str = DEFAULT_USER_AGENT
    timeout_seconds: float = 15.0
    probe_timeout_seconds: float = 5.0
    max_redirects: int = 5
    probe_paths: bool = True
    max_features: int = 5
    max_text_length: int = 3000
    max_domains: int = 100
