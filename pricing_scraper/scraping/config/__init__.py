"""
Config helpers for pricing scraping.
"""

from pricing_scraper.scraping.config.loader import get_pricing_scraping_settings
from pricing_scraper.scraping.config.models import DEFAULT_USER_AGENT, PricingScrapingSettings

__all__ = [
    "DEFAULT_USER_AGENT",
    "PricingScrapingSettings",
    "get_pricing_scraping_settings",
]
