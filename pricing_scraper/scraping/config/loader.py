"""
Environment-driven settings loader for pricing scraping.

Every variable is optional; unparsable values fall back to the default and
numeric values are clamped to a usable floor.
"""

from __future__ import annotations

import os
from functools import lru_cache
from typing import Callable, TypeVar

from pricing_scraper.env import load_env_files
from pricing_scraper.scraping.config.models import DEFAULT_USER_AGENT, PricingScrapingSettings

_T = TypeVar("_T", int, float)

ENV_PREFIX = "PRICING_SCRAPE_"
_TRUE_VALUES = {"1", "true", "yes", "on"}


def _read_env(name: str) -> str | None:
    raw = os.getenv(f"{ENV_PREFIX}{name}")
    if raw is None or not raw.strip():
        return None
    return raw.strip()


def _env_flag(name: str, default: bool) -> bool:
    raw = _read_env(name)
    if raw is None:
        return default
    return raw.lower() in _TRUE_VALUES


def _env_number(name: str, default: _T, *, floor: _T, cast: Callable[[str], _T]) -> _T:
    raw = _read_env(name)
    if raw is None:
        return default
    try:
        value = cast(raw)
    except ValueError:
        return default
    return max(floor, value)


@lru_cache(maxsize=1)
def get_pricing_scraping_settings() -> PricingScrapingSettings:
    """
    Return cached pricing scraper settings from `PRICING_SCRAPE_*` variables.
    """

    load_env_files()
    return PricingScrapingSettings(
        user_agent=_read_env("USER_AGENT") or DEFAULT_USER_AGENT,
        timeout_seconds=_env_number("TIMEOUT_SECONDS", 15.0, floor=1.0, cast=float),
        probe_timeout_seconds=_env_number("PROBE_TIMEOUT_SECONDS", 5.0, floor=0.5, cast=float),
        max_redirects=_env_number("MAX_REDIRECTS", 5, floor=0, cast=int),
        probe_paths=_env_flag("PROBE_PATHS", True),
        max_features=_env_number("MAX_FEATURES", 5, floor=1, cast=int),
        max_text_length=_env_number("MAX_TEXT_LENGTH", 3000, floor=10, cast=int),
        max_domains=_env_number("MAX_DOMAINS", 100, floor=1, cast=int),
    )
