"""
pricing_scraper/services/pricing_scrape_service.py

Service orchestration for batch pricing discovery requests.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from functools import lru_cache

import requests

from pricing_scraper.domain.pricing import BatchSummary, DomainResult
from pricing_scraper.scraping.config import PricingScrapingSettings, get_pricing_scraping_settings
from pricing_scraper.scraping.engine import PricingScrapingEngine
from pricing_scraper.scraping.errors import BatchValidationError, InternalScrapeError

logger = logging.getLogger(__name__)

EMPTY_BATCH_MESSAGE = "Please provide a valid array of domains"


def validate_domains(domains: object, *, max_domains: int) -> list[str]:
    """
    Return the stripped domains in submission order or raise BatchValidationError.

    Blank entries are kept so each one still gets an error result; only a
    batch with no usable entry at all is rejected.
    """

    if not isinstance(domains, (list, tuple)):
        raise BatchValidationError(EMPTY_BATCH_MESSAGE)

    cleaned: list[str] = []
    for item in domains:
        if not isinstance(item, str):
            raise BatchValidationError("Every domain must be a string.")
        cleaned.append(item.strip())

    if not any(cleaned):
        raise BatchValidationError(EMPTY_BATCH_MESSAGE)
    if len(cleaned) > max_domains:
        raise BatchValidationError(
            f"Too many domains: {len(cleaned)} submitted, at most {max_domains} allowed."
        )
    return cleaned


class PricingScrapeService:
    """
    Validates a domain batch and runs the pricing engine over it.
    """

    def __init__(
        self,
        *,
        settings: PricingScrapingSettings | None = None,
        session: requests.Session | None = None,
        engine: PricingScrapingEngine | None = None,
    ) -> None:
        self._settings = settings or get_pricing_scraping_settings()
        self._session = session
        self._engine = engine

    def scrape(
        self,
        domains: Sequence[str],
    ) -> tuple[tuple[DomainResult, ...], BatchSummary]:
        """
        Scrape every submitted domain, preserving input order.

        Raises BatchValidationError for malformed batches and
        InternalScrapeError when the batch loop fails unexpectedly.
        """

        cleaned = validate_domains(domains, max_domains=self._settings.max_domains)
        if self._engine is not None:
            return self._run(self._engine, cleaned)
        if self._session is not None:
            engine = PricingScrapingEngine(settings=self._settings, session=self._session)
            return self._run(engine, cleaned)
        with requests.Session() as session:
            engine = PricingScrapingEngine(settings=self._settings, session=session)
            return self._run(engine, cleaned)

    @staticmethod
    def _run(
        engine: PricingScrapingEngine,
        domains: list[str],
    ) -> tuple[tuple[DomainResult, ...], BatchSummary]:
        try:
            return engine.process_batch(domains)
        except Exception as exc:
            logger.exception("Pricing batch failed domains=%d", len(domains))
            raise InternalScrapeError(str(exc)) from exc


@lru_cache(maxsize=1)
def get_pricing_scrape_service() -> PricingScrapeService:
    """
    Build and cache the pricing scrape service.
    """

    return PricingScrapeService()
