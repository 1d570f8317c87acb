"""
Pricing discovery engine: locate, fetch, extract and classify per domain.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from datetime import datetime, timezone
from urllib.parse import urlparse

import requests

from pricing_scraper.domain.pricing import (
    ERROR_PLAN,
    NO_PRICING_PLAN,
    NOT_AVAILABLE,
    UNKNOWN_MODEL,
    BatchSummary,
    DomainResult,
    DomainStatus,
    PlanRecord,
)
from pricing_scraper.scraping.config.models import PricingScrapingSettings
from pricing_scraper.scraping.errors import DomainError, FetchError
from pricing_scraper.scraping.fetcher import FetchedPage, PageFetcher
from pricing_scraper.scraping.locator import PricingPageLocator
from pricing_scraper.scraping.logging_utils import log_event
from pricing_scraper.scraping.parsing import PlanExtractor

logger = logging.getLogger(__name__)

_HOST_LABEL = re.compile(r"^(?!-)[a-z0-9-]{1,63}(?<!-)$")


def normalize_domain(raw: str) -> tuple[str, str]:
    """
    Turn a bare hostname or URL into `(base_url, hostname)`.

    Raises DomainError when no usable hostname can be derived.
    """

    candidate = (raw or "").strip()
    if not candidate:
        raise DomainError("Domain is empty.")
    if any(character.isspace() for character in candidate):
        raise DomainError(f"Domain '{candidate}' contains whitespace.")
    if "://" not in candidate:
        candidate = f"https://{candidate}"

    parsed = urlparse(candidate)
    if parsed.scheme.lower() not in {"http", "https"}:
        raise DomainError(f"Unsupported URL scheme '{parsed.scheme}' for domain '{raw}'.")

    try:
        hostname = (parsed.hostname or "").lower()
    except ValueError as exc:
        raise DomainError(f"Invalid domain '{raw}': {exc}") from exc
    if not _is_valid_hostname(hostname):
        raise DomainError(f"Invalid domain '{raw}'.")

    base_url = candidate.rstrip("/") if parsed.path in {"", "/"} else candidate
    return base_url, hostname


def _is_valid_hostname(hostname: str) -> bool:
    if not hostname or len(hostname) > 253:
        return False
    try:
        ascii_host = hostname.encode("idna").decode("ascii")
    except UnicodeError:
        return False
    labels = ascii_host.rstrip(".").split(".")
    if len(labels) < 2 and ascii_host != "localhost":
        return False
    return all(_HOST_LABEL.match(label) for label in labels)


class PricingScrapingEngine:
    """
    Orchestrates pricing discovery across domains, strictly sequentially.
    """

    def __init__(
        self,
        *,
        settings: PricingScrapingSettings,
        session: requests.Session | None = None,
        fetcher: PageFetcher | None = None,
        locator: PricingPageLocator | None = None,
        extractor: PlanExtractor | None = None,
    ) -> None:
        self._settings = settings
        self._fetcher = fetcher or PageFetcher(settings=settings, session=session)
        self._locator = locator or PricingPageLocator(
            fetcher=self._fetcher,
            probe_paths=settings.probe_paths,
        )
        self._extractor = extractor or PlanExtractor(
            max_features=settings.max_features,
            max_text_length=settings.max_text_length,
        )

    def process_batch(
        self,
        domains: Sequence[str],
    ) -> tuple[tuple[DomainResult, ...], BatchSummary]:
        results = tuple(self.process(domain) for domain in domains)
        summary = BatchSummary.from_results(results)
        log_event(
            logger,
            logging.INFO,
            "batch_scrape_completed",
            total=summary.total,
            success=summary.success,
            no_pricing=summary.no_pricing,
            error=summary.error,
        )
        return results, summary

    def process(self, domain: str) -> DomainResult:
        """
        Scrape one domain; failures are captured into an error result.

        The error result carries the normalised hostname and base URL when
        normalisation succeeded, otherwise the stripped raw input.
        """

        started_at = datetime.now(timezone.utc)
        base_url, hostname = domain.strip(), domain.strip().lower()
        try:
            base_url, hostname = normalize_domain(domain)
            return self._process(base_url, hostname, started_at=started_at)
        except Exception as exc:
            message = str(exc) or exc.__class__.__name__
            log_event(
                logger,
                logging.ERROR,
                "domain_scrape_failed",
                domain=hostname,
                error=message,
            )
            return DomainResult(
                domain=hostname,
                url=base_url,
                scraped_at=started_at,
                plans=(
                    self._sentinel(
                        domain=hostname,
                        plan_name=ERROR_PLAN,
                        feature=f"Error: {message}",
                        source_url=base_url,
                        scraped_at=started_at,
                    ),
                ),
                status=DomainStatus.ERROR,
                error_message=message,
            )

    def _process(self, base_url: str, hostname: str, *, started_at: datetime) -> DomainResult:
        discovery = self._locator.discover(base_url)
        if discovery.root is None and not discovery.candidates:
            raise DomainError(f"Unable to reach {base_url}: {discovery.root_error}")

        candidate_urls = discovery.candidates or (base_url,)
        fetched: dict[str, FetchedPage] = {}
        if discovery.root is not None:
            fetched[base_url] = discovery.root

        plans: list[PlanRecord] = []
        fetched_pages = 0
        last_error: Exception | None = None
        for url in candidate_urls:
            try:
                page = fetched.get(url) or self._fetcher.fetch(url)
                fetched_pages += 1
                records = self._extractor.extract(page.soup, url, scraped_at=page.fetched_at)
                plans.extend(records)
                log_event(
                    logger,
                    logging.INFO,
                    "candidate_page_scraped",
                    domain=hostname,
                    url=url,
                    records=len(records),
                )
            except Exception as exc:
                last_error = exc
                log_event(
                    logger,
                    logging.WARNING,
                    "candidate_page_failed",
                    domain=hostname,
                    url=url,
                    status_code=exc.status_code if isinstance(exc, FetchError) else None,
                    error=str(exc),
                )

        if fetched_pages == 0 and discovery.root is None:
            raise DomainError(f"Unable to reach {base_url}: {last_error}")

        if plans:
            status = DomainStatus.SUCCESS
        else:
            status = DomainStatus.NO_PRICING
            plans.append(
                self._sentinel(
                    domain=hostname,
                    plan_name=NO_PRICING_PLAN,
                    feature="No pricing information detected",
                    source_url=base_url,
                    scraped_at=started_at,
                )
            )

        log_event(
            logger,
            logging.INFO,
            "domain_scrape_completed",
            domain=hostname,
            candidate_urls=len(candidate_urls),
            fetched_pages=fetched_pages,
            plans=len(plans),
            status=status.value,
        )
        return DomainResult(
            domain=hostname,
            url=base_url,
            scraped_at=started_at,
            plans=tuple(plans),
            status=status,
        )

    @staticmethod
    def _sentinel(
        *,
        domain: str,
        plan_name: str,
        feature: str,
        source_url: str,
        scraped_at: datetime,
    ) -> PlanRecord:
        return PlanRecord(
            domain=domain,
            plan_name=plan_name,
            price=NOT_AVAILABLE,
            pricing_model=UNKNOWN_MODEL,
            features=(feature,),
            source_url=source_url,
            scraped_at=scraped_at,
        )
