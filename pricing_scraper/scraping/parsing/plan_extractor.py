"""
BeautifulSoup-based plan extraction over fetched pricing documents.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Sequence
from datetime import datetime, timezone
from functools import lru_cache
from urllib.parse import urlparse

from bs4 import BeautifulSoup

from pricing_scraper.domain.pricing import UNKNOWN_MODEL, UNKNOWN_PLAN, PlanRecord
from pricing_scraper.scraping.logging_utils import log_event
from pricing_scraper.scraping.parsing.strategies import (
    DEFAULT_MAX_CANDIDATE_LENGTH,
    Candidate,
    ExtractionStrategy,
    default_fallback,
    default_strategies,
)
from pricing_scraper.scraping.vocabulary import (
    FEATURE_BULLETS,
    PLAN_NAME_KEYWORDS,
    PRICE_PATTERNS,
    iter_cadence_terms,
    iter_keywords,
)

logger = logging.getLogger(__name__)

NON_CONTENT_TAGS: tuple[str, ...] = ("script", "style", "noscript", "template", "iframe", "svg")
DEFAULT_MAX_FEATURES = 5
MIN_FEATURE_LENGTH = 3
MAX_FEATURE_LENGTH = 100

_FEATURE_SPLIT = re.compile("[\n" + "".join(FEATURE_BULLETS) + "]")


@lru_cache(maxsize=1024)
def _term_pattern(term: str) -> re.Pattern[str]:
    left = r"(?<!\w)" if term[:1].isalnum() else ""
    right = r"(?!\w)" if term[-1:].isalnum() else ""
    return re.compile(left + re.escape(term) + right)


def _first_term(lowered: str, terms: Sequence[tuple[str, str]]) -> str | None:
    """
    Return the label of the first term found, whole-word matches first.
    """

    for label, term in terms:
        if _term_pattern(term).search(lowered):
            return label
    for label, term in terms:
        if term in lowered:
            return label
    return None


_PLAN_TERMS: tuple[tuple[str, str], ...] = tuple(
    (term, term) for term in dict.fromkeys(iter_keywords(PLAN_NAME_KEYWORDS))
)
_CADENCE_TERMS: tuple[tuple[str, str], ...] = tuple(iter_cadence_terms())


def extract_price(text: str) -> str:
    for pattern in PRICE_PATTERNS:
        match = pattern.search(text)
        if match is not None:
            return match.group(0).strip()
    return ""


def detect_plan_name(text: str) -> str:
    found = _first_term(text.lower(), _PLAN_TERMS)
    return found.title() if found else UNKNOWN_PLAN


def detect_pricing_model(text: str) -> str:
    return _first_term(text.lower(), _CADENCE_TERMS) or UNKNOWN_MODEL


def split_features(raw: str, *, max_features: int = DEFAULT_MAX_FEATURES) -> tuple[str, ...]:
    features: list[str] = []
    for part in _FEATURE_SPLIT.split(raw):
        feature = " ".join(part.split())
        if not MIN_FEATURE_LENGTH <= len(feature) <= MAX_FEATURE_LENGTH:
            continue
        if feature in features:
            continue
        features.append(feature)
        if len(features) >= max_features:
            break
    return tuple(features)


class PlanExtractor:
    """
    Runs the strategy cascade over one document and builds plan records.

    Candidates come from the first selection strategy that yields any; later
    selection strategies never run. The fallback strategy runs only when
    those candidates emit no records.
    """

    def __init__(
        self,
        *,
        max_features: int = DEFAULT_MAX_FEATURES,
        max_text_length: int = DEFAULT_MAX_CANDIDATE_LENGTH,
        strategies: Iterable[ExtractionStrategy] | None = None,
        fallback: ExtractionStrategy | None = None,
    ) -> None:
        self.max_features = max(1, max_features)
        self.strategies = (
            tuple(strategies)
            if strategies is not None
            else default_strategies(max_length=max_text_length)
        )
        self.fallback = fallback or default_fallback(max_length=max_text_length)

    def extract(
        self,
        soup: BeautifulSoup,
        source_url: str,
        *,
        scraped_at: datetime | None = None,
    ) -> tuple[PlanRecord, ...]:
        captured_at = scraped_at or datetime.now(timezone.utc)
        domain = (urlparse(source_url).hostname or "").lower()
        cleaned = self.strip_non_content(soup)

        strategy, candidates = self.select_candidates(cleaned)
        records = self.build_records(
            candidates,
            domain=domain,
            source_url=source_url,
            scraped_at=captured_at,
        )
        if not records:
            strategy = self.fallback
            candidates = strategy.candidates(cleaned)
            records = self.build_records(
                candidates,
                domain=domain,
                source_url=source_url,
                scraped_at=captured_at,
            )

        if records:
            log_event(
                logger,
                logging.DEBUG,
                "plans_extracted",
                source_url=source_url,
                strategy=strategy.name,
                candidates=len(candidates),
                records=len(records),
            )
        return records

    def select_candidates(
        self,
        soup: BeautifulSoup,
    ) -> tuple[ExtractionStrategy, tuple[Candidate, ...]]:
        """
        Return the first selection strategy with candidates, and those candidates.
        """

        for strategy in self.strategies:
            candidates = strategy.candidates(soup)
            if candidates:
                return strategy, candidates
        return self.fallback, ()

    def build_records(
        self,
        candidates: Iterable[Candidate],
        *,
        domain: str,
        source_url: str,
        scraped_at: datetime,
    ) -> tuple[PlanRecord, ...]:
        """
        Build records in candidate order, dropping signal-less and repeated ones.

        Nested containers often repeat a child's plan, so a record whose plan
        name, price and cadence were already emitted is skipped.
        """

        seen: set[tuple[str, str, str]] = set()
        records: list[PlanRecord] = []
        for candidate in candidates:
            record = self.build_record(
                candidate,
                domain=domain,
                source_url=source_url,
                scraped_at=scraped_at,
            )
            if record is None:
                continue
            key = (record.plan_name, record.price, record.pricing_model)
            if key in seen:
                continue
            seen.add(key)
            records.append(record)
        return tuple(records)

    def build_record(
        self,
        candidate: Candidate,
        *,
        domain: str,
        source_url: str,
        scraped_at: datetime,
    ) -> PlanRecord | None:
        record = PlanRecord(
            domain=domain,
            plan_name=detect_plan_name(candidate.text),
            price=extract_price(candidate.text),
            pricing_model=detect_pricing_model(candidate.text),
            features=split_features(candidate.raw, max_features=self.max_features),
            source_url=source_url,
            scraped_at=scraped_at,
        )
        return record if record.has_signal else None

    @staticmethod
    def strip_non_content(soup: BeautifulSoup) -> BeautifulSoup:
        """
        Return a copy of `soup` without script, style and other non-rendered tags.
        """

        cleaned = BeautifulSoup(str(soup), "html.parser")
        for element in cleaned.find_all(list(NON_CONTENT_TAGS)):
            element.decompose()
        return cleaned
