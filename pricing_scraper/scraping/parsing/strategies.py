"""
Candidate-selection strategies for the plan extraction cascade.

Each strategy is a pure function of a cleaned document and returns an
immutable sequence of candidates. The extractor evaluates them in order.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass

from bs4 import BeautifulSoup, Tag

from pricing_scraper.scraping.vocabulary import ALL_PRICING_KEYWORDS, PRICE_PATTERNS

MIN_CANDIDATE_LENGTH = 10
DEFAULT_MAX_CANDIDATE_LENGTH = 3000

STRUCTURAL_TERMS: tuple[str, ...] = (
    "pricing",
    "plan",
    "price",
    "subscription",
    "billing",
    "premium",
    "enterprise",
    "tier",
)
# Short tier names only match as whole class tokens; substrings like "pro" hit "product".
STRUCTURAL_CLASS_TOKENS: tuple[str, ...] = ("pro", "basic", "starter", "business")
STRUCTURAL_ATTRIBUTES: tuple[str, ...] = ("class", "id", "data-testid", "data-test", "data-qa")
CONTAINER_TAGS: tuple[str, ...] = ("section", "div", "table", "tr", "td", "ul", "li")
LANDMARK_TAGS: tuple[str, ...] = ("article", "main", "aside", "header", "footer")

_WHITESPACE = re.compile(r"\s+")


def _build_selector_catalog() -> tuple[str, ...]:
    selectors = [
        f'[{attribute}*="{term}" i]'
        for attribute in STRUCTURAL_ATTRIBUTES
        for term in STRUCTURAL_TERMS
    ]
    selectors.extend(f'[class~="{token}" i]' for token in STRUCTURAL_CLASS_TOKENS)
    selectors.extend(
        f'{tag}[{attribute}*="{term}" i]'
        for tag in CONTAINER_TAGS
        for attribute in ("class", "id")
        for term in STRUCTURAL_TERMS
    )
    return tuple(selectors)


STRUCTURAL_SELECTORS: tuple[str, ...] = _build_selector_catalog()


def collapse_whitespace(value: str) -> str:
    return _WHITESPACE.sub(" ", value).strip()


def contains_pricing_keyword(lowered: str) -> bool:
    return any(keyword in lowered for keyword in ALL_PRICING_KEYWORDS)


def contains_price(text: str) -> bool:
    return any(pattern.search(text) for pattern in PRICE_PATTERNS)


@dataclass(frozen=True)
class Candidate:
    """
    One block of text considered for plan extraction.

    `text` is whitespace-collapsed for matching; `raw` keeps line breaks so
    feature lists can be split out of it.
    """

    text: str
    raw: str


class ExtractionStrategy(ABC):
    """
    One tier of the extraction cascade.
    """

    name: str = "strategy"

    def __init__(
        self,
        *,
        min_length: int = MIN_CANDIDATE_LENGTH,
        max_length: int = DEFAULT_MAX_CANDIDATE_LENGTH,
    ) -> None:
        self.min_length = min_length
        self.max_length = max_length

    @abstractmethod
    def candidates(self, soup: BeautifulSoup) -> tuple[Candidate, ...]:
        """
        Return gated, de-duplicated candidates in document order.
        """

    def _passes_length_gate(self, text: str) -> bool:
        return self.min_length <= len(text) <= self.max_length

    def _from_elements(self, elements: list[Tag]) -> tuple[Candidate, ...]:
        seen: set[str] = set()
        found: list[Candidate] = []
        for element in elements:
            raw = element.get_text("\n", strip=True)
            text = collapse_whitespace(raw)
            if text in seen or not self._passes_length_gate(text):
                continue
            seen.add(text)
            found.append(Candidate(text=text, raw=raw))
        return tuple(found)


class StructuralStrategy(ExtractionStrategy):
    """
    Tier 1: elements whose class, id or test attributes carry pricing vocabulary.
    """

    name = "structural"

    def __init__(
        self,
        *,
        selectors: tuple[str, ...] = STRUCTURAL_SELECTORS,
        landmark_tags: tuple[str, ...] = LANDMARK_TAGS,
        min_length: int = MIN_CANDIDATE_LENGTH,
        max_length: int = DEFAULT_MAX_CANDIDATE_LENGTH,
    ) -> None:
        super().__init__(min_length=min_length, max_length=max_length)
        self.selectors = selectors
        self.landmark_tags = landmark_tags

    def candidates(self, soup: BeautifulSoup) -> tuple[Candidate, ...]:
        matched: set[int] = set()
        for selector in self.selectors:
            matched.update(id(element) for element in soup.select(selector))

        elements = [element for element in soup.find_all(True) if id(element) in matched]
        if not elements:
            elements = soup.find_all(list(self.landmark_tags))
        return self._from_elements(elements)


class KeywordScanStrategy(ExtractionStrategy):
    """
    Tier 2: any element whose text mentions pricing vocabulary or a price.
    """

    name = "keyword_scan"

    def candidates(self, soup: BeautifulSoup) -> tuple[Candidate, ...]:
        elements: list[Tag] = []
        for element in soup.find_all(True):
            text = collapse_whitespace(element.get_text(" ", strip=True))
            if contains_pricing_keyword(text.lower()) or contains_price(text):
                elements.append(element)
        return self._from_elements(elements)


class LineScanStrategy(ExtractionStrategy):
    """
    Tier 3: rendered text lines holding both a price and pricing vocabulary.
    """

    name = "line_scan"

    def candidates(self, soup: BeautifulSoup) -> tuple[Candidate, ...]:
        seen: set[str] = set()
        found: list[Candidate] = []
        for line in soup.get_text().splitlines():
            text = collapse_whitespace(line)
            if text in seen or not self._passes_length_gate(text):
                continue
            if not (contains_price(text) and contains_pricing_keyword(text.lower())):
                continue
            seen.add(text)
            found.append(Candidate(text=text, raw=text))
        return tuple(found)


def default_strategies(
    *,
    max_length: int = DEFAULT_MAX_CANDIDATE_LENGTH,
) -> tuple[ExtractionStrategy, ...]:
    """
    Build the candidate-selection tiers: structural, then keyword scan.

    The first tier with any candidates supplies them; later tiers never run.
    """

    return (
        StructuralStrategy(max_length=max_length),
        KeywordScanStrategy(max_length=max_length),
    )


def default_fallback(*, max_length: int = DEFAULT_MAX_CANDIDATE_LENGTH) -> ExtractionStrategy:
    """
    Build the line scan used when the selected tier emits no records.
    """

    return LineScanStrategy(max_length=max_length)
