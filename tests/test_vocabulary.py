"""
tests/test_vocabulary.py

Table-driven checks for price patterns and keyword tables.
"""

from __future__ import annotations

import pytest

from pricing_scraper.scraping.parsing import detect_plan_name, detect_pricing_model, extract_price
from pricing_scraper.scraping.vocabulary import (
    CADENCE_KEYWORDS,
    PLAN_NAME_KEYWORDS,
    PRICE_PATTERNS,
    PRICING_KEYWORDS,
    PRICING_PATHS,
    iter_keywords,
)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("Only $29.99 per month", "$29.99"),
        ("Teams from $1,299 a year", "$1,299"),
        ("Plan ¥980", "¥980"),
        ("€1.299,00 pro Jahr", "€1.299,00"),
        ("29,99 € monatlich", "29,99 €"),
        ("Starts at 49 USD a month", "49 USD"),
        ("USD 15 per seat", "USD 15"),
        ("Just 10 dollars", "10 dollars"),
        ("20/month billed yearly", "20/month"),
        ("Try 30 days of our service", ""),
        ("No numbers here", ""),
    ],
)
def test_extract_price_uses_first_matching_pattern(text: str, expected: str) -> None:
    assert extract_price(text) == expected


def test_symbol_pattern_is_tried_before_code_pattern() -> None:
    assert extract_price("49 USD or $45 when billed yearly") == "$45"


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("Pro Plan $29.99 per month", "Pro"),
        ("Professional tools for growing teams", "Professional"),
        ("Our product catalog", "Pro"),
        ("Plan Básico mensual", "Básico"),
        ("Nothing relevant here", "Unknown Plan"),
    ],
)
def test_detect_plan_name_prefers_whole_words(text: str, expected: str) -> None:
    assert detect_plan_name(text) == expected


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("Pro Plan $29.99 per month", "Monthly"),
        ("$49/mo", "Monthly"),
        ("billed annually", "Yearly"),
        ("19 € monatlich", "Monthly"),
        ("One-time payment of $99", "One-time"),
        ("Contact sales", "Unknown"),
    ],
)
def test_detect_pricing_model_returns_cadence_label(text: str, expected: str) -> None:
    assert detect_pricing_model(text) == expected


def test_tables_are_lowercase_and_non_empty() -> None:
    for table in (PRICING_KEYWORDS, PLAN_NAME_KEYWORDS, *CADENCE_KEYWORDS.values()):
        keywords = list(iter_keywords(table))
        assert keywords
        assert all(keyword == keyword.lower() for keyword in keywords)


def test_iter_keywords_follows_language_then_keyword_order() -> None:
    keywords = list(iter_keywords(PLAN_NAME_KEYWORDS))

    assert keywords[:3] == ["basic", "pro", "premium"]
    assert keywords.index("free") < keywords.index("básico")


def test_pricing_paths_are_absolute_and_unique() -> None:
    assert all(path.startswith("/") for path in PRICING_PATHS)
    assert len(set(PRICING_PATHS)) == len(PRICING_PATHS)
    assert PRICING_PATHS[0] == "/pricing"


def test_price_patterns_are_ordered_symbol_first() -> None:
    assert PRICE_PATTERNS[0].search("$5") is not None
    assert PRICE_PATTERNS[0].search("5 USD") is None
