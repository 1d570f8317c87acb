"""
Parsing layer exports.
"""

from pricing_scraper.scraping.parsing.plan_extractor import (
    PlanExtractor,
    detect_plan_name,
    detect_pricing_model,
    extract_price,
    split_features,
)
from pricing_scraper.scraping.parsing.strategies import (
    Candidate,
    ExtractionStrategy,
    KeywordScanStrategy,
    LineScanStrategy,
    StructuralStrategy,
    default_fallback,
    default_strategies,
)

__all__ = [
    "Candidate",
    "ExtractionStrategy",
    "KeywordScanStrategy",
    "LineScanStrategy",
    "PlanExtractor",
    "StructuralStrategy",
    "default_fallback",
    "default_strategies",
    "detect_plan_name",
    "detect_pricing_model",
    "extract_price",
    "split_features",
]
