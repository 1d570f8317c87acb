"""
pricing_scraper/domain package marker.
"""

from pricing_scraper.domain.pricing import (
    ERROR_PLAN,
    NO_PRICING_PLAN,
    NOT_AVAILABLE,
    UNKNOWN_MODEL,
    UNKNOWN_PLAN,
    BatchSummary,
    DomainResult,
    DomainStatus,
    PlanRecord,
)

__all__ = [
    "BatchSummary",
    "DomainResult",
    "DomainStatus",
    "ERROR_PLAN",
    "NO_PRICING_PLAN",
    "NOT_AVAILABLE",
    "PlanRecord",
    "UNKNOWN_MODEL",
    "UNKNOWN_PLAN",
]
