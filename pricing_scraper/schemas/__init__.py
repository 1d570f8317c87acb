"""
pricing_scraper/schemas package marker.
"""

from pricing_scraper.schemas.pricing_scrape import (
    BatchSummaryResponse,
    DomainResultResponse,
    PlanRecordResponse,
    ScrapeRequest,
    ScrapeResponse,
)

__all__ = [
    "BatchSummaryResponse",
    "DomainResultResponse",
    "PlanRecordResponse",
    "ScrapeRequest",
    "ScrapeResponse",
]
