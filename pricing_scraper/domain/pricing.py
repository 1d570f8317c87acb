"""
pricing_scraper/domain/pricing.py

Domain models for pricing discovery results.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

UNKNOWN_PLAN = "Unknown Plan"
UNKNOWN_MODEL = "Unknown"
NO_PRICING_PLAN = "No pricing found"
ERROR_PLAN = "Error"
NOT_AVAILABLE = "N/A"


class DomainStatus(str, Enum):
    """
    Outcome classification for one scraped domain.
    """

    SUCCESS = "success"
    NO_PRICING = "no_pricing"
    ERROR = "error"


@dataclass(frozen=True)
class PlanRecord:
    """
    One detected pricing plan occurrence.
    """

    domain: str
    plan_name: str
    price: str
    pricing_model: str
    source_url: str
    scraped_at: datetime
    features: tuple[str, ...] = field(default_factory=tuple)

    @property
    def has_signal(self) -> bool:
        return bool(self.price) or self.plan_name != UNKNOWN_PLAN


@dataclass(frozen=True)
class DomainResult:
    """
    All plans found for one input domain.
    """

    domain: str
    url: str
    scraped_at: datetime
    plans: tuple[PlanRecord, ...]
    status: DomainStatus
    error_message: str | None = None


@dataclass(frozen=True)
class BatchSummary:
    """
    Status tally across one batch of domain results.
    """

    total: int
    success: int
    no_pricing: int
    error: int

    @classmethod
    def from_results(cls, results: Iterable[DomainResult]) -> "BatchSummary":
        counts = {status: 0 for status in DomainStatus}
        for result in results:
            counts[result.status] += 1
        return cls(
            total=sum(counts.values()),
            success=counts[DomainStatus.SUCCESS],
            no_pricing=counts[DomainStatus.NO_PRICING],
            error=counts[DomainStatus.ERROR],
        )
