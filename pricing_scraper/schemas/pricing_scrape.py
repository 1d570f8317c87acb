"""
pricing_scraper/schemas/pricing_scrape.py

Request and response schemas for pricing scrape endpoints.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from pricing_scraper.domain.pricing import BatchSummary, DomainResult, DomainStatus, PlanRecord


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ScrapeRequest(BaseModel):
    """
    API request model for one batch of domains.
    """

    domains: list[str]


class PlanRecordResponse(_CamelModel):
    """
    API response model for one detected plan.
    """

    domain: str
    plan_name: str
    price: str
    pricing_model: str
    features: list[str] = Field(default_factory=list)
    source_url: str
    scraped_at: datetime

    @classmethod
    def from_domain(cls, record: PlanRecord) -> "PlanRecordResponse":
        return cls(
            domain=record.domain,
            plan_name=record.plan_name,
            price=record.price,
            pricing_model=record.pricing_model,
            features=list(record.features),
            source_url=record.source_url,
            scraped_at=record.scraped_at,
        )

    def to_domain(self) -> PlanRecord:
        return PlanRecord(
            domain=self.domain,
            plan_name=self.plan_name,
            price=self.price,
            pricing_model=self.pricing_model,
            features=tuple(self.features),
            source_url=self.source_url,
            scraped_at=self.scraped_at,
        )


class DomainResultResponse(_CamelModel):
    """
    API response model for all plans of one domain.
    """

    domain: str
    url: str
    scraped_at: datetime
    plans: list[PlanRecordResponse] = Field(..., min_length=1)
    status: DomainStatus
    error_message: str | None = None

    @classmethod
    def from_domain(cls, result: DomainResult) -> "DomainResultResponse":
        return cls(
            domain=result.domain,
            url=result.url,
            scraped_at=result.scraped_at,
            plans=[PlanRecordResponse.from_domain(plan) for plan in result.plans],
            status=result.status,
            error_message=result.error_message,
        )

    def to_domain(self) -> DomainResult:
        return DomainResult(
            domain=self.domain,
            url=self.url,
            scraped_at=self.scraped_at,
            plans=tuple(plan.to_domain() for plan in self.plans),
            status=self.status,
            error_message=self.error_message,
        )


class BatchSummaryResponse(_CamelModel):
    """
    API response model for batch status counts.
    """

    total: int = Field(..., ge=0)
    success: int = Field(..., ge=0)
    no_pricing: int = Field(..., ge=0)
    error: int = Field(..., ge=0)

    @classmethod
    def from_domain(cls, summary: BatchSummary) -> "BatchSummaryResponse":
        return cls(
            total=summary.total,
            success=summary.success,
            no_pricing=summary.no_pricing,
            error=summary.error,
        )


class ScrapeResponse(_CamelModel):
    """
    API response model for one scrape batch.
    """

    results: list[DomainResultResponse] = Field(default_factory=list)
    summary: BatchSummaryResponse | None = None

    @classmethod
    def from_domain(
        cls,
        results: tuple[DomainResult, ...],
        summary: BatchSummary,
    ) -> "ScrapeResponse":
        return cls(
            results=[DomainResultResponse.from_domain(result) for result in results],
            summary=BatchSummaryResponse.from_domain(summary),
        )
