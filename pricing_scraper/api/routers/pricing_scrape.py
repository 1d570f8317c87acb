"""
pricing_scraper/api/routers/pricing_scrape.py

Pricing discovery endpoints.
"""

from __future__ import annotations

from collections.abc import Sequence

from fastapi import APIRouter, Depends, HTTPException, Response, UploadFile, status

from pricing_scraper.api.dependencies import get_csv_upload
from pricing_scraper.schemas.pricing_scrape import ScrapeRequest, ScrapeResponse
from pricing_scraper.scraping.errors import BatchValidationError, InternalScrapeError
from pricing_scraper.services.csv_exchange_service import (
    CSVDomainImportError,
    export_filename,
    export_results_csv,
    parse_domains_csv,
)
from pricing_scraper.services.pricing_scrape_service import (
    PricingScrapeService,
    get_pricing_scrape_service,
)

router = APIRouter(prefix="/api", tags=["pricing-scrape"])


@router.post("/scrape", response_model=ScrapeResponse)
def scrape_domains(
    payload: ScrapeRequest,
    scrape_service: PricingScrapeService = Depends(get_pricing_scrape_service),
) -> ScrapeResponse:
    """
    Discover and extract pricing plans for every submitted domain.
    """

    return _run_scrape(scrape_service, payload.domains)


@router.post("/scrape/upload-csv", response_model=ScrapeResponse)
def scrape_uploaded_csv(
    file: UploadFile = Depends(get_csv_upload),
    scrape_service: PricingScrapeService = Depends(get_pricing_scrape_service),
) -> ScrapeResponse:
    """
    Scrape the domains listed in the first column of an uploaded CSV.
    """

    try:
        domains = parse_domains_csv(file.file.read())
    except CSVDomainImportError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exc),
        ) from exc
    finally:
        file.file.close()

    if not domains:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No valid domains found in CSV file",
        )
    return _run_scrape(scrape_service, domains)


@router.post("/export-csv")
def export_csv(payload: ScrapeResponse) -> Response:
    """
    Render scrape results as a downloadable CSV file.
    """

    content = export_results_csv(result.to_domain() for result in payload.results)
    return Response(
        content=content,
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{export_filename()}"'},
    )


def _run_scrape(scrape_service: PricingScrapeService, domains: Sequence[str]) -> ScrapeResponse:
    try:
        results, summary = scrape_service.scrape(domains)
    except BatchValidationError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exc),
        ) from exc
    except InternalScrapeError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        ) from exc

    return ScrapeResponse.from_domain(results, summary)
