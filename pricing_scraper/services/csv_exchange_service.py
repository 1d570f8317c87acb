"""
pricing_scraper/services/csv_exchange_service.py

CSV import of domain lists and CSV export of scrape results.
"""

from __future__ import annotations

import csv
import io
from collections.abc import Iterable
from datetime import date

from pricing_scraper.domain.pricing import DomainResult
from pricing_scraper.scraping.errors import BatchValidationError

EXPORT_HEADERS: tuple[str, ...] = (
    "Domain",
    "Plan Name",
    "Price",
    "Pricing Model",
    "Features",
    "URL",
    "Scraped At",
)
FEATURE_SEPARATOR = "; "
_HEADER_CELLS = {"domain", "domains", "url", "urls", "website", "websites"}


class CSVDomainImportError(BatchValidationError):
    """
    Raised when an uploaded domain CSV cannot be read.
    """


def parse_domains_csv(content: bytes | str) -> list[str]:
    """
    Read the first column of every non-blank line as a domain.

    A leading header row such as `domain` or `url` is skipped.
    """

    try:
        text = content.decode("utf-8-sig") if isinstance(content, bytes) else content
    except UnicodeDecodeError as exc:
        raise CSVDomainImportError("CSV must be UTF-8 encoded.") from exc

    domains: list[str] = []
    try:
        for row_number, row in enumerate(csv.reader(io.StringIO(text)), start=1):
            if not row:
                continue
            first = row[0].strip()
            if not first:
                continue
            if row_number == 1 and first.lower() in _HEADER_CELLS:
                continue
            domains.append(first)
    except csv.Error as exc:
        raise CSVDomainImportError(f"Invalid CSV format: {exc}") from exc
    return domains


def export_results_csv(results: Iterable[DomainResult]) -> str:
    """
    Render one CSV row per plan record, quoting fields that need it.
    """

    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_MINIMAL, lineterminator="\n")
    writer.writerow(EXPORT_HEADERS)
    for result in results:
        for plan in result.plans:
            writer.writerow(
                (
                    result.domain,
                    plan.plan_name,
                    plan.price,
                    plan.pricing_model,
                    FEATURE_SEPARATOR.join(plan.features),
                    plan.source_url,
                    plan.scraped_at.isoformat(),
                )
            )
    return buffer.getvalue()


def export_filename(day: date | None = None) -> str:
    return f"pricing-data-{(day or date.today()).isoformat()}.csv"
