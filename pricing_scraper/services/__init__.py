"""
pricing_scraper/services package marker.
"""

from pricing_scraper.services.csv_exchange_service import (
    CSVDomainImportError,
    export_filename,
    export_results_csv,
    parse_domains_csv,
)
from pricing_scraper.services.pricing_scrape_service import (
    PricingScrapeService,
    get_pricing_scrape_service,
    validate_domains,
)

__all__ = [
    "CSVDomainImportError",
    "PricingScrapeService",
    "export_filename",
    "export_results_csv",
    "get_pricing_scrape_service",
    "parse_domains_csv",
    "validate_domains",
]
