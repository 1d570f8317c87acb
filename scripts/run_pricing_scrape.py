"""
Run pricing discovery from CLI.
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path

from pricing_scraper.schemas.pricing_scrape import ScrapeResponse
from pricing_scraper.scraping.errors import BatchValidationError
from pricing_scraper.services.csv_exchange_service import export_results_csv, parse_domains_csv
from pricing_scraper.services.pricing_scrape_service import PricingScrapeService


def main() -> int:
    parser = argparse.ArgumentParser(description="Discover and extract website pricing plans.")
    parser.add_argument(
        "domains",
        nargs="*",
        help="Domains or URLs to scrape.",
    )
    parser.add_argument(
        "--csv",
        dest="csv_path",
        default=None,
        help="Optional CSV file whose first column lists domains.",
    )
    parser.add_argument(
        "--export",
        dest="export_path",
        default=None,
        help="Optional path to write one CSV row per plan.",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, os.getenv("LOG_LEVEL", "WARNING").strip().upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    domains = list(args.domains)
    service = PricingScrapeService()
    try:
        if args.csv_path:
            domains.extend(parse_domains_csv(Path(args.csv_path).read_bytes()))
        results, summary = service.scrape(domains)
    except BatchValidationError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if args.export_path:
        Path(args.export_path).write_text(export_results_csv(results), encoding="utf-8")

    payload = ScrapeResponse.from_domain(results, summary).model_dump(mode="json", by_alias=True)
    print(json.dumps(payload, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
