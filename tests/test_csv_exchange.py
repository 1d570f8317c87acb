"""
tests/test_csv_exchange.py

Domain CSV import and results CSV export.
"""

from __future__ import annotations

import csv
import io
from datetime import date, datetime, timezone

import pytest

from pricing_scraper.domain.pricing import DomainResult, DomainStatus, PlanRecord
from pricing_scraper.services.csv_exchange_service import (
    EXPORT_HEADERS,
    CSVDomainImportError,
    export_filename,
    export_results_csv,
    parse_domains_csv,
)

SCRAPED_AT = datetime(2024, 3, 1, 12, 30, tzinfo=timezone.utc)


def _result(*plans: PlanRecord) -> DomainResult:
    return DomainResult(
        domain="example.com",
        url="https://example.com",
        scraped_at=SCRAPED_AT,
        plans=plans,
        status=DomainStatus.SUCCESS,
    )


def _plan(**overrides) -> PlanRecord:
    values = {
        "domain": "example.com",
        "plan_name": "Pro",
        "price": "$29.99",
        "pricing_model": "Monthly",
        "features": ("Unlimited projects", "Priority support"),
        "source_url": "https://example.com/pricing",
        "scraped_at": SCRAPED_AT,
    }
    values.update(overrides)
    return PlanRecord(**values)


class TestParseDomainsCsv:
    def test_first_column_of_each_line(self) -> None:
        content = b"example.com,Acme\n\nhttps://shop.example.org, second\n  spaced.example  \n"

        assert parse_domains_csv(content) == [
            "example.com",
            "https://shop.example.org",
            "spaced.example",
        ]

    def test_header_row_is_skipped(self) -> None:
        assert parse_domains_csv("Domain,Notes\nexample.com,main\n") == ["example.com"]

    def test_header_word_after_first_row_is_kept(self) -> None:
        assert parse_domains_csv("example.com\nurl\n") == ["example.com", "url"]

    def test_byte_order_mark_is_ignored(self) -> None:
        assert parse_domains_csv("\ufeffexample.com\n".encode("utf-8")) == ["example.com"]

    def test_blank_only_file_yields_no_domains(self) -> None:
        assert parse_domains_csv(b"\n , \n\n") == []

    def test_non_utf8_bytes_are_rejected(self) -> None:
        with pytest.raises(CSVDomainImportError):
            parse_domains_csv(b"\xff\xfe\x00bad")


class TestExportResultsCsv:
    def test_one_row_per_plan_with_header(self) -> None:
        content = export_results_csv([_result(_plan(), _plan(plan_name="Basic", price="$9"))])

        rows = list(csv.reader(io.StringIO(content)))
        assert tuple(rows[0]) == EXPORT_HEADERS
        assert rows[1] == [
            "example.com",
            "Pro",
            "$29.99",
            "Monthly",
            "Unlimited projects; Priority support",
            "https://example.com/pricing",
            "2024-03-01T12:30:00+00:00",
        ]
        assert rows[2][1:3] == ["Basic", "$9"]
        assert len(rows) == 3

    def test_fields_with_delimiters_and_quotes_are_escaped(self) -> None:
        plan = _plan(plan_name='Team "Plus"', features=("Seats, roles", "SSO"))

        content = export_results_csv([_result(plan)])

        assert '"Team ""Plus"""' in content
        assert '"Seats, roles; SSO"' in content
        assert list(csv.reader(io.StringIO(content)))[1][4] == "Seats, roles; SSO"

    def test_no_results_yields_header_only(self) -> None:
        assert export_results_csv([]) == ",".join(EXPORT_HEADERS) + "\n"


def test_export_filename_uses_iso_date() -> None:
    assert export_filename(date(2024, 3, 1)) == "pricing-data-2024-03-01.csv"
