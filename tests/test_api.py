"""
tests/test_api.py

HTTP contract of the pricing scrape endpoints.

The real service runs against a FakeSession injected through a FastAPI
dependency override, so requests exercise validation, orchestration and
serialisation end to end without network access.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from conftest import FakeSession
from pricing_scraper.main import create_app
from pricing_scraper.scraping.config.models import PricingScrapingSettings
from pricing_scraper.scraping.errors import InternalScrapeError
from pricing_scraper.services.pricing_scrape_service import (
    EMPTY_BATCH_MESSAGE,
    PricingScrapeService,
    get_pricing_scrape_service,
)


class _ExplodingService:
    def scrape(self, domains):
        raise InternalScrapeError("session pool exhausted")


@pytest.fixture()
def app(site_session: FakeSession):
    application = create_app()
    service = PricingScrapeService(
        settings=PricingScrapingSettings(probe_paths=False, max_domains=3),
        session=site_session,
    )
    application.dependency_overrides[get_pricing_scrape_service] = lambda: service
    return application


@pytest.fixture()
def client(app) -> TestClient:
    return TestClient(app)


def test_healthcheck(client: TestClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


class TestScrapeEndpoint:
    def test_success_body_uses_camel_case(self, client: TestClient) -> None:
        response = client.post("/api/scrape", json={"domains": ["example.com"]})

        assert response.status_code == 200
        body = response.json()
        assert body["summary"] == {"total": 1, "success": 1, "noPricing": 0, "error": 0}
        result = body["results"][0]
        assert result["domain"] == "example.com"
        assert result["status"] == "success"
        assert result["errorMessage"] is None
        plan = result["plans"][0]
        assert plan["planName"] == "Pro"
        assert plan["price"] == "$29.99"
        assert plan["pricingModel"] == "Monthly"
        assert plan["sourceUrl"] == "https://example.com/pricing"
        assert "scrapedAt" in plan

    def test_mixed_batch_preserves_order(self, client: TestClient) -> None:
        response = client.post(
            "/api/scrape",
            json={"domains": ["doesnotexist.invalid", " plain.example ", "example.com"]},
        )

        assert response.status_code == 200
        body = response.json()
        assert [result["status"] for result in body["results"]] == ["error", "no_pricing", "success"]
        assert body["results"][0]["plans"][0]["planName"] == "Error"
        assert body["results"][0]["errorMessage"]
        assert body["summary"] == {"total": 3, "success": 1, "noPricing": 1, "error": 1}

    @pytest.mark.parametrize("domains", [[], ["", "   "]])
    def test_empty_batch_is_rejected(self, client: TestClient, domains) -> None:
        response = client.post("/api/scrape", json={"domains": domains})

        assert response.status_code == 400
        assert response.json() == {"detail": EMPTY_BATCH_MESSAGE}

    def test_missing_domains_key_fails_validation(self, client: TestClient) -> None:
        response = client.post("/api/scrape", json={})

        assert response.status_code == 422

    def test_oversized_batch_is_rejected(self, client: TestClient) -> None:
        response = client.post("/api/scrape", json={"domains": ["a.com", "b.com", "c.com", "d.com"]})

        assert response.status_code == 400
        assert "Too many domains" in response.json()["detail"]

    def test_internal_failure_maps_to_500(self, app) -> None:
        app.dependency_overrides[get_pricing_scrape_service] = lambda: _ExplodingService()

        response = TestClient(app).post("/api/scrape", json={"domains": ["example.com"]})

        assert response.status_code == 500
        assert response.json() == {"detail": "Internal server error"}


class TestUploadCsvEndpoint:
    def test_domains_are_read_from_first_column(self, client: TestClient) -> None:
        response = client.post(
            "/api/scrape/upload-csv",
            files={"file": ("domains.csv", b"domain,notes\nexample.com,main\nplain.example,\n", "text/csv")},
        )

        assert response.status_code == 200
        body = response.json()
        assert [result["domain"] for result in body["results"]] == ["example.com", "plain.example"]

    def test_file_without_domains_is_rejected(self, client: TestClient) -> None:
        response = client.post(
            "/api/scrape/upload-csv",
            files={"file": ("domains.csv", b"domain\n\n", "text/csv")},
        )

        assert response.status_code == 400
        assert response.json() == {"detail": "No valid domains found in CSV file"}

    def test_non_csv_upload_is_rejected(self, client: TestClient) -> None:
        response = client.post(
            "/api/scrape/upload-csv",
            files={"file": ("logo.png", b"\x89PNG", "image/png")},
        )

        assert response.status_code == 400
        assert response.json() == {"detail": "Only CSV files are allowed."}


class TestExportCsvEndpoint:
    def test_scrape_response_round_trips_to_csv(self, client: TestClient) -> None:
        scraped = client.post("/api/scrape", json={"domains": ["example.com", "plain.example"]}).json()

        response = client.post("/api/export-csv", json=scraped)

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/csv")
        assert 'filename="pricing-data-' in response.headers["content-disposition"]
        lines = response.text.splitlines()
        assert lines[0] == "Domain,Plan Name,Price,Pricing Model,Features,URL,Scraped At"
        assert lines[1].startswith("example.com,Pro,$29.99,Monthly,")
        assert lines[2].startswith("plain.example,No pricing found,N/A,Unknown,No pricing information detected,")
        assert len(lines) == 3

    def test_result_without_plans_is_rejected(self, client: TestClient) -> None:
        payload = {
            "results": [
                {
                    "domain": "example.com",
                    "url": "https://example.com",
                    "scrapedAt": "2024-03-01T12:30:00Z",
                    "plans": [],
                    "status": "success",
                }
            ]
        }

        response = client.post("/api/export-csv", json=payload)

        assert response.status_code == 422
