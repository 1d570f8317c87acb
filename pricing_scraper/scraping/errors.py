"""
Exception hierarchy for pricing discovery and extraction.
"""

from __future__ import annotations


class PricingScrapeError(Exception):
    """Base exception for pricing scrape failures."""


class BatchValidationError(PricingScrapeError, ValueError):
    """Raised when a submitted domain batch is malformed or empty."""


class FetchError(PricingScrapeError):
    """
    Raised when one URL cannot be fetched.

    Callers log and skip the URL; this never aborts a domain on its own.
    """

    def __init__(self, message: str, *, url: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class DomainError(PricingScrapeError, ValueError):
    """Raised when a whole domain cannot be resolved or reached."""


class InternalScrapeError(PricingScrapeError, RuntimeError):
    """Raised when the batch loop itself fails unexpectedly."""
