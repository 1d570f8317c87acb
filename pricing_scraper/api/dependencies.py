"""
pricing_scraper/api/dependencies.py

Upload validation for domain-list files.
"""

from __future__ import annotations

from fastapi import File, HTTPException, UploadFile, status

DOMAIN_LIST_EXTENSIONS: tuple[str, ...] = (".csv", ".txt")
DOMAIN_LIST_CONTENT_TYPES = frozenset(
    {"text/csv", "application/csv", "application/vnd.ms-excel", "text/plain"}
)


def _media_type(content_type: str | None) -> str:
    return (content_type or "").split(";", 1)[0].strip().lower()


def get_csv_upload(file: UploadFile = File(...)) -> UploadFile:
    """
    Accept a domain list when either its extension or its media type looks
    like delimited text.
    """

    filename = (file.filename or "").strip().lower()
    if filename.endswith(DOMAIN_LIST_EXTENSIONS):
        return file
    if _media_type(file.content_type) in DOMAIN_LIST_CONTENT_TYPES:
        return file
    raise HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail="Only CSV files are allowed.",
    )
