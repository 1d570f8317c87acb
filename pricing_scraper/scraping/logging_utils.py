"""
Structured logging helpers for pricing scrape workflows.
"""

from __future__ import annotations

import json
import logging
from typing import Any


def log_event(
    logger: logging.Logger,
    level: int,
    event: str,
    **fields: Any,
) -> None:
    """
    Emit one JSON log line: `{"event": ..., **fields}`.

    Fields set to None are dropped; non-JSON values are rendered with str().
    """

    if not logger.isEnabledFor(level):
        return
    payload = {"event": event}
    payload.update((key, value) for key, value in fields.items() if value is not None)
    logger.log(level, json.dumps(payload, default=str, ensure_ascii=False, sort_keys=True))
