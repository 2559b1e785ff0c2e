"""Logging configuration for the API service."""

from __future__ import annotations

import logging
import os


def configure_logging(level: str | None = None) -> None:
    """Configure Python logging for the process.

    Logs carry the raw instruction text and are meant for internal diagnostics only; they are never
    part of the API response.
    """

    log_level = (level or os.getenv("LOG_LEVEL") or "INFO").upper()
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    # Per-request access lines duplicate the processor's own logs.
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
