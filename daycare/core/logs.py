"""Logging setup for the daycare shell."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def configure_logging(level: str = "WARNING") -> None:
    """Configure the root logger; unknown level names fall back to WARNING."""
    resolved = logging.getLevelName((level or "").upper())
    if not isinstance(resolved, int):
        resolved = logging.WARNING
    logging.basicConfig(level=resolved, format=LOG_FORMAT)
    logging.getLogger("daycare").setLevel(resolved)
