"""Logging setup for the command-line entry point."""

from __future__ import annotations

import logging
import os

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def resolve_level(level: str | None = None) -> str:
    """Explicit level, else ``ECOSIM_LOG_LEVEL``, else INFO."""
    raw_level = level if level is not None else os.getenv("ECOSIM_LOG_LEVEL")
    return (raw_level or "INFO").upper()


def configure_logging(level: str | None = None) -> None:
    """Configure the root logger once for a CLI or viewer run."""
    logging.basicConfig(level=resolve_level(level), format=LOG_FORMAT, datefmt=LOG_DATEFMT)
