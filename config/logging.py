# Path: config/logging.py
# Purpose: Configure process-wide logging for entry points.
# Layer: config.
# Details: Library modules only create module loggers; GUI, CLI, and API entry points call configure_logging once.

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Install a root handler at the requested level."""

    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=LOG_FORMAT)
    logging.getLogger("httpx").setLevel(logging.WARNING)
