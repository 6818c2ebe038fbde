"""
Process-wide logging setup (stdlib `logging`).

Modules log through `logging.getLogger(__name__)` with `event key=value`
style messages; `configure_logging()` is called once per process.
"""

from __future__ import annotations

import logging
import os
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def log_level() -> str:
    level = os.environ.get("LOG_LEVEL", "").strip().upper() or "INFO"
    if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
        return "INFO"
    return level


def configure_logging() -> None:
    logging.basicConfig(
        format=LOG_FORMAT,
        stream=sys.stdout,
        level=getattr(logging, log_level()),
        force=True,
    )
