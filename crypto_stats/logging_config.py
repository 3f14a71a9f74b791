"""
Logging setup shared by the API server and the CLI.
"""
from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

from crypto_stats.config import LOG_FORMAT, LOG_LEVEL


def configure_logging(level: Optional[str] = None, stream: Optional[TextIO] = None) -> None:
    """Route all loggers to one stream (stdout by default) at the given level."""
    log_level = getattr(logging, (level or LOG_LEVEL).upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        stream=stream or sys.stdout,
        format=LOG_FORMAT,
        force=True,
    )
