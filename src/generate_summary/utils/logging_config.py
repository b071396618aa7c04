"""Logging setup for generate_summary.

stdout carries the preprocessor protocol, so log records always go to stderr.
"""

from __future__ import annotations

import logging
import sys

from generate_summary.config import GENERATE_SUMMARY_LOG_LEVEL

LOG_FORMAT = "%(asctime)s [%(levelname)s] (%(name)s): %(message)s"


def configure_logging(level: str | int | None = None) -> None:
    """Send package logs to stderr at ``level`` (default from the environment)."""
    resolved = level if level is not None else GENERATE_SUMMARY_LOG_LEVEL
    if isinstance(resolved, str):
        resolved = logging.getLevelName(resolved.upper())
        if not isinstance(resolved, int):
            resolved = logging.WARNING

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    package_logger = logging.getLogger("generate_summary")
    package_logger.handlers.clear()
    package_logger.addHandler(handler)
    package_logger.setLevel(resolved)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
