"""Logging facade exports.

Where: platform/logging/__init__.py
What: Re-export the configured logger, setup helpers, and the Rich handler.
Why: Provide a single canonical import path for diagnostics.
"""

from __future__ import annotations

from .config import DEFAULT_LOG_FILE, LOGGER_NAME, log_event, logger, setup_logger
from .handlers import SweepRichHandler

__all__ = [
    "DEFAULT_LOG_FILE",
    "LOGGER_NAME",
    "SweepRichHandler",
    "log_event",
    "logger",
    "setup_logger",
]
