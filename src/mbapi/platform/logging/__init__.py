"""Logging facade exports.

Where: platform/logging/__init__.py
What: Re-export the configured logger, setup helpers, and the custom Rich handler.
Why: Provide a single canonical import path for every module.
"""

from __future__ import annotations

from .config import DEFAULT_LOG_FILE, LOGGER_NAME, logger, setup_logger
from .handlers import MBApiRichHandler

__all__ = [
    "DEFAULT_LOG_FILE",
    "LOGGER_NAME",
    "MBApiRichHandler",
    "logger",
    "setup_logger",
]
