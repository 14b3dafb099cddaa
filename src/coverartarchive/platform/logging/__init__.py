"""Logging facade exports.

Where: platform/logging/__init__.py
What: Re-export the configured logger, setup helper, events and Rich handler.
Why: Provide a single canonical import path for every module.
"""

from __future__ import annotations

from .config import LOGGER_NAME, logger, setup_logger
from .events import ArchiveEvent
from .handlers import CoverArtRichHandler

__all__ = [
    "LOGGER_NAME",
    "ArchiveEvent",
    "CoverArtRichHandler",
    "logger",
    "setup_logger",
]
