"""Where: src/coverartarchive/platform/logging/events.py
What: Structured event identifiers attached to client log records.
Why: Let the console handler style lookups without parsing message text.
"""

from __future__ import annotations

from enum import StrEnum


class ArchiveEvent(StrEnum):
    """Structured event identifiers for Cover Art Archive lookups."""

    REQUEST_START = "archive.request.start"
    REQUEST_SUCCESS = "archive.request.success"
    REQUEST_ERROR = "archive.request.error"
    LOOKUP_COMPLETE = "archive.lookup.complete"


__all__ = ["ArchiveEvent"]
