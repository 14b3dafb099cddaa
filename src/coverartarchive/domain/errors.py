"""Where: src/coverartarchive/domain/errors.py
What: Exception hierarchy raised by the Cover Art Archive client.
Why: Let callers tell bad input, transport failures, server replies and
     missing images apart while still catching ``CoverArtError`` broadly.
"""

from __future__ import annotations


class CoverArtError(Exception):
    """Base class for every error raised by this package."""


class InvalidArgumentError(CoverArtError, ValueError):
    """Raised for an unknown resource type or a malformed MBID."""


class TransportError(CoverArtError):
    """Raised when the HTTP request could not be completed."""


class ServerError(CoverArtError):
    """Raised for a non-200 reply or a payload that cannot be interpreted."""

    def __init__(self, message: str, *, status: int | None = None, url: str | None = None) -> None:
        super().__init__(message)
        self.status: int | None = status
        self.url: str | None = url


class NotFoundError(CoverArtError, LookupError):
    """Raised when a front or back image is requested but none is designated."""


__all__ = [
    "CoverArtError",
    "InvalidArgumentError",
    "NotFoundError",
    "ServerError",
    "TransportError",
]
