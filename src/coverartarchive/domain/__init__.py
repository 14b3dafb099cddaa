"""Domain layer: identifier validation, image records and errors."""

from .errors import (
    CoverArtError,
    InvalidArgumentError,
    NotFoundError,
    ServerError,
    TransportError,
)
from .mbid import is_valid_mbid
from .models import CoverArtImage, ResourceType, Thumbnails

__all__ = [
    "CoverArtError",
    "CoverArtImage",
    "InvalidArgumentError",
    "NotFoundError",
    "ResourceType",
    "ServerError",
    "Thumbnails",
    "TransportError",
    "is_valid_mbid",
]
