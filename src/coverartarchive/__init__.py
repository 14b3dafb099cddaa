"""Client for the Cover Art Archive web service.

Typical use::

    from coverartarchive import CoverArt

    art = CoverArt("release", "76df3287-6cda-33eb-8e9a-044b5e15ffdd")
    front = art.get_front_image()
"""

from .client import CoverArt
from .config import Config, ConfigError
from .domain import (
    CoverArtError,
    CoverArtImage,
    InvalidArgumentError,
    NotFoundError,
    ResourceType,
    ServerError,
    Thumbnails,
    TransportError,
    is_valid_mbid,
)
from .platform.http import HTTPClient, HTTPResponse, RequestsHTTPClient

__version__ = "0.1.0"

__all__ = [
    "Config",
    "ConfigError",
    "CoverArt",
    "CoverArtError",
    "CoverArtImage",
    "HTTPClient",
    "HTTPResponse",
    "InvalidArgumentError",
    "NotFoundError",
    "RequestsHTTPClient",
    "ResourceType",
    "ServerError",
    "Thumbnails",
    "TransportError",
    "is_valid_mbid",
]
