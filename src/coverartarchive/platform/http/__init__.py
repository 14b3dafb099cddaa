"""HTTP infrastructure package.

Provides the ``HTTPClient`` protocol the Cover Art Archive client depends on,
a ``requests``-backed default implementation and User-Agent helpers.
"""

from .http_client import HTTPClient, HTTPResponse, RequestsHTTPClient
from .user_agent import format_user_agent

__all__ = [
    "HTTPClient",
    "HTTPResponse",
    "RequestsHTTPClient",
    "format_user_agent",
]
