"""Where: src/coverartarchive/domain/mbid.py
What: Syntactic validation of MusicBrainz identifiers.
Why: Reject malformed identifiers before any request leaves the process.
"""

from __future__ import annotations

import re
from typing import Final

# 8-4-4-4-12 hex groups; the closing brace is required only when the
# opening one is present.
_MBID_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"(?:\{[0-9a-f]{8}(?:-[0-9a-f]{4}){3}-[0-9a-f]{12}\}"
    r"|[0-9a-f]{8}(?:-[0-9a-f]{4}){3}-[0-9a-f]{12})",
    re.IGNORECASE,
)


def is_valid_mbid(value: object) -> bool:
    """Return True when ``value`` is a UUID-shaped MusicBrainz identifier.

    Braces are optional but must come as a pair, e.g.
    ``{4dbf5678-7a31-406a-abbe-232f8ac2cd63}``.
    """

    if not isinstance(value, str):
        return False
    return _MBID_PATTERN.fullmatch(value) is not None


__all__ = ["is_valid_mbid"]
