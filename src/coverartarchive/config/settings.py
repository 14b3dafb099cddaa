"""Where: src/coverartarchive/config/settings.py
What: Default runtime settings for the Cover Art Archive client.
Why: Keep service constants in one place so config and HTTP layers agree.
"""

from __future__ import annotations

from typing import Final

# Cover Art Archive endpoint ---------------------------------------------------

CAA_BASE_URL: Final[str] = "https://coverartarchive.org"


# Application identity ---------------------------------------------------------

# MetaBrainz asks for a User-Agent of the form:
#   "AppName/AppVersion (contact-url-or-email)"
# See: https://musicbrainz.org/doc/MusicBrainz_API/Rate_Limiting#Provide_meaningful_User-Agent_strings

CAA_APP_NAME: Final[str] = "coverartarchive"
CAA_APP_VERSION: Final[str] = "0.1.0"
CAA_CONTACT: Final[str] = ""


# Transport --------------------------------------------------------------------

CONNECT_TIMEOUT_SECONDS: Final[float] = 5.0
READ_TIMEOUT_SECONDS: Final[float] = 15.0


__all__ = [
    "CAA_APP_NAME",
    "CAA_APP_VERSION",
    "CAA_BASE_URL",
    "CAA_CONTACT",
    "CONNECT_TIMEOUT_SECONDS",
    "READ_TIMEOUT_SECONDS",
]
