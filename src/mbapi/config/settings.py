"""Where: src/mbapi/config/settings.py
What: Derived runtime settings sourced from persisted configuration.
Why: Expose validated constants to the client without file I/O.
"""

from __future__ import annotations

from mbapi.config.config import DEFAULT_API_URL, config as app_config


# MusicBrainz endpoint --------------------------------------------------------

_api_url = (app_config.api_url or DEFAULT_API_URL).strip()
# Endpoints are joined relative to the base, which needs a trailing slash.
MB_API_URL: str = _api_url if _api_url.endswith("/") else f"{_api_url}/"


# MusicBrainz application identity ------------------------------------------

# MusicBrainz recommends a User-Agent of the form:
#   "AppName/AppVersion (contact-url-or-email)"
# See: https://musicbrainz.org/doc/MusicBrainz_API/Rate_Limiting

MB_APP_NAME: str = app_config.app_name or "mbapi"
MB_APP_VERSION: str = app_config.app_version or "0.1.0"
MB_CONTACT: str = app_config.contact or ""


# Throttling and transport ----------------------------------------------------

_max_queue_size = app_config.max_queue_size
MB_MAX_QUEUE_SIZE: int | None = (
    _max_queue_size if isinstance(_max_queue_size, int) and _max_queue_size > 0 else None
)

_timeout = app_config.timeout
MB_TIMEOUT: float | None = (
    float(_timeout) if isinstance(_timeout, (int, float)) and _timeout > 0 else None
)


__all__ = [
    "MB_API_URL",
    "MB_APP_NAME",
    "MB_APP_VERSION",
    "MB_CONTACT",
    "MB_MAX_QUEUE_SIZE",
    "MB_TIMEOUT",
]
