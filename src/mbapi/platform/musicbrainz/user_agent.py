"""Where: src/mbapi/platform/musicbrainz/user_agent.py
What: Build MusicBrainz-compliant User-Agent strings.
Why: Centralise etiquette logic shared by the HTTP adapter and the client.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Final

from mbapi.config.settings import MB_APP_NAME, MB_APP_VERSION, MB_CONTACT

_ENV_USER_AGENT: Final[str] = "MUSICBRAINZ_USER_AGENT"


@dataclass(frozen=True, slots=True)
class AppInfo:
    """Identity of the application issuing requests."""

    name: str
    version: str
    contact: str = ""

    @property
    def user_agent(self) -> str:
        return format_user_agent(self.name, self.version, self.contact)


def format_user_agent(app_name: str, app_version: str, contact: str | None) -> str:
    """Return ``App/Version (contact)`` when contact information is available."""

    stripped = (contact or "").strip()
    if stripped:
        return f"{app_name}/{app_version} ({stripped})"
    return f"{app_name}/{app_version}"


def resolve_user_agent(app: AppInfo | None = None, env: Mapping[str, str] | None = None) -> str:
    """Provide the user agent that outbound requests should send.

    Priority: explicit ``app``, then ``MUSICBRAINZ_USER_AGENT``, then the
    configured application identity.
    """

    if app is not None:
        return app.user_agent
    mapping = env if env is not None else os.environ
    override = (mapping.get(_ENV_USER_AGENT) or "").strip()
    if override:
        return override
    return format_user_agent(MB_APP_NAME, MB_APP_VERSION, MB_CONTACT)


__all__ = [
    "AppInfo",
    "format_user_agent",
    "resolve_user_agent",
]
