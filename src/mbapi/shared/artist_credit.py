"""Summary: Render artist credits as display strings.
Why: Lookups return credits as name/join-phrase pairs that callers usually want joined.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any


def join_artist_credit(credits: Iterable[Mapping[str, Any]]) -> str:
    """Combine the given artist credits into a string.

    Each credit contributes its ``name`` followed by its ``joinphrase``; the
    nested ``artist`` object is not needed.
    """

    parts: list[str] = []
    for credit in credits:
        parts.append(str(credit.get("name") or ""))
        parts.append(str(credit.get("joinphrase") or ""))
    return "".join(parts)


__all__ = ["join_artist_credit"]
