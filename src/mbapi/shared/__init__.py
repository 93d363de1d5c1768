# Where: mbapi.shared.__init__
# What: Provide a concise import surface for helpers working on lookup results.
# Why: Encourage consistent reuse of shared helpers across the CLI and callers.

"""Shared cross-cutting utilities exposed at the package level."""

from __future__ import annotations

from .artist_credit import join_artist_credit
from .track_range import TrackRange, parse_track_range
from .urls import extract_entity_from_url

__all__ = [
    "TrackRange",
    "extract_entity_from_url",
    "join_artist_credit",
    "parse_track_range",
]
