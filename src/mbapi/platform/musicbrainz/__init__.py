"""MusicBrainz infrastructure package.

This package provides the client utilities to interact with the
MusicBrainz Web Service (WS2): request dispatch, adaptive rate limiting,
User-Agent etiquette and the error types surfaced to callers.
"""
