"""Tests for settings module behavior."""

from __future__ import annotations

import importlib
from pathlib import Path


def test_defaults(config_runtime_env: Path) -> None:
    _ = config_runtime_env

    import mbapi.config.settings as settings

    reloaded = importlib.reload(settings)

    assert reloaded.MB_API_URL == "https://musicbrainz.org/ws/2/"
    assert reloaded.MB_APP_NAME == "mbapi"
    assert reloaded.MB_APP_VERSION == "0.1.0"
    assert reloaded.MB_CONTACT == ""
    assert reloaded.MB_MAX_QUEUE_SIZE is None
    assert reloaded.MB_TIMEOUT is None


def test_values_derive_from_config(config_runtime_env: Path) -> None:
    """MusicBrainz identity and throttling derive from config values."""

    _ = config_runtime_env

    from mbapi.config.config import config as app_config

    app_config.api_url = "https://beta.musicbrainz.org/ws/2"
    app_config.app_name = "custom-app"
    app_config.app_version = "9.9.9"
    app_config.contact = "mailto:config@example.com"
    app_config.max_queue_size = 3
    app_config.timeout = 10

    import mbapi.config.settings as settings

    reloaded = importlib.reload(settings)

    assert reloaded.MB_API_URL == "https://beta.musicbrainz.org/ws/2/"
    assert reloaded.MB_APP_NAME == "custom-app"
    assert reloaded.MB_APP_VERSION == "9.9.9"
    assert reloaded.MB_CONTACT == "mailto:config@example.com"
    assert reloaded.MB_MAX_QUEUE_SIZE == 3
    assert reloaded.MB_TIMEOUT == 10.0


def test_non_positive_limits_are_unset(config_runtime_env: Path) -> None:
    _ = config_runtime_env

    from mbapi.config.config import config as app_config

    app_config.max_queue_size = 0
    app_config.timeout = -1

    import mbapi.config.settings as settings

    reloaded = importlib.reload(settings)

    assert reloaded.MB_MAX_QUEUE_SIZE is None
    assert reloaded.MB_TIMEOUT is None
