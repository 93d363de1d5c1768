"""Tests for configuration path resolution helpers."""

from pathlib import Path

from mbapi.config.paths import default_config_path, default_log_dir, default_log_file, resolve_overridable_path


def test_default_log_paths(portable_repo_root: Path) -> None:
    """Default log locations should live under the repository logs/ folder."""

    expected_dir = portable_repo_root / "logs"
    assert default_log_dir() == expected_dir
    assert default_log_file() == expected_dir / "mbapi.log"


def test_default_config_path(portable_repo_root: Path) -> None:
    assert default_config_path(env={}) == portable_repo_root / "config" / "config.toml"


def test_config_path_environment_override(portable_repo_root: Path) -> None:
    custom = portable_repo_root / "elsewhere" / "mbapi.toml"

    assert default_config_path(env={"MBAPI_CONFIG": f"  {custom}  "}) == custom


def test_explicit_path_wins(tmp_path: Path) -> None:
    explicit = tmp_path / "explicit.toml"

    resolved = resolve_overridable_path(
        explicit_path=explicit,
        env={"MBAPI_CONFIG": str(tmp_path / "env.toml")},
        env_var="MBAPI_CONFIG",
        default_factory=lambda: tmp_path / "default.toml",
    )

    assert resolved == explicit
