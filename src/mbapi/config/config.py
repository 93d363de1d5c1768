"""Configuration management for mbapi."""
import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from mbapi.config.file_ops import write_text_file
from mbapi.config.paths import default_config_path
from mbapi.platform.logging import logger

DEFAULT_API_URL = "https://musicbrainz.org/ws/2/"


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Library configuration."""

    # Root URL of the web service, useful for the beta or a mirror server
    api_url: str = DEFAULT_API_URL

    # Application identity sent in the User-Agent header
    app_name: str | None = None
    app_version: str | None = None
    contact: str | None = None

    # Maximum number of callers waiting for the rate limiter (unbounded when unset)
    max_queue_size: int | None = None

    # Network timeout in seconds for a single request (none when unset)
    timeout: float | None = None

    # Log file path
    log_file: Path | None = _path_field()

    # Singleton instance
    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value else None)

    def save(self, path: Path | None = None) -> Path:
        """Save configuration to file.

        Args:
            path: Target file, defaults to ``default_config_path()``.

        Returns:
            Path: The file that was written.
        """
        config_dict = asdict(self)

        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        target = path or default_config_path()
        try:
            write_text_file(target, self._render_toml(config_dict))
            logger.info("Configuration saved to %s", target)
        except OSError as e:
            logger.error("Failed to save configuration: %s", e)
            raise
        return target

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# mbapi Configuration File")
        lines.append("")

        lines.append("# Root URL of the MusicBrainz API")
        lines.append(f"api_url = {self._format_toml_value(config['api_url'])}")
        lines.append("")

        lines.append("# Application identity used for the User-Agent header (optional)")
        lines.append("# MusicBrainz may block clients which do not identify themselves")
        for key in ("app_name", "app_version", "contact"):
            if config.get(key):
                lines.append(f"{key} = {self._format_toml_value(config[key])}")
        lines.append("")

        lines.append("# Reject callers immediately once this many requests are waiting (optional)")
        if config.get("max_queue_size") is not None:
            lines.append(f"max_queue_size = {self._format_toml_value(config['max_queue_size'])}")
        lines.append("")

        lines.append("# Network timeout in seconds (optional)")
        if config.get("timeout") is not None:
            lines.append(f"timeout = {self._format_toml_value(config['timeout'])}")
        lines.append("")

        lines.append("# Log file path (optional)")
        if config.get("log_file") is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        """Format a value for TOML serialization.

        Args:
            value: Value to format

        Returns:
            str: Formatted value
        """
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            return f'"{str(value)}"'
        return str(value)

    @classmethod
    def load(cls, path: Path | None = None) -> "Config":
        """Load configuration from file.

        A missing file yields the defaults; nothing is written.

        Args:
            path: Explicit config file, defaults to ``default_config_path()``.

        Returns:
            Config: Loaded configuration object.
        """
        if path is None and cls._instance is not None:
            return cls._instance

        config_file = path or default_config_path()

        if not config_file.exists():
            logger.debug("No configuration file at %s, using defaults", config_file)
            instance = cls()
        else:
            try:
                with open(config_file, "rb") as f:
                    config_dict = tomllib.load(f)
            except (OSError, tomllib.TOMLDecodeError) as e:
                logger.error("Failed to load configuration: %s", e)
                raise

            known = {f.name for f in fields(cls)}
            for key in sorted(set(config_dict) - known):
                logger.warning("Ignoring unknown configuration key '%s' in %s", key, config_file)
                del config_dict[key]

            logger.info("Configuration loaded from %s", config_file)
            instance = cls(**config_dict)

        if path is None:
            cls._instance = instance
            cls._loaded_from = config_file
        return instance


# Global configuration instance
config = Config.load()
