"""Where: src/coverartarchive/config/config.py
What: Client configuration dataclass with TOML persistence.
Why: Let callers override endpoint, identity, timeouts and log file in one place.
"""

from __future__ import annotations

import logging
import logging.handlers
import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any

from coverartarchive.config.paths import default_config_path
from coverartarchive.config.settings import (
    CAA_APP_NAME,
    CAA_APP_VERSION,
    CAA_BASE_URL,
    CAA_CONTACT,
    CONNECT_TIMEOUT_SECONDS,
    READ_TIMEOUT_SECONDS,
)
from coverartarchive.platform.logging import LOGGER_NAME, logger, setup_logger


class ConfigError(Exception):
    """Raised when a configuration file cannot be parsed or validated."""


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
    """Client configuration."""

    # Cover Art Archive endpoint
    base_url: str = CAA_BASE_URL

    # Application identity sent as User-Agent
    app_name: str = CAA_APP_NAME
    app_version: str = CAA_APP_VERSION
    contact: str = CAA_CONTACT

    # Transport timeouts in seconds
    connect_timeout: float = CONNECT_TIMEOUT_SECONDS
    read_timeout: float = READ_TIMEOUT_SECONDS

    # Log file path
    log_file: Path | None = _path_field()

    def __post_init__(self) -> None:
        """Convert string paths and normalise the base URL."""

        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value else None)

        self.base_url = self.base_url.rstrip("/")

    def configure_logging(self) -> logging.Logger:
        """Route package logs to ``log_file`` when one is configured.

        Does nothing when ``log_file`` is unset or already attached, so it is
        safe to call once per lookup.
        """
        package_logger = logging.getLogger(LOGGER_NAME)
        if self.log_file is None:
            return package_logger

        target = self.log_file.expanduser().resolve()
        for handler in package_logger.handlers:
            if (
                isinstance(handler, logging.handlers.RotatingFileHandler)
                and Path(handler.baseFilename) == target
            ):
                return package_logger
        return setup_logger(log_file=target)

    def save(self, path: Path | None = None) -> Path:
        """Save configuration to a TOML file.

        Args:
            path: Target file. Defaults to ``default_config_path()``.

        Returns:
            Path: The file that was written.
        """
        config_dict = asdict(self)

        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        target = path if path is not None else default_config_path()
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            _ = target.write_text(self._render_toml(config_dict), encoding="utf-8")
        except OSError as e:
            logger.error("Failed to save configuration: %s", e)
            raise
        logger.info("Configuration saved to %s", target)
        return target

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# Cover Art Archive client configuration")
        lines.append("")

        lines.append("# Web service root (without trailing slash)")
        lines.append(f"base_url = {self._format_toml_value(config['base_url'])}")
        lines.append("")

        lines.append("# Application identity used to build the User-Agent header")
        lines.append('# Rendered as "app_name/app_version (contact)"')
        lines.append(f"app_name = {self._format_toml_value(config['app_name'])}")
        lines.append(f"app_version = {self._format_toml_value(config['app_version'])}")
        lines.append(f"contact = {self._format_toml_value(config['contact'])}")
        lines.append("")

        lines.append("# HTTP timeouts in seconds")
        lines.append(f"connect_timeout = {self._format_toml_value(config['connect_timeout'])}")
        lines.append(f"read_timeout = {self._format_toml_value(config['read_timeout'])}")
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append('# Example: log_file = "/path/to/logs/coverartarchive.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        """Format a value for TOML serialization."""
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        return str(value)

    @classmethod
    def load(cls, path: Path | None = None) -> Config:
        """Load configuration from a TOML file.

        A missing file yields the defaults; nothing is created on disk.

        Args:
            path: Source file. Defaults to ``default_config_path()``.

        Returns:
            Config: Loaded configuration object.

        Raises:
            ConfigError: If the file is not valid TOML or holds unknown keys
                or values of the wrong type.
        """
        config_file = path if path is not None else default_config_path()

        if not config_file.exists():
            logger.debug("No configuration at %s; using defaults", config_file)
            return cls()

        try:
            with open(config_file, "rb") as f:
                config_dict = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML in {config_file}: {e}") from e

        instance = cls(**_validate(config_dict, config_file))
        logger.info("Configuration loaded from %s", config_file)
        return instance


def _validate(raw: dict[str, Any], source: Path) -> dict[str, Any]:
    """Check keys and value types of a parsed configuration mapping."""

    known = {f.name: f for f in fields(Config)}
    unknown = sorted(set(raw) - set(known))
    if unknown:
        raise ConfigError(f"Unknown configuration keys in {source}: {', '.join(unknown)}")

    validated: dict[str, Any] = {}
    for key, value in raw.items():
        if key in {"connect_timeout", "read_timeout"}:
            if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
                raise ConfigError(f"'{key}' must be a positive number in {source}")
            validated[key] = float(value)
        elif key == "log_file":
            if not isinstance(value, str):
                raise ConfigError(f"'log_file' must be a string in {source}")
            validated[key] = value.strip() or None
        else:
            if not isinstance(value, str):
                raise ConfigError(f"'{key}' must be a string in {source}")
            validated[key] = value
    return validated


__all__ = ["Config", "ConfigError"]
