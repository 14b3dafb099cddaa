"""Configuration package: defaults, TOML persistence and path policy."""

from .config import Config, ConfigError

__all__ = ["Config", "ConfigError"]
