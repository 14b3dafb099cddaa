"""Shared path utilities for configuration locations.

Policy (portable by default):
- Config: repository-root ``<repo_root>/config/coverartarchive.toml``

Nothing here is consulted unless a caller omits an explicit path.
"""

from __future__ import annotations

from pathlib import Path


def _detect_repo_root(start: Path | None = None) -> Path:
    """Detect the repository root by walking up parents.

    Looks for markers like ``pyproject.toml`` or ``.git``.

    Args:
        start: Starting path. Defaults to this file's directory.

    Returns:
        Path: Detected repository root, or the current working directory
        if no marker is found.
    """
    here = (start or Path(__file__).resolve()).parent
    for p in [here, *here.parents]:
        if (p / "pyproject.toml").exists() or (p / ".git").exists():
            return p
    return Path.cwd()


def default_config_path() -> Path:
    """Get the default path to the TOML config file."""

    return (_detect_repo_root() / "config" / "coverartarchive.toml").resolve()


__all__ = [
    "default_config_path",
]
