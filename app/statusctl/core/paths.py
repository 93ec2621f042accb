"""XDG-compliant path management for statusctl.

This module provides the standardized location of the configuration
file, following the XDG Base Directory Specification.

XDG defaults:
- Config: ~/.config/statusctl/
"""

import os
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "statusctl"

CONFIG_FILENAME = "config.toml"
THEME_FILENAME = "theme.toml"


def _get_xdg_dir(env_var: str, default_subdir: str) -> Path:
    """Get XDG directory respecting environment variable override.

    Args:
        env_var: XDG environment variable name (e.g., "XDG_CONFIG_HOME").
        default_subdir: Default subdirectory under home (e.g., ".config").

    Returns:
        Path to the application-specific directory.
    """
    base = os.environ.get(env_var)
    if base:
        return Path(base) / APP_NAME
    return Path.home() / default_subdir / APP_NAME


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to ~/.config/statusctl/ (or XDG_CONFIG_HOME/statusctl/).
    """
    return _get_xdg_dir("XDG_CONFIG_HOME", ".config")


def get_config_path() -> Path:
    """Get the default configuration file path.

    Returns:
        Path to ~/.config/statusctl/config.toml.
    """
    return get_config_dir() / CONFIG_FILENAME


def get_theme_path() -> Path:
    """Get the user theme override path.

    Returns:
        Path to ~/.config/statusctl/theme.toml.
    """
    return get_config_dir() / THEME_FILENAME


def _ensure_dir(path: Path, name: str) -> Path:
    """Create directory if it doesn't exist.

    Args:
        path: Directory path to create.
        name: Human-readable name for error messages.

    Returns:
        The created/existing directory path.

    Raises:
        RuntimeError: If directory cannot be created.
    """
    try:
        path.mkdir(parents=True, exist_ok=True)
    except PermissionError as e:
        msg = f"Cannot create {name} directory {path}: Permission denied"
        raise RuntimeError(msg) from e
    except OSError as e:
        msg = f"Cannot create {name} directory {path}: {e}"
        raise RuntimeError(msg) from e
    return path


def ensure_config_dir(path: Path | None = None) -> Path:
    """Create the configuration directory if it doesn't exist.

    Args:
        path: Directory to create. If None, uses the default config directory.

    Returns:
        Path to the configuration directory.

    Raises:
        RuntimeError: If the directory cannot be created.
    """
    return _ensure_dir(path or get_config_dir(), "config")
