"""Configuration file I/O operations.

This module provides functions for loading, saving and bootstrapping the
statusctl configuration file in TOML format, validated with Pydantic.
"""

import logging
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Any

import tomli_w
from pydantic import ValidationError

from statusctl.core.paths import ensure_config_dir, get_config_path
from statusctl.models.config import StatusConfig

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Base exception for configuration-related errors."""


class ConfigNotFoundError(ConfigError):
    """Raised when the configuration file is not found."""


class ConfigParseError(ConfigError):
    """Raised when the configuration file cannot be parsed."""


class ConfigValidationError(ConfigError):
    """Raised when configuration content is invalid."""


def load_config(path: Path | None = None) -> StatusConfig:
    """Load and validate the configuration from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated StatusConfig object.

    Raises:
        ConfigNotFoundError: If the config file doesn't exist.
        ConfigParseError: If the TOML syntax is invalid.
        ConfigValidationError: If the content doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        raise ConfigNotFoundError(f"Config not found: {config_path}")

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config {config_path}: {e}") from e

    try:
        config = StatusConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigValidationError(f"Invalid config content in {config_path}: {e}") from e

    logger.debug(
        "Loaded config from %s (%d collections, %d repositories)",
        config_path,
        len(config.collections),
        len(config.repositories),
    )
    return config


def save_config(config: StatusConfig, path: Path | None = None) -> Path:
    """Save the configuration to a TOML file.

    The file is written atomically through a temporary file in the same
    directory followed by os.replace(). The temporary file is removed on
    failure.

    Args:
        config: The StatusConfig object to save.
        path: Path to save to. If None, uses the default config path.

    Returns:
        Path where the config was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()

    try:
        ensure_config_dir(config_path.parent)
    except RuntimeError as e:
        raise ConfigError(str(e)) from e

    data = _config_to_dict(config)

    tmp_path: Path | None = None
    try:
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        os.replace(str(tmp_path), str(config_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config: {e}") from e

    return config_path


def config_exists(path: Path | None = None) -> bool:
    """Check if a configuration file exists.

    Args:
        path: Path to check. If None, uses the default config path.

    Returns:
        True if the config file exists, False otherwise.
    """
    config_path = path or get_config_path()
    return config_path.exists()


def bootstrap_config(path: Path | None = None) -> bool:
    """Create an empty configuration file if none exists yet.

    Args:
        path: Path of the config file. If None, uses the default config path.

    Returns:
        True if a new file was created, False if one already existed.

    Raises:
        ConfigError: If the file cannot be created.
    """
    config_path = path or get_config_path()
    if config_exists(config_path):
        return False
    save_config(StatusConfig(), config_path)
    logger.debug("Created empty config at %s", config_path)
    return True


def require_config(config_path: Path | None = None) -> StatusConfig:
    """Load the configuration, bootstrapping it on first run.

    If the file does not exist, an empty one is written and the invocation
    ends successfully after telling the user where to find it. Load errors
    are reported and end the invocation with exit code 1.

    Args:
        config_path: Optional custom config path.

    Returns:
        Loaded and validated StatusConfig.

    Raises:
        typer.Exit: If the config was just created or cannot be loaded.
    """
    import typer

    from statusctl.utils.formatting import print_error, print_info

    path = config_path or get_config_path()
    try:
        if bootstrap_config(path):
            print_info(f"Created empty config: {path}")
            print_info("Add collections and repositories to it, then run statusctl again.")
            raise typer.Exit(code=0)
        return load_config(path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


def _config_to_dict(config: StatusConfig) -> dict[str, Any]:
    """Convert a StatusConfig to a dictionary suitable for TOML serialization.

    Args:
        config: The StatusConfig object to convert.

    Returns:
        Dictionary ready for TOML serialization.
    """
    data: dict[str, Any] = {
        "collections": list(config.collections),
        "repositories": list(config.repositories),
    }
    if config.max_workers is not None:
        data["max_workers"] = config.max_workers
    return data
