"""Theme management for statusctl CLI.

Colors live in code as ThemeColors defaults. A user may override any of
them from the [colors] table of theme.toml in the config directory; a
broken or invalid file is logged and the defaults are used instead.
"""

import logging
import re
import tomllib
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from rich.theme import Theme

from statusctl.core.paths import get_theme_path

logger = logging.getLogger(__name__)

_HEX_COLOR = re.compile(r"#(?:[0-9a-fA-F]{3}){1,2}")


class ThemeColors(BaseModel):
    """Colors used by the console, as #RGB or #RRGGBB hex codes."""

    model_config = ConfigDict(extra="forbid")

    # Messages
    muted: str = "#b2bec3"
    header: str = "#69B9A1"
    success: str = "#03b971"
    warning: str = "#f5b332"
    error: str = "#f53263"
    info: str = "#0ec1c8"

    # Report labels, one per outcome kind
    clean: str = "#03b971"
    unclean: str = "#f5b332"
    repo_error: str = "#f53263"
    unknown: str = "#d44ebc"

    @field_validator("*", mode="before")
    @classmethod
    def _check_hex(cls, value: object) -> str:
        if not isinstance(value, str) or not _HEX_COLOR.fullmatch(value.strip()):
            msg = f"expected a #RGB or #RRGGBB color, got {value!r}"
            raise ValueError(msg)
        return value.strip()


def _read_overrides(path: Path) -> dict[str, object]:
    """Return the [colors] table of a theme file, or {} when unusable."""
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        return {}
    except (tomllib.TOMLDecodeError, OSError) as e:
        logger.warning("Ignoring theme file %s: %s", path, e)
        return {}

    colors = data.get("colors", {})
    if not isinstance(colors, dict):
        logger.warning("Ignoring theme file %s: [colors] must be a table", path)
        return {}
    return colors


def load_theme(path: Path | None = None) -> ThemeColors:
    """Load theme colors with user overrides applied.

    Args:
        path: Theme file to read. Defaults to ~/.config/statusctl/theme.toml.

    Returns:
        ThemeColors with overrides, or the defaults if the overrides are invalid.
    """
    theme_path = path or get_theme_path()
    overrides = _read_overrides(theme_path)
    if not overrides:
        return ThemeColors()

    try:
        colors = ThemeColors.model_validate(overrides)
    except ValidationError as e:
        logger.warning("Invalid colors in %s, using defaults: %s", theme_path, e)
        return ThemeColors()
    logger.debug("Loaded %d color overrides from %s", len(overrides), theme_path)
    return colors


def get_rich_theme(colors: ThemeColors | None = None) -> Theme:
    """Build the Rich Theme used by the shared consoles.

    Outcome styles are named outcome.<kind value> so report lines can look
    them up from OutcomeKind directly.
    """
    colors = colors or load_theme()
    return Theme(
        {
            "muted": colors.muted,
            "header": f"bold {colors.header}",
            "success": colors.success,
            "warning": colors.warning,
            "error": f"bold {colors.error}",
            "info": colors.info,
            "outcome.clean": colors.clean,
            "outcome.unclean": f"bold {colors.unclean}",
            "outcome.error": colors.repo_error,
            "outcome.unknown": f"bold {colors.unknown}",
        }
    )


_cached_theme: Theme | None = None


def get_theme() -> Theme:
    """Get the Rich theme, loading it on first use."""
    global _cached_theme
    if _cached_theme is None:
        _cached_theme = get_rich_theme()
    return _cached_theme
