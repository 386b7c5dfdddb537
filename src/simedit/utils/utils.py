# simedit/utils/utils.py
"""
simedit.utils.utils.py
======================

Configuration helpers for the simedit text core.

Key functionalities include:
- Robust Configuration Loading: an embedded default configuration is
  recursively merged with user settings from `~/.config/simedit/config.toml`
  (or an explicit path), so the core always has usable settings even when
  the user file is missing or corrupted.
- Helper Utilities: deep-merging dictionaries and converting hex colors to
  the nearest xterm-256 palette index.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import toml

logger = logging.getLogger("simedit")

# --- Constants ---
WHITE_FG_IDX = 255

# Hardcoded fallback configuration. User TOML files are merged on top of it.
DEFAULT_CONFIG: Dict[str, Any] = {
    "editor": {"tab_size": 4},
    "logging": {
        "file_level": "DEBUG",
        "console_level": "WARNING",
        "log_to_console": True,
        "separate_error_log": False,
    },
    "colors": {
        "none": "#ffffff",
        "number": "#dc143c",
        "match": "#26a6a2",
        "string": "#d3d3d3",
        "character": "#6cd6cd",
        "comment": "#8c8c8c",
        "multiline_comment": "#8c8c8c",
        "primary_keyword": "#b57cb5",
        "secondary_keyword": "#d3b85e",
    },
    # Extension (without the dot) -> highlighting profile key.
    # Checked before Pygments lexer detection.
    "file_types": {},
}


def user_config_path() -> Path:
    """Location of the per-user configuration file."""
    return Path.home() / ".config" / "simedit" / "config.toml"


def load_config(path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """
    Loads and merges configurations, ensuring the core can always run.

    Args:
        path: Explicit TOML file to merge over the defaults. When omitted the
            per-user file is used if it exists.

    Returns:
        The merged configuration dictionary. A missing or unparsable user file
        leaves the embedded defaults in place.
    """
    final_config = deep_merge({}, DEFAULT_CONFIG)
    logger.debug("Loaded embedded default configuration.")

    config_path = Path(path) if path is not None else user_config_path()
    if config_path.is_file():
        try:
            user_config = toml.load(config_path)
            final_config = deep_merge(final_config, user_config)
            logger.info(f"Successfully loaded and merged user config from {config_path}")
        except Exception as e:
            logger.error(f"Could not parse user config '{config_path}': {e}. Using defaults.")

    return final_config


def deep_merge(base: Dict, override: Dict) -> Dict:
    """
    Recursively merges the `override` dictionary into the `base` dictionary.
    """
    result = base.copy()
    for key, value in override.items():
        if isinstance(result.get(key), dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def hex_to_xterm(hex_color: str) -> int:
    """
    Converts a hexadecimal color string to the nearest xterm-256 color index.
    """
    hex_color = hex_color.lstrip("#")
    if len(hex_color) != 6:
        return WHITE_FG_IDX
    try:
        r, g, b = (int(hex_color[i:i+2], 16) for i in (0, 2, 4))
    except ValueError:
        return WHITE_FG_IDX

    if r == g == b:
        if r < 8: return 16
        if r > 248: return 231
        return round(((r - 8) / 247) * 24) + 232

    return int(
        16
        + (36 * round(r / 255 * 5))
        + (6 * round(g / 255 * 5))
        + round(b / 255 * 5)
    )
