"""Configuration management for Exit Calc.

Configuration lives in one directory:

1. settings.json - Machine-specific preferences
   - fiscal_year: policy year used by the CLI and MCP server
   - output_format: default CLI output ('text' or 'json')

2. policy/<year>.yaml - Optional fiscal-year policy overrides
   - Replaces the built-in policy for that year wholesale

Config directory resolution:
1. EXIT_CALC_CONFIG_PATH environment variable (if set)
2. ~/.config/exit-calc/ (XDG_CONFIG_HOME fallback)
"""

import json
import os
from pathlib import Path
from typing import Any


APP_NAME = "exit-calc"
SETTINGS_FILENAME = "settings.json"
POLICY_DIRNAME = "policy"

OUTPUT_FORMATS = ("text", "json")


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Resolution order:
    1. EXIT_CALC_CONFIG_PATH environment variable
    2. ~/.config/exit-calc/ (XDG_CONFIG_HOME)

    Returns:
        Path to the configuration directory
    """
    # 1. Check environment variable
    env_path = os.environ.get("EXIT_CALC_CONFIG_PATH")
    if env_path:
        return Path(env_path)

    # 2. Fall back to XDG config path
    xdg_config_home = os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")
    return Path(xdg_config_home) / APP_NAME


def get_settings_path() -> Path:
    """Get the path to settings.json (may not exist yet)."""
    return get_config_dir() / SETTINGS_FILENAME


def get_policy_dir() -> Path:
    """Get the directory holding policy/<year>.yaml overrides."""
    return get_config_dir() / POLICY_DIRNAME


def load_settings() -> dict:
    """Load settings from settings.json.

    Returns:
        Settings dictionary (empty dict if file doesn't exist)
    """
    settings_file = get_settings_path()

    if not settings_file.exists():
        return {}

    with open(settings_file, "r") as f:
        return json.load(f)


def save_settings(settings: dict) -> Path:
    """Save settings to settings.json.

    Args:
        settings: Settings dictionary to save

    Returns:
        Path to the saved settings file
    """
    config_dir = get_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)

    settings_file = config_dir / SETTINGS_FILENAME

    with open(settings_file, "w") as f:
        json.dump(settings, f, indent=2)

    return settings_file


def get_setting(key: str, default: Any = None) -> Any:
    """Get a setting value from settings.json.

    Args:
        key: Setting key (e.g., "fiscal_year", "output_format")
        default: Default value if key not found

    Returns:
        Setting value or default
    """
    settings = load_settings()
    return settings.get(key, default)


def set_setting(key: str, value: Any) -> Path:
    """Set a setting value in settings.json.

    Returns:
        Path to the saved settings file
    """
    settings = load_settings()
    settings[key] = value
    return save_settings(settings)


def clear_setting(key: str) -> bool:
    """Remove a setting from settings.json.

    Returns:
        True if the key was present
    """
    settings = load_settings()
    if key not in settings:
        return False
    del settings[key]
    save_settings(settings)
    return True
