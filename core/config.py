# core/config.py

"""
Settings for the Attendance Tracker.

Defaults live on the `Settings` dataclass. An optional JSON file in the working
directory may override any of them, e.g.:

    {
        "data_file": "attendance_data.txt",
        "log_file": "logs/tracker.log",
        "log_level": "INFO",
        "debug": false
    }

Unknown keys and values of the wrong type are ignored. A missing file is not an error; an unreadable or
malformed file falls back to the defaults.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, fields, replace
from typing import Any

from core.logger import get_logger

DEFAULT_CONFIG_FILE = "tracker_config.json"
DEFAULT_DATA_FILE = "attendance_data.txt"

logger = get_logger("config")

# JSON types accepted for each setting
SETTING_TYPES: dict[str, tuple[type, ...]] = {
    "data_file": (str,),
    "log_file": (str, type(None)),
    "log_level": (str,),
    "debug": (bool,),
}


@dataclass(frozen=True)
class Settings:
    data_file: str = DEFAULT_DATA_FILE
    log_file: str | None = None
    log_level: str = "WARNING"
    debug: bool = False


def load_settings(config_file: str = DEFAULT_CONFIG_FILE) -> Settings:
    """
    Loads `Settings` from a JSON file, falling back to defaults.

    Args:
        config_file (str): Path to the JSON configuration file.

    Returns:
        A `Settings` instance with any recognized keys from the file applied.
    """
    settings = Settings()

    if not os.path.exists(config_file):
        return settings

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            raw = json.load(f)

    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        logger.warning(f"Could not read {config_file}: {e}. Using defaults.")
        return settings

    if not isinstance(raw, dict):
        logger.warning(f"{config_file} must contain a JSON object. Using defaults.")
        return settings

    return apply_overrides(settings, raw)


def apply_overrides(settings: Settings, overrides: dict[str, Any]) -> Settings:
    known = {f.name for f in fields(Settings)}
    accepted = {}

    for key, value in overrides.items():
        if key not in known:
            continue

        if not isinstance(value, SETTING_TYPES[key]):
            logger.warning(f"Ignoring setting {key}: unexpected value {value!r}")
            continue

        accepted[key] = value

    for key in overrides.keys() - known:
        logger.debug(f"Ignoring unknown setting: {key}")

    return replace(settings, **accepted)
