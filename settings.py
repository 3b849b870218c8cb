"""JSON-based settings for the calendar report (read-only)."""

import json
import os

from loguru import logger

_SETTINGS_ENV = "CALENDAR_REPORT_SETTINGS"
_SETTINGS_PATH = os.path.join(os.path.expanduser("~"), ".calendar-report-settings.json")

_DEFAULTS = {
    "year": 2025,
    "show_progress": True,
    "show_month_analysis": True,
    "log_level": "WARNING",
}

_LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


def settings_path() -> str:
    """Return the settings file path, honouring the environment override."""
    return os.environ.get(_SETTINGS_ENV) or _SETTINGS_PATH


def load_settings(path: str | None = None) -> dict:
    """Load settings from disk, returning defaults for missing keys."""
    settings = dict(_DEFAULTS)
    path = path or settings_path()
    try:
        with open(path, "r", encoding="utf-8") as f:
            stored = json.load(f)
    except FileNotFoundError:
        return settings
    except (json.JSONDecodeError, OSError) as e:
        logger.warning("Ignoring unreadable settings file {}: {}", path, e)
        return settings

    if not isinstance(stored, dict):
        logger.warning("Ignoring settings file {}: top level is not an object", path)
        return settings
    # bool is a subclass of int, so reject it explicitly for "year"
    if isinstance(stored.get("year"), int) and not isinstance(stored["year"], bool):
        settings["year"] = stored["year"]
    for key in ("show_progress", "show_month_analysis"):
        if key in stored and isinstance(stored[key], bool):
            settings[key] = stored[key]
    level = stored.get("log_level")
    if isinstance(level, str) and level.upper() in _LOG_LEVELS:
        settings["log_level"] = level.upper()
    return settings
