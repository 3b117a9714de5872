"""Application settings stored in ``data/settings.json``.

The file holds an ordered list of ``{"key", "value", "type"}`` entries.  It is
read once and cached.  Defaults are written on first run.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List

from . import DEFAULT_EXERCISE_COUNT, DEFAULT_LANGUAGE, LANGUAGES, LONG_PRESS_MS
from .workout_selector import clamp_count

SETTINGS_PATH = Path(__file__).resolve().parents[1] / "data" / "settings.json"

DEFAULT_SETTINGS: List[Dict[str, Any]] = [
    {"key": "default_language", "value": DEFAULT_LANGUAGE, "type": "option"},
    {"key": "default_exercise_count", "value": DEFAULT_EXERCISE_COUNT, "type": "int"},
    {"key": "long_press_ms", "value": LONG_PRESS_MS, "type": "int"},
]

_settings_cache: List[Dict[str, Any]] | None = None


def load_settings() -> List[Dict[str, Any]]:
    """Read :data:`SETTINGS_PATH`, writing the defaults if it is unusable."""
    if SETTINGS_PATH.exists():
        try:
            with SETTINGS_PATH.open("r", encoding="utf-8") as fh:
                data = json.load(fh)
            if isinstance(data, list):
                return data
        except (OSError, ValueError):
            logging.warning("Settings file %s unreadable, using defaults", SETTINGS_PATH)
    defaults = [dict(item) for item in DEFAULT_SETTINGS]
    save_settings(defaults)
    return defaults


def save_settings(settings: List[Dict[str, Any]]) -> None:
    SETTINGS_PATH.parent.mkdir(parents=True, exist_ok=True)
    with SETTINGS_PATH.open("w", encoding="utf-8") as fh:
        json.dump(settings, fh)


def get_settings() -> List[Dict[str, Any]]:
    """Return the cached settings list, loading from disk if needed."""
    global _settings_cache
    if _settings_cache is None:
        _settings_cache = load_settings()
    return _settings_cache


def clear_cache() -> None:
    global _settings_cache
    _settings_cache = None


def get_value(key: str, default: Any = None) -> Any:
    for item in get_settings():
        if item.get("key") == key:
            return item.get("value")
    return default


# Typed accessors.  Out-of-range values fall back to the built-in defaults.

def default_language() -> str:
    value = get_value("default_language", DEFAULT_LANGUAGE)
    return value if value in LANGUAGES else DEFAULT_LANGUAGE


def default_exercise_count() -> int:
    value = get_value("default_exercise_count", DEFAULT_EXERCISE_COUNT)
    if not isinstance(value, int) or isinstance(value, bool):
        return DEFAULT_EXERCISE_COUNT
    return clamp_count(value)


def long_press_ms() -> int:
    value = get_value("long_press_ms", LONG_PRESS_MS)
    if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
        return LONG_PRESS_MS
    return value
