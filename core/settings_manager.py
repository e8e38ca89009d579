import json
import logging
import os
from copy import deepcopy
from pathlib import Path

logger = logging.getLogger(__name__)

DATA_DIR = Path(os.getenv("EVENT_DASHBOARD_DATA_DIR", "data"))
SETTINGS_FILE = DATA_DIR / "user_settings.json"

CARD_COLUMNS_MIN = 1
CARD_COLUMNS_MAX = 3

# UI preferences only. Events themselves are never written to disk.
DEFAULT_SETTINGS = {
    "card_columns": 1,
    "show_key_display": True,
}


def load_settings():
    """Load saved user settings, merged with defaults."""
    merged = deepcopy(DEFAULT_SETTINGS)
    if not SETTINGS_FILE.exists():
        return merged

    try:
        with open(SETTINGS_FILE, "r", encoding="utf-8") as f:
            loaded = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("Ignoring unreadable settings file %s: %s", SETTINGS_FILE, e)
        return merged

    if not isinstance(loaded, dict):
        return merged

    for k, v in loaded.items():
        if k in DEFAULT_SETTINGS:
            merged[k] = v

    # Clamp the card grid to what the layout supports.
    try:
        cols = int(merged.get("card_columns", 1))
    except (TypeError, ValueError):
        cols = DEFAULT_SETTINGS["card_columns"]
    merged["card_columns"] = max(CARD_COLUMNS_MIN, min(cols, CARD_COLUMNS_MAX))

    merged["show_key_display"] = bool(merged.get("show_key_display", True))

    return merged


def save_settings(settings: dict):
    SETTINGS_FILE.parent.mkdir(parents=True, exist_ok=True)
    with open(SETTINGS_FILE, "w", encoding="utf-8") as f:
        json.dump(settings, f, indent=2)
