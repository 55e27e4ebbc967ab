"""Persistent JSON config helpers.

Stores display settings (status highlighting and quick-select keys).
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

from .scope import DEFAULT_QUICK_SELECT, Settings

APP_NAME = "tagview"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except Exception:
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Any filesystem/serialization error is ignored to keep callers
    non-fatal when config cannot be written.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except Exception:
        pass


def load_status() -> bool:
    """Return whether the current scope is highlighted; defaults to ``True``.

    Only explicit boolean values are accepted.
    """
    value = load_config().get("status")
    return value if isinstance(value, bool) else True


def load_quick_select() -> str:
    """Return configured quick-select characters, or the default set."""
    value = load_config().get("quick_select")
    if not isinstance(value, str) or not value.strip():
        return DEFAULT_QUICK_SELECT
    return value.strip()


def load_settings() -> Settings:
    return Settings(status=load_status(), quick_select=load_quick_select())


def save_settings(settings: Settings) -> None:
    """Persist display settings, keeping unrelated keys intact."""
    config = load_config()
    config["status"] = bool(settings.status)
    config["quick_select"] = settings.quick_select
    save_config(config)
