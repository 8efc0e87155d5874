"""Read-only JSON preferences.

Holds the UI theme name and the size-unit preference. The file is edited by
hand; lazydu never writes it. Malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "lazydu"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

log = logging.getLogger(__name__)


def load_config() -> dict[str, object]:
    """Load the JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        log.warning("ignoring config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def load_theme_name(config: dict[str, object] | None = None) -> str | None:
    """Load configured UI theme name, returning ``None`` when unset/invalid.

    ``config`` is a dict already returned by ``load_config``; the file is read
    only when it is omitted.
    """
    if config is None:
        config = load_config()
    value = config.get("theme")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def load_binary_units(config: dict[str, object] | None = None) -> bool:
    """Return whether sizes should use 1024-based units.

    Only explicit boolean values are accepted; anything else means ``False``.
    """
    if config is None:
        config = load_config()
    value = config.get("binary_units")
    return value if isinstance(value, bool) else False


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "load_config",
    "load_theme_name",
    "load_binary_units",
]
