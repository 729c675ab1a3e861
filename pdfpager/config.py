"""Read-only JSON config.

Supplies defaults for page size and theme. Access is defensive: a missing,
unreadable or malformed file behaves like an empty config. The viewer never
writes this file.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from platformdirs import user_config_dir

from .document import DEFAULT_LINES_PER_PAGE

logger = logging.getLogger(__name__)

APP_NAME = "pdfpager"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


def load_config() -> dict[str, object]:
    """Load the JSON config object, or an empty dict when unavailable."""
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.warning("ignoring unreadable config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def load_lines_per_page() -> int:
    """Return configured lines per page for form-feed-free text.

    Booleans, non-integers and values below 1 fall back to the default.
    """
    value = load_config().get("lines_per_page")
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        return DEFAULT_LINES_PER_PAGE
    return value


def load_theme_name() -> str | None:
    """Load configured UI theme name, returning ``None`` when unset/invalid."""
    value = load_config().get("theme")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None
