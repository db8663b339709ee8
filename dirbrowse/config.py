"""Read-only JSON config for browser presentation and the open command.

Stores the opener program, display prefixes, and the parent-entry toggle.
All access is defensive: malformed or missing config falls back to defaults.
Nothing is ever written back.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

from .launcher import DEFAULT_OPENER

logger = logging.getLogger(__name__)

APP_NAME = "dirbrowse"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

DEFAULT_DIRECTORY_PREFIX = "▸ "
DEFAULT_FILE_PREFIX = "  "


@dataclass(frozen=True)
class BrowserSettings:
    """Presentation and launch options for one ``DirectoryBrowser``."""

    opener: str = DEFAULT_OPENER
    directory_prefix: str = DEFAULT_DIRECTORY_PREFIX
    file_prefix: str = DEFAULT_FILE_PREFIX
    show_parent_entry: bool = False


def load_config() -> dict[str, object]:
    """Load the JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except Exception as exc:
        logger.debug("ignoring unreadable config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def _load_str(data: dict[str, object], key: str, default: str, allow_blank: bool = True) -> str:
    value = data.get(key)
    if not isinstance(value, str):
        return default
    if not allow_blank and not value.strip():
        return default
    return value


def load_settings() -> BrowserSettings:
    """Build ``BrowserSettings`` from config, keeping defaults for invalid values."""
    data = load_config()
    show_parent_entry = data.get("show_parent_entry")
    return BrowserSettings(
        opener=_load_str(data, "opener", DEFAULT_OPENER, allow_blank=False).strip(),
        directory_prefix=_load_str(data, "directory_prefix", DEFAULT_DIRECTORY_PREFIX),
        file_prefix=_load_str(data, "file_prefix", DEFAULT_FILE_PREFIX),
        show_parent_entry=show_parent_entry if isinstance(show_parent_entry, bool) else False,
    )


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "BrowserSettings",
    "load_config",
    "load_settings",
]
